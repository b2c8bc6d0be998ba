"""Task Tracker - FastAPI app factory and entry point."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import Settings, get_settings
from app.core.errors import register_error_handlers
from app.core.gate import BearerTokenGate
from app.core.logging_setup import log_requests, setup_logging
from app.db.base import Base
from app.db.session import make_engine, make_sessionmaker
from app.routers import auth, tasks
from app.services.auth import AuthService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = app.state.engine
    # create tables (async)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database ready: %s", engine.url.render_as_string(hide_password=True))

    yield

    await engine.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the app. Without explicit settings they come from env / .env,
    and a missing SECRET_KEY stops startup with a validation error."""
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="Personal task tracking API",
        debug=settings.debug,
        lifespan=lifespan,
    )

    engine = make_engine(settings.database_url, echo=settings.debug)
    auth_service = AuthService(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.sessionmaker = make_sessionmaker(engine)
    app.state.auth_service = auth_service
    app.state.auth_gate = BearerTokenGate(auth_service)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests)
    register_error_handlers(app)

    app.include_router(auth.router)
    app.include_router(tasks.router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


def run() -> None:
    """Console entry point: serve the app factory with uvicorn."""
    import uvicorn

    uvicorn.run("app.main:create_app", factory=True, host="0.0.0.0", port=5001)
