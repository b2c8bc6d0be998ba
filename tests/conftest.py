# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.db.base import Base
from app.db.session import make_engine, make_sessionmaker
from app.main import create_app
from app.services.auth import AuthService

TEST_SECRET = "test-secret-key"


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a per-test SQLite file, with cheap bcrypt."""
    return Settings(
        secret_key=TEST_SECRET,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'tasks.db'}",
        bcrypt_rounds=4,
        log_level="WARNING",
    )


@pytest.fixture()
def app(settings: Settings):
    return create_app(settings)


@pytest.fixture()
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def auth_service(settings: Settings) -> AuthService:
    return AuthService(settings)


@pytest_asyncio.fixture()
async def db(settings: Settings):
    """A real AsyncSession on a fresh schema."""
    engine = make_engine(settings.database_url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    async with make_sessionmaker(engine)() as session:
        yield session
    await engine.dispose()


def register_and_login(client: TestClient, email: str, password: str = "secret123") -> str:
    """Register a user through the API and return a bearer header value."""
    r = client.post("/auth/register", json={"email": email, "password": password})
    assert r.status_code == 201, r.text
    r = client.post("/auth/login", json={"email": email, "password": password})
    assert r.status_code == 200, r.text
    return f"Bearer {r.json()['token']}"
