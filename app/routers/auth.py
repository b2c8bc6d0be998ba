"""Auth routes: register and login. Returns a bearer token on login."""
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.schemas.auth import CredentialsSchema, LoginUserSchema, TokenOutSchema, UserOutSchema
from app.services.auth import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


@router.post("/register", response_model=UserOutSchema, status_code=201)
async def register(
    body: CredentialsSchema,
    db: Annotated[AsyncSession, Depends(get_db)],
    auth: Annotated[AuthService, Depends(get_auth_service)],
):
    """Create a user; the password is stored only as a bcrypt hash."""
    user = await auth.register(db, body.email, body.password)
    return UserOutSchema.model_validate(user)


@router.post("/login", response_model=TokenOutSchema)
async def login(
    body: CredentialsSchema,
    db: Annotated[AsyncSession, Depends(get_db)],
    auth: Annotated[AuthService, Depends(get_auth_service)],
):
    """Check credentials and issue a signed, time-limited token."""
    token, user = await auth.login(db, body.email, body.password)
    return TokenOutSchema(token=token, user=LoginUserSchema(email=user.email))
