"""Auth service: registration, login and stateless token verification."""
from __future__ import annotations

import logging
import re

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Settings
from app.core.errors import (
    DuplicateIdentity,
    InvalidCredentials,
    InvalidInput,
    NotFound,
    Unauthenticated,
)
from app.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    make_password_context,
    verify_password,
)
from app.models.user import User
from app.services.users import UserStore

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_BYTES = 72  # bcrypt hard limit


def normalize_email(email: str | None) -> str:
    return (email or "").strip().lower()


class AuthService:
    """Holds the signing secret and password context for the process lifetime."""

    def __init__(self, settings: Settings):
        if not settings.secret_key:
            raise ValueError("secret_key must be configured")
        self._secret_key = settings.secret_key
        self._algorithm = settings.algorithm
        self._expire_minutes = settings.access_token_expire_minutes
        self.pwd_context = make_password_context(settings.bcrypt_rounds)

    async def register(self, db: AsyncSession, email: str, password: str) -> User:
        email_norm = normalize_email(email)
        pwd = password or ""

        if not email_norm or not EMAIL_RE.match(email_norm):
            raise InvalidInput("Invalid email address.")
        if len(pwd) < MIN_PASSWORD_LENGTH:
            raise InvalidInput(f"Password must be at least {MIN_PASSWORD_LENGTH} characters.")
        if len(pwd.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise InvalidInput(f"Password must be at most {MAX_PASSWORD_BYTES} bytes.")

        users = UserStore(db)
        if await users.get_by_email(email_norm) is not None:
            raise DuplicateIdentity()

        try:
            user = await users.create(email_norm, hash_password(self.pwd_context, pwd))
        except IntegrityError:
            # lost a race with a concurrent registration
            await db.rollback()
            raise DuplicateIdentity()

        logger.info("Registered user id=%s", user.id)
        return user

    async def login(self, db: AsyncSession, email: str, password: str) -> tuple[str, User]:
        email_norm = normalize_email(email)
        user = await UserStore(db).get_by_email(email_norm)
        if user is None:
            logger.info("Login failed: unknown email %s", email_norm)
            raise NotFound()
        if not verify_password(self.pwd_context, password or "", user.hashed_password):
            logger.info("Login failed: bad password for user id=%s", user.id)
            raise InvalidCredentials()
        return self.issue_token(user.id), user

    def issue_token(self, user_id: int) -> str:
        return create_access_token(
            user_id,
            self._secret_key,
            algorithm=self._algorithm,
            expires_minutes=self._expire_minutes,
        )

    def verify_token(self, token: str | None) -> int:
        """Resolve a token to its user id without touching the store."""
        if not token or not token.strip():
            raise Unauthenticated()
        claims = decode_access_token(token.strip(), self._secret_key, self._algorithm)
        if claims is None or claims.get("type") != "access":
            raise Unauthenticated("Invalid or expired token.")
        try:
            return int(claims["sub"])
        except (KeyError, TypeError, ValueError):
            raise Unauthenticated("Invalid or expired token.")
