"""Password hashing (bcrypt via passlib) and JWT access tokens (python-jose)."""
from datetime import datetime, timedelta, timezone
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext


def make_password_context(rounds: int = 12) -> CryptContext:
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


def hash_password(pwd_context: CryptContext, password: str) -> str:
    return pwd_context.hash(password)


def verify_password(pwd_context: CryptContext, plain: str, hashed: str) -> bool:
    # constant-time comparison happens inside passlib
    return pwd_context.verify(plain, hashed)


def create_access_token(
    subject: str | int,
    secret_key: str,
    algorithm: str = "HS256",
    expires_minutes: int = 120,
    extra: dict[str, Any] | None = None,
    now: datetime | None = None,
) -> str:
    """Sign a token carrying the subject, issue time and expiry."""
    issued = now or datetime.now(timezone.utc)
    expire = issued + timedelta(minutes=expires_minutes)
    to_encode = {"sub": str(subject), "iat": issued, "exp": expire, "type": "access"}
    if extra:
        to_encode.update(extra)
    return jwt.encode(to_encode, secret_key, algorithm=algorithm)


def decode_access_token(token: str, secret_key: str, algorithm: str = "HS256") -> dict | None:
    """Return the claims if the signature and expiry check out; None otherwise."""
    try:
        return jwt.decode(token, secret_key, algorithms=[algorithm])
    except JWTError:
        return None
