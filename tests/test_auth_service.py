from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import func, select

from app.core.config import Settings
from app.core.errors import (
    DuplicateIdentity,
    InvalidCredentials,
    InvalidInput,
    NotFound,
    Unauthenticated,
)
from app.core.security import create_access_token
from app.models.user import User
from app.services.auth import AuthService

from .conftest import TEST_SECRET


@pytest.mark.asyncio
async def test_register_then_login_yields_verifiable_token(db, auth_service):
    user = await auth_service.register(db, "Alice@Example.com ", "secret123")
    assert user.id is not None
    assert user.email == "alice@example.com"
    assert user.hashed_password != "secret123"

    token, logged_in = await auth_service.login(db, "alice@example.com", "secret123")
    assert logged_in.id == user.id
    assert auth_service.verify_token(token) == user.id


@pytest.mark.asyncio
async def test_duplicate_email_is_rejected_without_new_row(db, auth_service):
    await auth_service.register(db, "bob@example.com", "secret123")
    with pytest.raises(DuplicateIdentity):
        await auth_service.register(db, "BOB@example.com", "another-pass")

    count = await db.scalar(select(func.count(User.id)))
    assert count == 1


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "email,password",
    [
        ("", "secret123"),
        ("not-an-email", "secret123"),
        ("carol@example.com", ""),
        ("carol@example.com", "short"),
        ("carol@example.com", "x" * 73),
    ],
)
async def test_register_rejects_malformed_input(db, auth_service, email, password):
    with pytest.raises(InvalidInput):
        await auth_service.register(db, email, password)


@pytest.mark.asyncio
async def test_login_unknown_email(db, auth_service):
    with pytest.raises(NotFound):
        await auth_service.login(db, "nobody@example.com", "secret123")


@pytest.mark.asyncio
async def test_login_wrong_password(db, auth_service):
    await auth_service.register(db, "dave@example.com", "secret123")
    with pytest.raises(InvalidCredentials):
        await auth_service.login(db, "dave@example.com", "secret124")


@pytest.mark.parametrize("token", [None, "", "   ", "garbage", "a.b.c"])
def test_verify_token_rejects_missing_or_malformed(auth_service, token):
    with pytest.raises(Unauthenticated):
        auth_service.verify_token(token)


def test_verify_token_rejects_expired(auth_service):
    issued = datetime.now(timezone.utc) - timedelta(hours=2, minutes=1)
    token = create_access_token(7, TEST_SECRET, expires_minutes=120, now=issued)
    with pytest.raises(Unauthenticated):
        auth_service.verify_token(token)


def test_verify_token_rejects_other_secret(auth_service):
    other = AuthService(Settings(secret_key="someone-else", bcrypt_rounds=4))
    with pytest.raises(Unauthenticated):
        auth_service.verify_token(other.issue_token(7))


def test_verify_token_rejects_non_numeric_subject(auth_service):
    token = create_access_token("admin", TEST_SECRET)
    with pytest.raises(Unauthenticated):
        auth_service.verify_token(token)


def test_tokens_expire_after_configured_horizon(settings):
    service = AuthService(settings.model_copy(update={"access_token_expire_minutes": -1}))
    with pytest.raises(Unauthenticated):
        service.verify_token(service.issue_token(1))
