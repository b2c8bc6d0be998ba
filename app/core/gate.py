"""Authorization gate: resolves the caller's user id before any task operation runs."""
from __future__ import annotations

import logging
from typing import Protocol

from fastapi import Request

from app.core.errors import Forbidden, Unauthenticated
from app.services.auth import AuthService

logger = logging.getLogger(__name__)

BEARER_SCHEME = "bearer"


class AuthGate(Protocol):
    def authorize(self, request: Request) -> int:
        """Return the authenticated user id or raise."""
        ...


class BearerTokenGate:
    """Checks `Authorization: Bearer <token>` against the auth service."""

    def __init__(self, auth_service: AuthService):
        self.auth_service = auth_service

    @staticmethod
    def extract_token(header: str | None) -> str | None:
        if header is None or not header.strip():
            return None
        scheme, _, rest = header.strip().partition(" ")
        if scheme.lower() == BEARER_SCHEME:
            # a scheme with no credential counts as absent
            return rest.strip() or None
        return header.strip()

    def authorize(self, request: Request) -> int:
        token = self.extract_token(request.headers.get("Authorization"))
        if token is None:
            raise Unauthenticated()
        try:
            user_id = self.auth_service.verify_token(token)
        except Unauthenticated:
            logger.info("Rejected token on %s %s", request.method, request.url.path)
            raise Forbidden()
        request.state.user_id = user_id
        return user_id


def current_user_id(request: Request) -> int:
    """FastAPI dependency running the app's configured gate."""
    gate: AuthGate = request.app.state.auth_gate
    return gate.authorize(request)
