"""
auth/dependencies.py -- FastAPI Depends() helpers for authentication.

The Authorization header is the only auth method:
  Authorization: Bearer <token>   -- the normal form.
  Authorization: <token>          -- tolerated for clients that omit the scheme.

bearer_token() is the soft variant (returns None when no token is present).
require_session() wraps it and raises AuthenticationError (HTTP 401) if the
token is missing or not in the session store. Neither has side effects.

The session store is read from request.app.state.session_store, which the
application lifespan populates. Guards never hold their own reference.

Layer rule: auth/dependencies.py may import from fastapi (for Request)
because this module is part of the FastAPI dependency injection system.
"""

from __future__ import annotations

from fastapi import Request

from auth.errors import AuthenticationError
from auth.service import AuthService
from auth.store import SessionRepository

BEARER_PREFIX = "Bearer "


def extract_bearer_token(header: str | None) -> str | None:
    """Return the token carried by an Authorization header value.

    Strips the literal "Bearer " prefix when present; any other value is
    treated as the raw token. Empty headers yield None.
    """
    if not header:
        return None
    token = header[len(BEARER_PREFIX) :] if header.startswith(BEARER_PREFIX) else header
    return token or None


def get_session_store(request: Request) -> SessionRepository:
    return request.app.state.session_store


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


def bearer_token(request: Request) -> str | None:
    """Extract the session token from the request. Never raises."""
    return extract_bearer_token(request.headers.get("Authorization"))


def require_session(request: Request) -> str:
    """Require a live session. Raises AuthenticationError (401) otherwise.

    Use as a FastAPI dependency:
        @router.get("/protected")
        async def route(token: str = Depends(require_session)): ...
    """
    token = bearer_token(request)
    if not get_session_store(request).contains(token):
        raise AuthenticationError()
    return token
