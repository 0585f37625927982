"""
api/routes/auth.py -- Session authentication REST endpoints.

Routes:
  POST /api/auth/login   -- check email/password; returns a session token
  GET  /api/auth/check   -- 200 if the bearer token is a live session, else 401
  POST /api/auth/logout  -- ends the session; always 200

Security:
  POST /login is rate-limited per client IP (LOGIN_RATE_LIMIT, default 10/minute).
  Credential comparison is constant-time -- go through AuthService.login(), never
  compare inline.
  Wrong email and wrong password produce the same 401 body.
  Cache-Control: no-store on login responses so the token is never cached.
  Logout needs no prior auth and never fails -- it is always safe to call.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from api.limiter import limiter
from api.models import LoginRequest, LoginResponse, OkResponse
from auth.dependencies import bearer_token, get_auth_service, require_session
from auth.service import AuthService
from core.config import get_settings

# Auth policy:
# - POST /api/auth/login:   public -- login endpoint must be unauthenticated
# - GET  /api/auth/check:   requires a live session (require_session)
# - POST /api/auth/logout:  public -- removing an unknown token is a no-op
router = APIRouter()


# Static limit string: SlowAPIMiddleware only enforces limits registered at import time.
@limiter.limit(get_settings().login_rate_limit)  # must be ABOVE @router to preserve FastAPI introspection
@router.post("/auth/login", response_model=LoginResponse)
def login(
    request: Request,
    body: Optional[LoginRequest] = None,
    service: AuthService = Depends(get_auth_service),
) -> JSONResponse:
    """Authenticate with the configured email and password.

    A missing body is treated like an empty one (400). AuthError raised by
    the service is rendered by the handler in api/main.py.
    """
    body = body or LoginRequest()
    token = service.login(body.email, body.password)
    resp = JSONResponse(status_code=200, content=LoginResponse(token=token).model_dump())
    resp.headers["Cache-Control"] = "no-store"
    return resp


@router.get("/auth/check", response_model=OkResponse)
def check(token: str = Depends(require_session)) -> OkResponse:
    """Confirm the bearer token belongs to a live session."""
    return OkResponse()


@router.post("/auth/logout", response_model=OkResponse)
def logout(request: Request, service: AuthService = Depends(get_auth_service)) -> OkResponse:
    """End the session named by the bearer token, if any."""
    service.logout(bearer_token(request))
    return OkResponse()
