"""
tests/test_auth_service.py -- Unit tests for the login/logout flow and the bearer guard.

Coverage:
  - AuthService.login(): token issued and stored; ValidationError / AuthenticationError paths
  - AuthService.logout(): idempotent, never raises
  - N concurrent logins produce N distinct live tokens
  - extract_bearer_token(): scheme stripping rules
  - require_session(): raises AuthenticationError for missing/unknown tokens
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from types import SimpleNamespace

import pytest

from auth.dependencies import extract_bearer_token, require_session
from auth.errors import AuthenticationError, ValidationError
from auth.service import AuthService
from auth.store import InMemorySessionStore

EMAIL = "a@b.com"
PASSWORD = "secret"


class TestLogin:
    def test_success_stores_token(self, auth_service: AuthService, session_store: InMemorySessionStore) -> None:
        token = auth_service.login(EMAIL, PASSWORD)
        assert token
        assert session_store.contains(token)
        assert auth_service.check(token)

    @pytest.mark.parametrize("email,password", [(None, PASSWORD), (EMAIL, None), ("", PASSWORD), (EMAIL, "")])
    def test_missing_field_raises_validation_error(
        self, auth_service: AuthService, session_store: InMemorySessionStore, email, password
    ) -> None:
        with pytest.raises(ValidationError) as exc_info:
            auth_service.login(email, password)
        assert exc_info.value.status_code == 400
        assert len(session_store) == 0

    @pytest.mark.parametrize("email,password", [(EMAIL, "nope"), ("nope@b.com", PASSWORD)])
    def test_bad_credentials_raise_and_store_nothing(
        self, auth_service: AuthService, session_store: InMemorySessionStore, email: str, password: str
    ) -> None:
        with pytest.raises(AuthenticationError) as exc_info:
            auth_service.login(email, password)
        assert exc_info.value.status_code == 401
        assert "email or password" in exc_info.value.message
        assert len(session_store) == 0

    def test_concurrent_logins_distinct(self, auth_service: AuthService, session_store: InMemorySessionStore) -> None:
        n = 200
        with ThreadPoolExecutor(max_workers=16) as pool:
            tokens = list(pool.map(lambda _: auth_service.login(EMAIL, PASSWORD), range(n)))
        assert len(set(tokens)) == n
        assert len(session_store) == n


class TestLogout:
    def test_logout_removes_token(self, auth_service: AuthService) -> None:
        token = auth_service.login(EMAIL, PASSWORD)
        auth_service.logout(token)
        assert not auth_service.check(token)

    @pytest.mark.parametrize("token", [None, "", "never-issued"])
    def test_logout_never_raises(self, auth_service: AuthService, token) -> None:
        auth_service.logout(token)
        auth_service.logout(token)

    def test_unissued_token_never_valid(self, auth_service: AuthService) -> None:
        auth_service.login(EMAIL, PASSWORD)
        assert not auth_service.check("0" * 64)
        assert not auth_service.check(None)


class TestExtractBearerToken:
    @pytest.mark.parametrize(
        "header,expected",
        [
            ("Bearer abc", "abc"),
            ("abc", "abc"),
            ("Bearer ", None),
            ("", None),
            (None, None),
            ("bearer abc", "bearer abc"),
            ("Bearer Bearer abc", "Bearer abc"),
        ],
    )
    def test_extract(self, header, expected) -> None:
        assert extract_bearer_token(header) == expected


def _request(store: InMemorySessionStore, headers: dict[str, str]) -> SimpleNamespace:
    """Minimal stand-in for a Starlette Request: .headers and .app.state."""
    return SimpleNamespace(headers=headers, app=SimpleNamespace(state=SimpleNamespace(session_store=store)))


class TestRequireSession:
    def test_live_token_passes(self, session_store: InMemorySessionStore) -> None:
        session_store.add("tok")
        assert require_session(_request(session_store, {"Authorization": "Bearer tok"})) == "tok"

    @pytest.mark.parametrize("headers", [{}, {"Authorization": ""}, {"Authorization": "Bearer other"}])
    def test_rejected(self, session_store: InMemorySessionStore, headers: dict[str, str]) -> None:
        session_store.add("tok")
        with pytest.raises(AuthenticationError):
            require_session(_request(session_store, headers))

    def test_guard_has_no_side_effects(self, session_store: InMemorySessionStore) -> None:
        session_store.add("tok")
        require_session(_request(session_store, {"Authorization": "tok"}))
        with pytest.raises(AuthenticationError):
            require_session(_request(session_store, {"Authorization": "unknown"}))
        assert len(session_store) == 1
