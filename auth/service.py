"""
auth/service.py -- Login/logout flow over the validator, issuer and store.

States per client: Unauthenticated, Authenticated(token).

  login, credentials match     -> Authenticated(token); token issued and stored
  login, credentials rejected  -> Unauthenticated; AuthenticationError, no token
  logout                       -> Unauthenticated; token removed (idempotent)
  process restart              -> every client Unauthenticated at once

There is no refresh transition. A client that lost its token logs in again.

The token is added to the store before login() returns, so the HTTP response
that carries it is only sent once a follow-up request can be authorized with it.

Layer rule: no imports from api/.
"""

from __future__ import annotations

import logging

from auth.credentials import CredentialValidator
from auth.errors import AuthenticationError, ValidationError
from auth.store import SessionRepository
from auth.tokens import issue_token

logger = logging.getLogger("cardengine.auth")


class AuthService:
    def __init__(self, validator: CredentialValidator, store: SessionRepository) -> None:
        self.validator = validator
        self.store = store

    def login(self, email: str | None, password: str | None) -> str:
        """Verify credentials and open a session. Returns the new token.

        Raises:
            ValidationError:     email or password missing or empty.
            AuthenticationError: credentials do not match. The message does
                                 not say which field was wrong.
        """
        if not email or not password:
            raise ValidationError()

        if not self.validator.validate(email, password):
            logger.warning("Login rejected: bad credentials")
            raise AuthenticationError("Invalid email or password.")

        token = issue_token()
        self.store.add(token)
        logger.info("Login succeeded (active sessions: %d)", len(self.store))
        return token

    def check(self, token: str | None) -> bool:
        return self.store.contains(token)

    def logout(self, token: str | None) -> None:
        """End a session. Never raises, whether or not the token was live."""
        if token:
            self.store.remove(token)
        logger.info("Logout (active sessions: %d)", len(self.store))
