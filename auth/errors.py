"""
auth/errors.py -- Exception types raised by the auth layer.

Two error kinds only:
  ValidationError      -- malformed login request (missing email/password). HTTP 400.
  AuthenticationError  -- wrong credentials, or absent/unknown token. HTTP 401.

Both carry their own status code and a machine-readable code so api/main.py
can turn any AuthError into the shared error envelope with one handler.
AuthenticationError messages are deliberately generic: the client never
learns whether the email, the password, or the token was wrong.
"""

from __future__ import annotations


class AuthError(Exception):
    """Base class for per-request auth failures. Never fatal to the process."""

    status_code: int = 400
    code: str = "auth_error"
    message: str = "Authentication failed."

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(AuthError):
    status_code = 400
    code = "validation_error"
    message = "Email and password are required."


class AuthenticationError(AuthError):
    status_code = 401
    code = "unauthorized"
    message = "Authentication required."
