"""
auth/credentials.py -- Constant-time verification of the configured login.

Security design decisions:
  Comparison: hmac.compare_digest() on UTF-8 bytes. Its running time depends
       only on the operand length, not on where the operands first differ.

  Encoding: lone surrogates are legal in JSON strings but not in UTF-8.
       They are encoded with errors="surrogatepass" so they compare as
       ordinary bytes instead of raising.

  Unequal lengths: compare_digest() itself is only constant-time for equal
       length inputs. Both operands are right-padded with NUL bytes to a
       common width before the call, and the real length check is folded in
       afterwards with a non-short-circuit `&`. The submitted value is always
       compared against the configured secret -- never against itself.

  Both fields, always: the password is compared even when the email already
       failed, so the response time does not reveal which one was wrong.

  Not configured: an empty configured value can never match. The comparison
       still runs at full cost so a misconfigured server is not faster to
       reject than a configured one.

Failures are reported as a boolean result. Nothing in this module raises on
malformed input.

Layer rule: no imports from api/.
"""

from __future__ import annotations

import hmac
import logging

from auth.models import LoginCredentials

logger = logging.getLogger("cardengine.auth")


def _encode(value: object) -> bytes | None:
    if not isinstance(value, str):
        return None
    return value.encode("utf-8", errors="surrogatepass")


def constant_time_equals(submitted: bytes, expected: bytes) -> bool:
    """Return True if both byte strings are identical, in constant time.

    Pads both operands to the same width so compare_digest() always sees
    equal-length buffers, then folds in the length equality without
    branching on it.
    """
    width = max(len(submitted), len(expected), 1)
    padded_submitted = submitted.ljust(width, b"\x00")
    padded_expected = expected.ljust(width, b"\x00")
    same_content = hmac.compare_digest(padded_submitted, padded_expected)
    same_length = len(submitted) == len(expected)
    return same_content & same_length


class CredentialValidator:
    """Checks a submitted email/password pair against the configured one."""

    def __init__(self, credentials: LoginCredentials) -> None:
        self._email = credentials.email.encode("utf-8", errors="surrogatepass")
        self._password = credentials.password.encode("utf-8", errors="surrogatepass")
        self._configured = credentials.configured
        if not self._configured:
            logger.warning("Credential validator created without a configured login; all logins will fail")

    @property
    def configured(self) -> bool:
        return self._configured

    def validate(self, submitted_email: object, submitted_password: object) -> bool:
        """Return True only if both values match the configured credentials.

        Absent or non-string values return False without raising.
        """
        email = _encode(submitted_email)
        password = _encode(submitted_password)
        if email is None or password is None:
            return False

        email_ok = constant_time_equals(email, self._email)
        password_ok = constant_time_equals(password, self._password)
        return email_ok & password_ok & self._configured
