"""
auth/models.py -- Domain dataclasses for authentication entities.

Pattern: Data class (pure data container, zero logic). Stores, validators and
routes do the work.

There is no User entity: the server has exactly one logical identity, and the
session token itself carries no identity -- possession is authentication.

Layer rule: no imports from api/.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class LoginCredentials:
    """The single configured email/password pair.

    Supplied once at process start (LOGIN_EMAIL / LOGIN_PASSWORD) and never
    mutated. Both fields are excluded from repr so the secrets cannot leak
    into logs or tracebacks by accident.
    """

    email: str = field(repr=False)
    password: str = field(repr=False)

    @property
    def configured(self) -> bool:
        return bool(self.email) and bool(self.password)
