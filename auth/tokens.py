"""
auth/tokens.py -- Session token issuance.

A session token is an opaque capability: possession implies authentication.
It has no embedded structure, identity or expiry, so there is nothing to sign
or decode -- the session store is the only authority on whether a token is
valid.

secrets.token_hex(32) draws 32 bytes from the OS CSPRNG and gives 256 bits of
entropy as 64 hex characters. Guessing a live token online or offline is
computationally infeasible, and two issued tokens colliding within a process
lifetime has negligible probability. Tokens are never derived from time,
counters, or the submitted credentials.

Layer rule: no imports from api/.
"""

from __future__ import annotations

import secrets

TOKEN_BYTES = 32


def issue_token() -> str:
    """Return a fresh, unguessable session token."""
    return secrets.token_hex(TOKEN_BYTES)
