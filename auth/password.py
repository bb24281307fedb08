"""
Password hashing and verification.

Uses bcrypt for password hashing with automatic
salting and configurable work factor.
"""

from __future__ import annotations

import functools

import bcrypt

# bcrypt only looks at the first 72 bytes; newer releases raise instead
# of truncating, so both sides cut the input the same way.
_BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash a password with bcrypt (auto-salted, work factor ``rounds``)."""
    return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=rounds)).decode()


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time comparison against a bcrypt hash."""
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode())
    except (ValueError, TypeError):
        return False


@functools.lru_cache(maxsize=4)
def _dummy_hash(rounds: int) -> bytes:
    return bcrypt.hashpw(b"dummy-password", bcrypt.gensalt(rounds=rounds))


def dummy_verify(password: str, rounds: int = 12) -> None:
    """Spend one bcrypt check so a login for an unknown email is not faster."""
    bcrypt.checkpw(_encode(password), _dummy_hash(rounds))
