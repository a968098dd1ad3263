"""
Password hashing backed by bcrypt.
"""

from functools import lru_cache

import bcrypt

from eventdesk.config import get_settings

# bcrypt only looks at the first 72 bytes of a password.
_BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int | None = None) -> str:
    """Hash a plaintext password with a fresh salt.

    Args:
        password: Plaintext password.
        rounds: bcrypt cost factor; defaults to ``Settings.bcrypt_rounds``.

    Returns:
        The bcrypt hash as a string.
    """
    salt = bcrypt.gensalt(rounds=rounds or get_settings().bcrypt_rounds)
    return bcrypt.hashpw(_encode(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash
        return False


@lru_cache
def dummy_password_hash() -> str:
    """Hash compared against when an email is unknown, so both failure paths cost a bcrypt check."""
    return hash_password("not-a-real-password")
