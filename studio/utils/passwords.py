"""
Password hashing for registered users.

Hashes with Argon2id; the encoded hash carries its own parameters and salt,
so it is stored as-is in the user's ``password`` field.
"""
from __future__ import annotations

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError
from argon2.low_level import Type

_hasher = PasswordHasher(time_cost=2, memory_cost=102400, parallelism=8, hash_len=32, type=Type.ID)

HASH_PREFIX = "$argon2id$"


def hash_password(password: str) -> str:
    return _hasher.hash(password)


def _is_hashed(value: str) -> bool:
    return bool(value) and value.startswith(HASH_PREFIX)


def verify_password(password: str, encoded_hash: str) -> bool:
    """Constant-time check of ``password`` against an encoded hash."""
    if not password or not _is_hashed(encoded_hash):
        return False
    try:
        return _hasher.verify(encoded_hash, password)
    except (VerifyMismatchError, VerificationError, InvalidHashError):
        return False
