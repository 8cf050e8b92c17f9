"""
Password hashing and verification.

Uses bcrypt for password hashing with automatic
salting and a fixed work factor (``config.bcrypt_rounds``, 10 by default).
The ``*_async`` variants run the CPU-bound work in a worker thread so
request handlers never block the event loop.
"""

from __future__ import annotations

import asyncio

import bcrypt

from config.settings import config

_ROUNDS = config.bcrypt_rounds
_MAX_BYTES = 72  # bcrypt only reads the first 72 bytes


def _encode(password: str) -> bytes:
    return password.encode()[:_MAX_BYTES]


def hash_password(password: str) -> str:
    """Hash a password with bcrypt (auto-salted, salt embedded in the result)."""
    return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=_ROUNDS)).decode()


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time comparison against a bcrypt hash. Malformed hashes never match."""
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode())
    except (ValueError, TypeError, AttributeError):
        return False


async def hash_password_async(password: str) -> str:
    return await asyncio.to_thread(hash_password, password)


async def verify_password_async(password: str, password_hash: str) -> bool:
    return await asyncio.to_thread(verify_password, password, password_hash)
