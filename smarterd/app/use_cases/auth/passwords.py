"""
Password hashing

Passwords are SHA-256 digested and base64 encoded before bcrypt, so any
accepted password (up to 100 characters, any script) fits within bcrypt's
72-byte input limit without truncation.
"""

import base64
import hashlib

import bcrypt

BCRYPT_ROUNDS = 12


def _prehash(password: str) -> bytes:
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


def hash_password(password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    return bcrypt.hashpw(_prehash(password), bcrypt.gensalt(rounds)).decode("utf-8")


def check_password(password: str, password_hash: str) -> bool:
    return bcrypt.checkpw(_prehash(password), password_hash.encode("utf-8"))


# Compared against for unknown login ids so every login costs one bcrypt check
DUMMY_HASH = hash_password("dummy_password")
