"""
QuanThink Backend: Password Hashing
====================================

What:  Salted one-way hashing and verification of user passwords.
How:   PBKDF2-HMAC-SHA256 from hashlib with a random 16-byte salt per
       password. The stored string records the algorithm and round count
       so hashes made with older settings still verify.

Stored format:
    pbkdf2_sha256$<iterations>$<salt hex>$<digest hex>
"""

import hashlib
import hmac
import os
from typing import Optional

from quanthink.config import settings

ALGORITHM = "pbkdf2_sha256"
SALT_BYTES = 16


def _derive(password: str, salt: bytes, iterations: int) -> bytes:
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)


def hash_password(password: str, iterations: Optional[int] = None) -> str:
    """
    Hash a plaintext password for storage.

    Args:
        password: The password exactly as the client sent it
        iterations: PBKDF2 rounds; defaults to settings.password_hash_iterations

    Returns:
        The encoded hash string (see module docstring for the format)
    """
    rounds = iterations or settings.password_hash_iterations
    salt = os.urandom(SALT_BYTES)
    digest = _derive(password, salt, rounds)
    return f"{ALGORITHM}${rounds}${salt.hex()}${digest.hex()}"


def verify_password(password: str, encoded: str) -> bool:
    """
    Check a claimed password against a stored hash.

    Digests are compared in constant time. A malformed stored value never
    verifies.
    """
    try:
        algorithm, rounds, salt_hex, digest_hex = encoded.split("$")
        if algorithm != ALGORITHM:
            return False
        salt = bytes.fromhex(salt_hex)
        expected = bytes.fromhex(digest_hex)
        iterations = int(rounds)
    except (AttributeError, ValueError):
        return False
    return hmac.compare_digest(_derive(password, salt, iterations), expected)
