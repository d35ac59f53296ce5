"""
Password hashing port and its HMAC implementation.
"""

import base64
import hashlib
import hmac
from abc import ABC, abstractmethod


class IPasswordHasher(ABC):
    """Hashes plaintext passwords before they reach an entity."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """
        Hash a plaintext password.

        Args:
            password: Plain text password

        Returns:
            Opaque hash string
        """
        pass


class HmacPasswordHasher(IPasswordHasher):
    """
    Deterministic keyed hash: base64(HMAC-SHA512(key, password)).

    The same password and key always yield the same hash, so stored values
    can be compared directly.
    """

    def __init__(self, secret_key: str):
        if not secret_key:
            raise ValueError("Password secret key must not be empty")
        self._key = secret_key.encode("utf-8")

    def hash(self, password: str) -> str:
        digest = hmac.new(self._key, password.encode("utf-8"), hashlib.sha512).digest()
        return base64.b64encode(digest).decode("ascii")
