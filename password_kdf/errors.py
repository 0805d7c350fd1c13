"""Exceptions raised by the password hashing package."""
from __future__ import annotations


class HashError(Exception):
    """Base class for every error raised by :mod:`password_kdf`."""


class AlgorithmUnavailable(HashError):
    """A required primitive (PBKDF2 digest or random source) is missing."""


class InvalidParameters(HashError, ValueError):
    """The hasher configuration cannot be used."""


class MalformedRecord(HashError, ValueError):
    """A stored credential record does not match ``SALT_HEX:KEY_HEX``."""
