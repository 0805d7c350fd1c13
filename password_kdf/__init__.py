"""Salted PBKDF2 password hashing with a ``SALT_HEX:KEY_HEX`` record format."""
from __future__ import annotations

import logging
from typing import Any, Dict

from .codec import CredentialRecord, bytes_to_hex, hex_to_bytes
from .config import (
    DEFAULT_ALGORITHM,
    DEFAULT_CONFIG,
    DEFAULT_ITERATIONS,
    DEFAULT_KEY_SIZE,
    DEFAULT_SALT_SIZE,
    HasherConfig,
)
from .errors import AlgorithmUnavailable, HashError, InvalidParameters, MalformedRecord
from .hasher import Password, PasswordHasher, Verification

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AlgorithmUnavailable",
    "CredentialRecord",
    "HashError",
    "HasherConfig",
    "InvalidParameters",
    "MalformedRecord",
    "PasswordHasher",
    "Verification",
    "bytes_to_hex",
    "create_hasher",
    "hash_password",
    "hex_to_bytes",
    "verify_password",
]


def create_hasher(test_config: Dict[str, Any] | None = None) -> PasswordHasher:
    config = {
        "ITERATIONS": DEFAULT_ITERATIONS,
        "KEY_SIZE": DEFAULT_KEY_SIZE,
        "SALT_SIZE": DEFAULT_SALT_SIZE,
        "ALGORITHM": DEFAULT_ALGORITHM,
    }
    if test_config:
        config.update(test_config)
    return PasswordHasher(HasherConfig.from_mapping(config))


_default_hasher = PasswordHasher(DEFAULT_CONFIG)


def hash_password(password: Password) -> str:
    return _default_hasher.hash(password)


def verify_password(password: Password, stored: str) -> bool:
    return _default_hasher.verify(password, stored)
