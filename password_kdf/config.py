"""Immutable configuration for :class:`password_kdf.hasher.PasswordHasher`."""
from __future__ import annotations

import hashlib
import re
from dataclasses import dataclass
from typing import Any, Mapping

from .errors import AlgorithmUnavailable, InvalidParameters

DEFAULT_ITERATIONS = 10_000
DEFAULT_KEY_SIZE = 256
DEFAULT_SALT_SIZE = 32
DEFAULT_ALGORITHM = "sha1"

# hashlib.pbkdf2_hmac takes iterations as a C long and dklen as a C int
MAX_ITERATIONS = 2**31 - 1
MAX_KEY_SIZE = 8 * (2**31 - 1)

# "PBKDF2WithHmacSHA1", "pbkdf2-hmac-sha256", "hmac_sha512" -> bare digest name
_PREFIX = re.compile(r"^(pbkdf2)?[-_]?(with)?[-_]?(hmac)?[-_]?")


def normalise_algorithm(value: str) -> str:
    """Map a PBKDF2 algorithm label to a digest name usable by hashlib."""
    if not isinstance(value, str) or not value.strip():
        raise InvalidParameters("algorithm must be a non-empty string")
    name = _PREFIX.sub("", value.strip().lower())
    for candidate in dict.fromkeys((name.replace("-", ""), name.replace("-", "_"), name)):
        try:
            hashlib.pbkdf2_hmac(candidate, b"", b"", 1)
        except ValueError:
            continue
        return candidate
    raise AlgorithmUnavailable(f"PBKDF2 digest {value!r} is not available")


def _require_positive(name: str, value: Any, maximum: int | None = None) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameters(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidParameters(f"{name} must be positive, got {value}")
    if maximum is not None and value > maximum:
        raise InvalidParameters(f"{name} must be at most {maximum}, got {value}")


@dataclass(frozen=True)
class HasherConfig:
    iterations: int = DEFAULT_ITERATIONS
    key_size: int = DEFAULT_KEY_SIZE
    salt_size: int = DEFAULT_SALT_SIZE
    algorithm: str = DEFAULT_ALGORITHM

    def __post_init__(self) -> None:
        self.validate()
        object.__setattr__(self, "algorithm", normalise_algorithm(self.algorithm))

    def validate(self) -> None:
        _require_positive("iterations", self.iterations, MAX_ITERATIONS)
        _require_positive("key_size", self.key_size, MAX_KEY_SIZE)
        _require_positive("salt_size", self.salt_size)
        if self.key_size % 8:
            raise InvalidParameters(f"key_size must be a multiple of 8 bits, got {self.key_size}")

    @property
    def key_length(self) -> int:
        """Derived key length in bytes."""
        return self.key_size // 8

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "HasherConfig":
        """Build a config from upper-case keys, as used by :func:`create_hasher`."""
        values = {}
        for key, field in (("ITERATIONS", "iterations"), ("KEY_SIZE", "key_size"), ("SALT_SIZE", "salt_size")):
            if key not in mapping:
                continue
            raw = mapping[key]
            if isinstance(raw, str):
                try:
                    raw = int(raw)
                except ValueError as exc:
                    raise InvalidParameters(f"{key} must be an integer, got {raw!r}") from exc
            values[field] = raw
        if "ALGORITHM" in mapping:
            values["algorithm"] = mapping["ALGORITHM"]
        return cls(**values)


DEFAULT_CONFIG = HasherConfig()
