"""Salted PBKDF2 password hashing."""
from __future__ import annotations

import enum
import hashlib
import hmac
import logging
import secrets
from typing import Callable, Union

from .codec import SEPARATOR, CredentialRecord, bytes_to_hex
from .config import DEFAULT_CONFIG, HasherConfig
from .errors import AlgorithmUnavailable, InvalidParameters, MalformedRecord

logger = logging.getLogger(__name__)

Password = Union[str, bytes, bytearray, memoryview]


class Verification(enum.Enum):
    VALID = "valid"
    INVALID = "invalid"
    MALFORMED = "malformed"


def _password_bytes(password: Password) -> bytes:
    if isinstance(password, str):
        return password.encode("utf-8")
    if isinstance(password, (bytes, bytearray, memoryview)):
        return bytes(password)
    raise TypeError("Password must be str or bytes")


class PasswordHasher:
    """Hash and verify passwords as ``SALT_HEX:KEY_HEX`` records.

    Instances hold only their configuration and random source, so one hasher
    can be shared between threads.
    """

    def __init__(
        self,
        config: HasherConfig = DEFAULT_CONFIG,
        random_bytes: Callable[[int], bytes] = secrets.token_bytes,
    ) -> None:
        self.config = config
        self._random_bytes = random_bytes

    def generate_salt(self) -> bytes:
        size = self.config.salt_size
        try:
            salt = self._random_bytes(size)
        except (NotImplementedError, OSError) as exc:
            raise AlgorithmUnavailable("secure random source is unavailable") from exc
        if len(salt) != size:
            raise AlgorithmUnavailable(f"random source returned {len(salt)} bytes, expected {size}")
        return bytes(salt)

    def _derive(self, password: Password, salt: bytes) -> bytes:
        if not isinstance(salt, (bytes, bytearray, memoryview)):
            raise TypeError("Salt must be bytes")
        cfg = self.config
        try:
            return hashlib.pbkdf2_hmac(
                cfg.algorithm,
                _password_bytes(password),
                bytes(salt),
                cfg.iterations,
                dklen=cfg.key_length,
            )
        except OverflowError as exc:
            raise InvalidParameters(f"PBKDF2 parameters out of range: {exc}") from exc
        except ValueError as exc:
            raise AlgorithmUnavailable(f"PBKDF2 with {cfg.algorithm} failed: {exc}") from exc

    def hash_record(self, password: Password) -> CredentialRecord:
        salt = self.generate_salt()
        record = CredentialRecord(salt, self._derive(password, salt))
        logger.debug(
            "Created credential record: algorithm=%s iterations=%d salt_bytes=%d key_bytes=%d",
            self.config.algorithm,
            self.config.iterations,
            len(record.salt),
            len(record.derived_key),
        )
        return record

    def hash(self, password: Password) -> str:
        return self.hash_record(password).encode()

    def derive_key(self, password: Password, salt: bytes) -> str:
        """Return the hex-encoded key for ``password`` under a known ``salt``.

        Only the key is returned. New records should come from :meth:`hash`
        so that every password gets a fresh salt.
        """
        return bytes_to_hex(self._derive(password, salt))

    def verify(self, password: Password, stored: str) -> bool:
        """Check ``password`` against a stored record.

        Raises :class:`MalformedRecord` when ``stored`` is not a valid record;
        a wrong password simply returns ``False``.
        """
        record = CredentialRecord.parse(stored)
        stored_key_hex = stored.partition(SEPARATOR)[2]
        candidate = self.derive_key(password, record.salt)
        return hmac.compare_digest(candidate, stored_key_hex)

    def check(self, password: Password, stored: str) -> Verification:
        try:
            matched = self.verify(password, stored)
        except MalformedRecord as exc:
            logger.warning("Rejected malformed credential record: %s", exc)
            return Verification.MALFORMED
        return Verification.VALID if matched else Verification.INVALID
