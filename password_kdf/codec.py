"""Hex encoding and the ``SALT_HEX:KEY_HEX`` credential record format."""
from __future__ import annotations

import string
from dataclasses import dataclass

from .errors import MalformedRecord

SEPARATOR = ":"
_HEX_DIGITS = frozenset(string.hexdigits)


def bytes_to_hex(data: bytes) -> str:
    return bytes(data).hex().upper()


def hex_to_bytes(value: str) -> bytes:
    """Decode upper- or lowercase hex, rejecting odd lengths and stray characters."""
    if not isinstance(value, str):
        raise MalformedRecord("hex value must be a string")
    if len(value) % 2:
        raise MalformedRecord(f"hex value has odd length {len(value)}")
    if not _HEX_DIGITS.issuperset(value):
        raise MalformedRecord("hex value contains non-hex characters")
    return bytes.fromhex(value)


@dataclass(frozen=True)
class CredentialRecord:
    salt: bytes
    derived_key: bytes

    @classmethod
    def parse(cls, value: str) -> "CredentialRecord":
        if not isinstance(value, str):
            raise MalformedRecord("credential record must be a string")
        salt_hex, sep, key_hex = value.partition(SEPARATOR)
        if not sep:
            raise MalformedRecord("credential record has no ':' separator")
        if not salt_hex or not key_hex:
            raise MalformedRecord("credential record has an empty segment")
        return cls(hex_to_bytes(salt_hex), hex_to_bytes(key_hex))

    @property
    def key_hex(self) -> str:
        return bytes_to_hex(self.derived_key)

    def encode(self) -> str:
        return f"{bytes_to_hex(self.salt)}{SEPARATOR}{self.key_hex}"

    def __str__(self) -> str:
        return self.encode()
