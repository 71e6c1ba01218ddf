"""
Principal identifiers and their canonical text encoding.

A principal is an opaque byte string (at most 29 bytes) naming an actor or
canister on the Internet Computer. Its canonical text form is the base32
encoding of CRC32(raw) || raw, lowercased, unpadded and split into groups of
five characters joined by dashes, e.g. ``ryjl3-tyaaa-aaaaa-aaaba-cai``.

The scope codec only needs the ``PrincipalCodec`` interface; ``Principal``
and ``TextPrincipalCodec`` are the default implementation.
"""

from __future__ import annotations

import base64
import binascii
import zlib
from dataclasses import dataclass
from typing import Any, Protocol

from .errors import IdentifierParseError

CHECKSUM_LENGTH = 4
MAX_PRINCIPAL_LENGTH = 29
_GROUP_SIZE = 5


class PrincipalCodec(Protocol):
    """Text codec for principal identifiers."""

    def from_text(self, text: str) -> Any:
        """Parse canonical text, raising IdentifierParseError if malformed."""
        ...  # pragma: no cover - interface placeholder

    def to_text(self, principal: Any) -> str:
        """Return the canonical text of a principal."""
        ...  # pragma: no cover - interface placeholder


@dataclass(frozen=True)
class Principal:
    """A principal identifier wrapping its raw bytes."""
    raw: bytes

    def __post_init__(self):
        if len(self.raw) > MAX_PRINCIPAL_LENGTH:
            raise ValueError(
                f"principal is {len(self.raw)} bytes, maximum is {MAX_PRINCIPAL_LENGTH}"
            )

    @classmethod
    def from_text(cls, text: str) -> "Principal":
        """Parse the canonical text form of a principal.

        Args:
            text: Dash-grouped base32 text, e.g. ``aaaaa-aa``

        Returns:
            The decoded Principal

        Raises:
            IdentifierParseError: If the text is not valid base32, is too short
                or too long, or does not carry a matching checksum and grouping
        """
        compact = text.lower().replace("-", "")
        padded = compact.upper() + "=" * (-len(compact) % 8)
        try:
            decoded = base64.b32decode(padded)
        except (binascii.Error, ValueError) as e:
            raise IdentifierParseError(text, f"not base32 ({e})") from e

        if len(decoded) < CHECKSUM_LENGTH:
            raise IdentifierParseError(text, "too short to hold a checksum")
        raw = decoded[CHECKSUM_LENGTH:]
        if len(raw) > MAX_PRINCIPAL_LENGTH:
            raise IdentifierParseError(text, f"longer than {MAX_PRINCIPAL_LENGTH} bytes")

        principal = cls(raw)
        if principal.to_text() != text:
            raise IdentifierParseError(
                text, f"checksum mismatch (canonical form would be {principal.to_text()!r})"
            )
        return principal

    @classmethod
    def from_hex(cls, value: str) -> "Principal":
        return cls(bytes.fromhex(value))

    @classmethod
    def anonymous(cls) -> "Principal":
        return cls(b"\x04")

    @classmethod
    def management_canister(cls) -> "Principal":
        return cls(b"")

    def to_text(self) -> str:
        checksum = zlib.crc32(self.raw).to_bytes(CHECKSUM_LENGTH, "big")
        encoded = base64.b32encode(checksum + self.raw).decode("ascii").lower().rstrip("=")
        groups = [encoded[i:i + _GROUP_SIZE] for i in range(0, len(encoded), _GROUP_SIZE)]
        return "-".join(groups)

    def to_hex(self) -> str:
        return self.raw.hex()

    def __str__(self) -> str:
        return self.to_text()


class TextPrincipalCodec:
    """Default PrincipalCodec backed by Principal."""

    def from_text(self, text: str) -> Principal:
        return Principal.from_text(text)

    def to_text(self, principal: Principal) -> str:
        return principal.to_text()


DEFAULT_PRINCIPAL_CODEC = TextPrincipalCodec()


__all__ = [
    "PrincipalCodec",
    "Principal",
    "TextPrincipalCodec",
    "DEFAULT_PRINCIPAL_CODEC",
    "MAX_PRINCIPAL_LENGTH",
]
