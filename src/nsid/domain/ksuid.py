"""KSUID: K-Sortable Unique Identifier.

Time-sortable, globally unique 160-bit values without coordination.
Layout: 4 bytes big-endian timestamp (seconds since the KSUID epoch)
followed by 16 bytes of payload, encoded as a 27-character base62 string.

Because the timestamp occupies the high-order bytes and the encoding is
fixed-width, comparing raw buffers, encoded strings, or integers all give
the same order.
"""

from __future__ import annotations

import secrets
import struct
import time
from dataclasses import dataclass
from datetime import UTC, datetime

# KSUID epoch: 2014-05-13T16:53:20Z
KSUID_EPOCH = 1400000000
BASE62 = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"

TIMESTAMP_LENGTH = 4
PAYLOAD_LENGTH = 16
BYTE_LENGTH = TIMESTAMP_LENGTH + PAYLOAD_LENGTH
STRING_LENGTH = 27

MAX_TIMESTAMP = 2**32 - 1
_MAX_VALUE = 2 ** (8 * BYTE_LENGTH) - 1
_BASE62_INDEX = {char: index for index, char in enumerate(BASE62)}


def _encode_base62(raw: bytes) -> str:
    n = int.from_bytes(raw, byteorder="big")
    chars = []
    while n > 0:
        n, remainder = divmod(n, 62)
        chars.append(BASE62[remainder])
    return "".join(reversed(chars)).rjust(STRING_LENGTH, "0")


def _decode_base62(encoded: str) -> bytes:
    if len(encoded) != STRING_LENGTH:
        msg = f"expected {STRING_LENGTH} characters, got {len(encoded)}"
        raise ValueError(msg)
    n = 0
    for char in encoded:
        digit = _BASE62_INDEX.get(char)
        if digit is None:
            msg = f"character {char!r} is not in the base62 alphabet"
            raise ValueError(msg)
        n = n * 62 + digit
    if n > _MAX_VALUE:
        msg = f"value exceeds {BYTE_LENGTH} bytes"
        raise ValueError(msg)
    return n.to_bytes(BYTE_LENGTH, byteorder="big")


def to_ksuid_seconds(at: datetime) -> int:
    """Convert *at* to whole seconds since the KSUID epoch.

    Naive datetimes are taken as UTC.  Sub-second precision is truncated.

    Raises:
        ValueError: If *at* falls outside the 32-bit timestamp range.
    """
    if at.tzinfo is None:
        at = at.replace(tzinfo=UTC)
    seconds = int(at.timestamp()) - KSUID_EPOCH
    if not 0 <= seconds <= MAX_TIMESTAMP:
        msg = f"{at.isoformat()} is outside the KSUID timestamp range"
        raise ValueError(msg)
    return seconds


@dataclass(frozen=True, slots=True)
class Ksuid:
    """An immutable 160-bit KSUID value wrapping its raw 20-byte buffer."""

    raw: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.raw, bytes):
            object.__setattr__(self, "raw", bytes(self.raw))
        if len(self.raw) != BYTE_LENGTH:
            msg = f"KSUID buffer must be {BYTE_LENGTH} bytes, got {len(self.raw)}"
            raise ValueError(msg)

    # --- Constructors ---

    @classmethod
    def generate(cls, at: datetime | None = None) -> Ksuid:
        """Return a new KSUID with a secure random payload.

        The timestamp is the current time unless *at* pins it.
        """
        seconds = int(time.time()) - KSUID_EPOCH if at is None else to_ksuid_seconds(at)
        return cls(struct.pack(">I", seconds) + secrets.token_bytes(PAYLOAD_LENGTH))

    @classmethod
    def from_parts(cls, at: datetime, payload: bytes) -> Ksuid:
        """Build a KSUID from a timestamp and an explicit 16-byte payload."""
        if len(payload) != PAYLOAD_LENGTH:
            msg = f"KSUID payload must be {PAYLOAD_LENGTH} bytes, got {len(payload)}"
            raise ValueError(msg)
        return cls(struct.pack(">I", to_ksuid_seconds(at)) + bytes(payload))

    @classmethod
    def parse(cls, encoded: str) -> Ksuid:
        """Decode a 27-character base62 string.

        Raises:
            ValueError: On wrong length, foreign characters, or overflow.
        """
        return cls(_decode_base62(encoded))

    # --- Accessors ---

    @property
    def timestamp(self) -> int:
        """Raw timestamp field: seconds since the KSUID epoch."""
        return int(struct.unpack(">I", self.raw[:TIMESTAMP_LENGTH])[0])

    @property
    def date(self) -> datetime:
        """Creation time as an aware UTC datetime."""
        return datetime.fromtimestamp(self.timestamp + KSUID_EPOCH, tz=UTC)

    @property
    def payload(self) -> bytes:
        return self.raw[TIMESTAMP_LENGTH:]

    @property
    def encoded(self) -> str:
        """Fixed-width base62 string form."""
        return _encode_base62(self.raw)

    def compare(self, other: Ksuid) -> int:
        """Three-way byte-wise comparison: -1, 0 or 1."""
        if self.raw < other.raw:
            return -1
        if self.raw > other.raw:
            return 1
        return 0

    def __bytes__(self) -> bytes:
        return self.raw

    def __str__(self) -> str:
        return self.encoded


def is_valid_buffer(buffer: object) -> bool:
    """Return True if *buffer* is a well-formed 20-byte KSUID buffer."""
    return isinstance(buffer, (bytes, bytearray, memoryview)) and len(buffer) == BYTE_LENGTH
