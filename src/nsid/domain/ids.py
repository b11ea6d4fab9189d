"""Namespaced, time-sortable identifiers.

Canonical form: ``{namespace}_{27-char base62 KSUID}``, e.g.
``user_24yPTDCR1QRPZITB83lxvgcz7KI``.  The namespace tags the entity type;
the KSUID carries a second-resolution creation time in its high-order
bytes and 128 bits of payload, so same-namespace identifiers sort
chronologically as plain strings.

INVARIANT: An Identifier's namespace is always valid.  The constructor
itself validates, so no code path stores an unchecked namespace.

INVARIANT: Identifiers from different namespaces are never ordered against
each other.  Ordering across namespaces raises NamespaceMismatch.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime
from functools import partial
from typing import Annotated, Any

from pydantic import AfterValidator, GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from nsid.domain.errors import (
    IdentifierError,
    InvalidPayloadLength,
    InvalidTimestamp,
    MalformedIdentifier,
    NamespaceMismatch,
)
from nsid.domain.ksuid import BYTE_LENGTH, PAYLOAD_LENGTH, STRING_LENGTH, Ksuid
from nsid.domain.namespaces import NAMESPACE_MAX_LENGTH, validate_namespace

SEPARATOR = "_"

ID_PATTERN = rf"^[a-z]{{1,{NAMESPACE_MAX_LENGTH}}}{SEPARATOR}[0-9A-Za-z]{{{STRING_LENGTH}}}$"


@dataclass(frozen=True, eq=False, slots=True)
class Identifier:
    """A namespace tag bound to a KSUID value.

    Equality and hashing are by value (namespace and raw bytes).  Ordering
    operators compare creation time first, then payload bytes, and refuse
    to order identifiers from different namespaces.
    """

    namespace: str
    value: Ksuid

    def __post_init__(self) -> None:
        validate_namespace(self.namespace)
        if not isinstance(self.value, Ksuid):
            msg = f"Identifier value must be a Ksuid, got {type(self.value).__name__}"
            raise TypeError(msg)

    # --- Field projections ---

    @property
    def timestamp(self) -> int:
        """Raw timestamp field: seconds since the KSUID epoch."""
        return self.value.timestamp

    @property
    def date(self) -> datetime:
        return self.value.date

    @property
    def payload(self) -> bytes:
        return self.value.payload

    @property
    def raw(self) -> bytes:
        return self.value.raw

    # --- Serialization ---

    def __str__(self) -> str:
        return f"{self.namespace}{SEPARATOR}{self.value.encoded}"

    def __repr__(self) -> str:
        return f"Identifier({str(self)!r})"

    def __bytes__(self) -> bytes:
        return self.value.raw

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Identifier):
            return NotImplemented
        return self.namespace == other.namespace and self.value.raw == other.value.raw

    def __hash__(self) -> int:
        return hash((self.namespace, self.value.raw))

    def __lt__(self, other: Identifier) -> bool:
        if not isinstance(other, Identifier):
            return NotImplemented
        return compare(self, other) < 0

    def __le__(self, other: Identifier) -> bool:
        if not isinstance(other, Identifier):
            return NotImplemented
        return compare(self, other) <= 0

    def __gt__(self, other: Identifier) -> bool:
        if not isinstance(other, Identifier):
            return NotImplemented
        return compare(self, other) > 0

    def __ge__(self, other: Identifier) -> bool:
        if not isinstance(other, Identifier):
            return NotImplemented
        return compare(self, other) >= 0

    # --- Pydantic integration ---

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Accept Identifier instances or canonical strings; serialize as strings."""
        return core_schema.no_info_plain_validator_function(
            _coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "pattern": ID_PATTERN}


IdLike = Identifier | str


def _coerce(value: object) -> Identifier:
    """Return *value* as an Identifier, parsing canonical strings."""
    if isinstance(value, Identifier):
        return value
    return parse(value)


# --- Construction ---


def create(namespace: str, at: datetime | None = None) -> Identifier:
    """Mint a random identifier in *namespace*.

    The timestamp is the current time unless *at* pins it.  Each call
    draws 16 fresh bytes from the secure random source.

    Raises:
        InvalidNamespace: If *namespace* is not 1-10 lowercase letters.
        InvalidTimestamp: If *at* is outside the 32-bit timestamp range.
    """
    validate_namespace(namespace)
    try:
        value = Ksuid.generate(at)
    except ValueError as exc:
        raise InvalidTimestamp(at, str(exc)) from exc
    return Identifier(namespace, value)


def from_parts(namespace: str, at: datetime, payload: bytes) -> Identifier:
    """Build an identifier deterministically from its parts.

    *at* is truncated to whole seconds; naive datetimes are taken as UTC.

    Raises:
        InvalidNamespace: If *namespace* is invalid.
        InvalidPayloadLength: If *payload* is not exactly 16 bytes.
        InvalidTimestamp: If *at* is outside the 32-bit timestamp range.
    """
    validate_namespace(namespace)
    if len(payload) != PAYLOAD_LENGTH:
        raise InvalidPayloadLength(len(payload), PAYLOAD_LENGTH)
    try:
        value = Ksuid.from_parts(at, payload)
    except ValueError as exc:
        raise InvalidTimestamp(at, str(exc)) from exc
    return Identifier(namespace, value)


def from_bytes(raw: bytes, namespace: str) -> Identifier:
    """Build an identifier from a raw 20-byte KSUID buffer.

    Raises:
        InvalidNamespace: If *namespace* is invalid.
        MalformedIdentifier: If *raw* is not exactly 20 bytes.
    """
    validate_namespace(namespace)
    if not isinstance(raw, (bytes, bytearray, memoryview)):
        raise MalformedIdentifier(raw, "buffer must be bytes")
    if len(raw) != BYTE_LENGTH:
        raise MalformedIdentifier(bytes(raw).hex(), f"buffer must be {BYTE_LENGTH} bytes")
    return Identifier(namespace, Ksuid(bytes(raw)))


def parse(value: object) -> Identifier:
    """Parse a canonical ``namespace_base62`` string.

    Splits on the first underscore; the namespace can never contain one.

    Raises:
        MalformedIdentifier: No separator, or a bad encoded segment.
        InvalidNamespace: The namespace segment is invalid.
    """
    if not isinstance(value, str):
        raise MalformedIdentifier(value, "identifier must be a string")
    namespace, sep, encoded = value.partition(SEPARATOR)
    if not sep:
        raise MalformedIdentifier(value, f"missing {SEPARATOR!r} separator")
    validate_namespace(namespace)
    try:
        ksuid = Ksuid.parse(encoded)
    except ValueError as exc:
        raise MalformedIdentifier(value, str(exc)) from exc
    return Identifier(namespace, ksuid)


def is_valid(value: object) -> bool:
    """Return True if *value* parses as a canonical identifier string."""
    try:
        parse(value)
    except IdentifierError:
        return False
    return True


def to_bytes(identifier: IdLike) -> bytes:
    """Return the raw 20-byte KSUID buffer (the namespace is not included)."""
    return _coerce(identifier).raw


# --- Comparison ---


def compare(left: IdLike, right: IdLike) -> int:
    """Three-way compare two same-namespace identifiers: -1, 0 or 1.

    Orders by timestamp, then by payload bytes.  Identifiers minted in the
    same second have no generation-order guarantee.

    Raises:
        NamespaceMismatch: If the namespaces differ.
    """
    a = _coerce(left)
    b = _coerce(right)
    if a.namespace != b.namespace:
        msg = (
            f'IDs must have same namespace but received "{a.namespace}" '
            f'for left-hand and "{b.namespace}" for right-hand'
        )
        raise NamespaceMismatch(a.namespace, b.namespace, msg)
    return a.value.compare(b.value)


def equals(left: IdLike, right: IdLike) -> bool:
    return compare(left, right) == 0


def is_before(left: IdLike, right: IdLike) -> bool:
    return compare(left, right) < 0


def is_after(left: IdLike, right: IdLike) -> bool:
    return compare(left, right) > 0


# --- Namespace assertions ---


def is_namespace(identifier: IdLike, namespace: str, raise_on_mismatch: bool = False) -> bool:
    """Check that *identifier* belongs to *namespace*.

    Use this before trusting an identifier of unknown provenance as a
    foreign key.

    Raises:
        InvalidNamespace: If *namespace* itself is invalid.
        MalformedIdentifier: If *identifier* is an unparseable string.
        NamespaceMismatch: On mismatch, when *raise_on_mismatch* is set.
    """
    validate_namespace(namespace)
    actual = _coerce(identifier).namespace
    if actual == namespace:
        return True
    if raise_on_mismatch:
        raise NamespaceMismatch(namespace, actual)
    return False


def _require_namespace(namespace: str, identifier: Identifier) -> Identifier:
    is_namespace(identifier, namespace, raise_on_mismatch=True)
    return identifier


def namespaced(namespace: str) -> Any:
    """Return a pydantic field type accepting only identifiers in *namespace*.

    Usage::

        class Payment(BaseModel):
            id: namespaced("payment")
            payer: namespaced("user")
    """
    validate_namespace(namespace)
    return Annotated[Identifier, AfterValidator(partial(_require_namespace, namespace))]


# --- Factory ---


def factory(namespace: str) -> Iterator[Identifier]:
    """Return an endless iterator of fresh random identifiers in *namespace*.

    The namespace is validated once, here, rather than on first ``next()``.
    """
    validate_namespace(namespace)
    return _mint(namespace)


def _mint(namespace: str) -> Iterator[Identifier]:
    while True:
        yield Identifier(namespace, Ksuid.generate())
