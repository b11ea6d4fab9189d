"""Identifier error kinds.

Every error derives from :class:`IdentifierError`, itself a ``ValueError``,
so pydantic reports them as ordinary validation errors.  Each kind carries
a stable ``code`` used by the service layer in ``ServiceError`` payloads.
"""

from __future__ import annotations

from typing import Any


class IdentifierError(ValueError):
    """Base class for all identifier failures."""

    code = "IDENTIFIER_ERROR"

    def detail(self) -> dict[str, Any]:
        """Structured context for the failure (used in ServiceError.detail)."""
        return {}


class InvalidNamespace(IdentifierError):
    """Namespace is not 1-10 lowercase ASCII letters."""

    code = "INVALID_NAMESPACE"

    def __init__(self, namespace: object) -> None:
        self.namespace = namespace
        super().__init__(
            "ID namespace must be lowercase letters a-z with length between 1 and 10. "
            f"Received: {namespace!r}"
        )

    def detail(self) -> dict[str, Any]:
        return {"namespace": str(self.namespace)}


class MalformedIdentifier(IdentifierError):
    """String or buffer cannot be decoded into an identifier."""

    code = "MALFORMED_ID"

    def __init__(self, value: object, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Malformed identifier {value!r}: {reason}")

    def detail(self) -> dict[str, Any]:
        return {"value": str(self.value), "reason": self.reason}


class InvalidPayloadLength(IdentifierError):
    """Payload for deterministic construction is not 16 bytes."""

    code = "INVALID_PAYLOAD_LENGTH"

    def __init__(self, length: int, expected: int = 16) -> None:
        self.length = length
        self.expected = expected
        super().__init__(f"Payload must be exactly {expected} bytes, got {length}")

    def detail(self) -> dict[str, Any]:
        return {"length": self.length, "expected": self.expected}


class NamespaceMismatch(IdentifierError):
    """Two identifiers (or an identifier and an expectation) differ in namespace."""

    code = "NAMESPACE_MISMATCH"

    def __init__(self, expected: str, actual: str, message: str | None = None) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            message or f'Expected ID to have namespace "{expected}" but received "{actual}"'
        )

    def detail(self) -> dict[str, Any]:
        return {"expected": self.expected, "actual": self.actual}


class InvalidTimestamp(IdentifierError):
    """Timestamp cannot be represented in the 32-bit timestamp field."""

    code = "INVALID_TIMESTAMP"

    def __init__(self, value: object, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid timestamp {value!s}: {reason}")

    def detail(self) -> dict[str, Any]:
        return {"value": str(self.value), "reason": self.reason}
