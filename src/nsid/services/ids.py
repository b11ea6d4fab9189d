"""IdService — identifier operations for the CLI.

Wraps the domain functions in :mod:`nsid.domain.ids`, converting identifier
errors into ``ServiceResult`` failures so callers never see exceptions for
bad input.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from nsid.config.models import GenerateConfig
from nsid.domain import ids
from nsid.domain.errors import IdentifierError
from nsid.domain.ids import Identifier
from nsid.domain.ksuid import PAYLOAD_LENGTH
from nsid.services.result import ServiceError, ServiceResult
from nsid.services.telemetry import get_current_span, trace_span, traced

logger = logging.getLogger(__name__)

_RELATIONS = {-1: "before", 0: "equal", 1: "after"}


def describe(identifier: Identifier) -> dict[str, Any]:
    """Return every field of *identifier* as JSON-friendly values."""
    return {
        "id": str(identifier),
        "namespace": identifier.namespace,
        "timestamp": identifier.timestamp,
        "date": identifier.date.isoformat(),
        "payload": identifier.payload.hex(),
        "raw": identifier.raw.hex(),
    }


class IdService:
    """Generates, builds, inspects, validates, compares and sorts identifiers."""

    def __init__(self, config: GenerateConfig | None = None) -> None:
        self._config = config or GenerateConfig()

    @traced
    def generate(
        self,
        namespace: str | None = None,
        *,
        count: int = 1,
        at: datetime | None = None,
    ) -> ServiceResult:
        """Mint *count* random identifiers, defaulting to the configured namespace."""
        op = "generate"
        if namespace is None:
            namespace = self._config.default_namespace
        if namespace is None:
            return ServiceResult.failure(
                op,
                ServiceError(
                    code="NO_NAMESPACE",
                    message="No namespace given and no [generate] default_namespace configured",
                ),
            )
        if not 1 <= count <= self._config.max_count:
            return ServiceResult.failure(
                op,
                ServiceError(
                    code="COUNT_EXCEEDED",
                    message=f"Count must be between 1 and {self._config.max_count}",
                    detail={"count": count, "max_count": self._config.max_count},
                ),
            )

        try:
            minted = [str(ids.create(namespace, at)) for _ in range(count)]
        except IdentifierError as exc:
            return ServiceResult.failure(op, exc)

        span = get_current_span()
        if span is not None:
            span.annotate("count", count)
        logger.debug("Generated %d identifier(s) in namespace %s", count, namespace)
        return ServiceResult(ok=True, op=op, data={"namespace": namespace, "ids": minted})

    @traced
    def build(self, namespace: str, at: datetime, payload_hex: str) -> ServiceResult:
        """Build one identifier deterministically from a timestamp and hex payload."""
        op = "build"
        try:
            payload = bytes.fromhex(payload_hex)
        except ValueError:
            return ServiceResult.failure(
                op,
                ServiceError(
                    code="INVALID_PAYLOAD",
                    message=f"Payload must be {PAYLOAD_LENGTH * 2} hex characters",
                    detail={"payload": payload_hex},
                ),
            )
        try:
            identifier = ids.from_parts(namespace, at, payload)
        except IdentifierError as exc:
            return ServiceResult.failure(op, exc)
        return ServiceResult(ok=True, op=op, data=describe(identifier))

    @traced
    def inspect(self, value: str) -> ServiceResult:
        """Decode *value* and report its namespace, time and payload."""
        op = "inspect"
        try:
            identifier = ids.parse(value)
        except IdentifierError as exc:
            return ServiceResult.failure(op, exc)
        return ServiceResult(ok=True, op=op, data=describe(identifier))

    @traced
    def validate(self, value: str, *, namespace: str | None = None) -> ServiceResult:
        """Check that *value* is well formed and, optionally, in *namespace*."""
        op = "validate"
        try:
            identifier = ids.parse(value)
            if namespace is not None:
                ids.is_namespace(identifier, namespace, raise_on_mismatch=True)
        except IdentifierError as exc:
            logger.debug("Rejected identifier %r: %s", value, exc.code)
            return ServiceResult.failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={"id": str(identifier), "namespace": identifier.namespace, "valid": True},
        )

    @traced
    def compare(self, left: str, right: str) -> ServiceResult:
        """Order two same-namespace identifiers."""
        op = "compare"
        try:
            order = ids.compare(left, right)
        except IdentifierError as exc:
            return ServiceResult.failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={"left": left, "right": right, "order": order, "relation": _RELATIONS[order]},
        )

    @traced
    def sort(self, values: list[str]) -> ServiceResult:
        """Sort same-namespace identifiers from oldest to newest."""
        op = "sort"
        with trace_span("parse"):
            try:
                parsed = [ids.parse(v) for v in values]
            except IdentifierError as exc:
                return ServiceResult.failure(op, exc)
        with trace_span("order"):
            try:
                ordered = sorted(parsed)
            except IdentifierError as exc:
                return ServiceResult.failure(op, exc)
        warnings: list[str] = []
        if len(set(ordered)) != len(ordered):
            warnings.append("Duplicate identifiers in input")
        return ServiceResult(
            ok=True,
            op=op,
            data={"ids": [str(i) for i in ordered]},
            warnings=warnings,
        )
