"""ServiceResult and ServiceError — the service contract.

INVARIANT: Service methods return ServiceResult and never raise for
identifier errors; the CLI consumes this type to pick stdout/stderr and
the exit code.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from nsid.domain.errors import IdentifierError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: IdentifierError) -> ServiceError:
        """Build an error payload from an identifier error kind."""
        return cls(code=exc.code, message=str(exc), detail=exc.detail())


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"generate"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (timing, counts, etc.).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, error: ServiceError | IdentifierError) -> ServiceResult:
        if isinstance(error, IdentifierError):
            error = ServiceError.from_exception(error)
        return cls(ok=False, op=op, error=error)
