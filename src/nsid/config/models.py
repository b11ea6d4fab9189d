"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, nsid.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from nsid.domain.namespaces import validate_namespace

# --- nsid.toml sections ---


class GenerateConfig(BaseModel):
    """[generate] section."""

    model_config = {"frozen": True}

    default_namespace: str | None = None
    max_count: int = Field(default=1000, ge=1)

    @field_validator("default_namespace")
    @classmethod
    def _check_namespace(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return validate_namespace(value)
