"""NsidSettings: one frozen object built from flags, environment and TOML.

Sources, strongest first:

* keyword arguments (the root CLI's global flags)
* ``NSID_*`` environment variables, ``__`` between section and key
  (``NSID_GENERATE__MAX_COUNT=50``)
* ``nsid.toml`` found by :func:`nsid.config.discovery.find_config`
* defaults declared on the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from nsid.config.discovery import find_config
from nsid.config.models import GenerateConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by a single TOML document."""

    def __init__(self, settings_cls: type[BaseSettings], path: Path | None) -> None:
        super().__init__(settings_cls)
        self.path = path
        self.document = self._read(path) if path is not None else {}

    @staticmethod
    def _read(path: Path) -> dict[str, Any]:
        if not path.is_file():
            return {}
        with path.open("rb") as fh:
            try:
                return tomllib.load(fh)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self.document.get(field_name), field_name, field_name in self.document

    def __call__(self) -> dict[str, Any]:
        return dict(self.document)


# pydantic-settings builds its sources inside the constructor, so the
# TOML path for the instance under construction travels out of band.
_pending = threading.local()


class NsidSettings(BaseSettings):
    """Everything a CLI invocation needs to know about its configuration.

    Attributes:
        config_path: The TOML file the values were read from, or None.
        generate: The ``[generate]`` table.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "NSID_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    generate: GenerateConfig = Field(default_factory=GenerateConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml = TomlSettingsSource(settings_cls, getattr(_pending, "path", None))
        return init_settings, env_settings, toml

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> NsidSettings:
        """Build settings for one invocation.

        *config_path* (``--config``) names the TOML file directly; a path
        that does not exist means no file.  Without it the file is
        discovered from *start*.  *cli_flags* override every other source.
        """
        if config_path:
            candidate = Path(config_path)
            toml_path = candidate if candidate.is_file() else None
        else:
            toml_path = find_config(start)

        _pending.path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _pending.path = None
