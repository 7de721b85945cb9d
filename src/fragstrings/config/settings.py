"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs, CLI flags passed by Click
  2. Env vars, ``FRAGSTRINGS_*`` prefix
  3. TOML file, ``fragstrings.toml`` discovered via walk-up
  4. Code defaults, baked into the section models
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from fragstrings.config.discovery import find_config, load_config
from fragstrings.config.models import OutputConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Feed the sections of ``fragstrings.toml`` into the settings merge.

    Only keys present in the file are emitted so env vars and code defaults
    still apply to everything else.
    """

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path is not None:
            self._data = load_config(toml_path).model_dump(exclude_unset=True)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class FragSettings(BaseSettings):
    """Unified settings for the fragstrings CLI.

    Attributes:
        config_path: Resolved config file, or None when none was found.
        descriptors: Named descriptor aliases from ``[descriptors]``.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "FRAGSTRINGS_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    log_level: str | None = None

    # --- TOML sections ---
    descriptors: dict[str, str] = Field(default_factory=dict)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @property
    def use_json(self) -> bool:
        return self.json_output or self.output.json_output

    @property
    def use_quiet(self) -> bool:
        return self.quiet or self.output.quiet

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> FragSettings:
        """Construct settings from CLI invocation.

        Discovers ``fragstrings.toml`` via walk-up from *start* (or uses an
        explicit *config_path*) and merges CLI flags as highest-priority
        overrides. Unset flags (None or False) leave env and TOML values alone.
        """
        toml_path = find_config(start, explicit=config_path)

        overrides = {k: v for k, v in cli_flags.items() if v is not None and v is not False}
        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None
