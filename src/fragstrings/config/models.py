"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, fragstrings.toml only contains
overrides.  A typical file only declares descriptor aliases::

    [descriptors]
    user = "%s%d?"
    event = "%s%d*"
"""

from __future__ import annotations

import re

from pydantic import BaseModel, Field, field_validator

_ALIAS_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_.-]*$")


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True, "populate_by_name": True}

    json_output: bool = Field(default=False, alias="json")
    quiet: bool = False


class FragConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    descriptors: dict[str, str] = Field(default_factory=dict)
    output: OutputConfig = Field(default_factory=OutputConfig)
    log_level: str | None = None

    @field_validator("descriptors")
    @classmethod
    def _check_alias_names(cls, value: dict[str, str]) -> dict[str, str]:
        for name in value:
            if not _ALIAS_NAME.match(name):
                msg = f"Invalid descriptor alias name: {name!r}"
                raise ValueError(msg)
        return value
