"""Locate and load ``fragstrings.toml``.

Lookup order: an explicit path (``--config``), then the
``FRAGSTRINGS_CONFIG`` env var, then a walk up from the working
directory, the way git finds ``.git/``.  :func:`load_config` is the only
place the file is parsed and validated; the settings layer consumes its
result.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError

from fragstrings.config.models import FragConfig

CONFIG_FILENAME = "fragstrings.toml"
CONFIG_ENV_VAR = "FRAGSTRINGS_CONFIG"


def find_config(start: Path | None = None, explicit: str | Path | None = None) -> Path | None:
    """Return the config file to use, or None when there is none.

    An *explicit* path wins and is returned only if it exists.  Otherwise
    ``FRAGSTRINGS_CONFIG`` is consulted, and failing that the directories
    from *start* (default: cwd) up to the filesystem root are searched.
    """
    override = explicit or os.environ.get(CONFIG_ENV_VAR)
    if override:
        p = Path(override)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Path | None = None, cwd: Path | None = None) -> FragConfig:
    """Parse and validate a config file into a :class:`FragConfig`.

    If *path* is None the file is discovered from *cwd*; with no file at all
    the code defaults are returned.

    Raises:
        click.ClickException: If the file is not valid TOML or a section has
            the wrong shape.  The message names the file.
    """
    if path is None:
        path = find_config(cwd)
    if path is None:
        return FragConfig()

    try:
        data: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc

    try:
        return FragConfig.model_validate(data)
    except ValidationError as exc:
        msg = f"Invalid config in {path}: {exc}"
        raise click.ClickException(msg) from exc
