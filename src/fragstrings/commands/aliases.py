"""Command: list descriptor aliases from fragstrings.toml."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fragstrings.commands._base import FragCommand

if TYPE_CHECKING:
    from fragstrings.commands._context import AppContext


@click.command(
    cls=FragCommand,
    examples="""\
  fragstrings aliases
  fragstrings --json aliases""",
)
@click.pass_obj
def aliases(app: AppContext) -> None:
    """List the [descriptors] aliases usable as @name."""
    app.emit(app.codec.aliases())
