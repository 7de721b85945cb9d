"""Command: validate a descriptor and show its schema."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fragstrings.commands._base import FragCommand

if TYPE_CHECKING:
    from fragstrings.commands._context import AppContext


@click.command(
    "compile",
    cls=FragCommand,
    examples="""\
  fragstrings compile '%s%d'
  fragstrings compile '%s%d?*'
  fragstrings --json compile @user""",
)
@click.argument("descriptor")
@click.pass_obj
def compile_cmd(app: AppContext, descriptor: str) -> None:
    """Validate DESCRIPTOR and show its items, ending, and prefix."""
    app.emit(app.codec.compile(descriptor))
