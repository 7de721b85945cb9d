"""Command: encode values into a fragmented string."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fragstrings.commands._base import FragCommand

if TYPE_CHECKING:
    from fragstrings.commands._context import AppContext


@click.command(
    cls=FragCommand,
    examples="""\
  fragstrings encode '%s%d' foo 42
  fragstrings -q encode '%s%d?' user 7
  fragstrings encode -- '%d' -5""",
)
@click.argument("descriptor")
@click.argument("values", nargs=-1)
@click.pass_obj
def encode(app: AppContext, descriptor: str, values: tuple[str, ...]) -> None:
    """Encode VALUES with DESCRIPTOR.

    Every declared slot needs a value, optional ones included.
    Int slots parse their argument as a base-10 integer.
    """
    app.emit(app.codec.encode(descriptor, list(values)))
