"""Command: decode a fragmented string (or many, from stdin)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fragstrings.commands._base import FragCommand

if TYPE_CHECKING:
    from fragstrings.commands._context import AppContext


@click.command(
    cls=FragCommand,
    examples="""\
  fragstrings decode '%s%d' '%s%d__foo__42'
  fragstrings -q decode '%s%d?' '%s__foo'
  grep '%s%d' app.log | fragstrings decode '%s%d*' --stdin""",
)
@click.argument("descriptor")
@click.argument("text", required=False)
@click.option("--stdin", "from_stdin", is_flag=True, help="Decode each line read from stdin.")
@click.pass_obj
def decode(app: AppContext, descriptor: str, text: str | None, from_stdin: bool) -> None:
    """Decode TEXT against DESCRIPTOR.

    Exits with status 1 when TEXT does not match.
    """
    if from_stdin:
        if text is not None:
            raise click.UsageError("TEXT cannot be combined with --stdin.")
        stream = click.get_text_stream("stdin")
        app.emit(app.codec.decode_batch(descriptor, stream))
        return
    if text is None:
        raise click.UsageError("Missing argument 'TEXT' (or pass --stdin).")
    app.emit(app.codec.decode(descriptor, text))
