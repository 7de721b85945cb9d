"""Click base classes shared by every fragstrings command.

FragCommand and FragGroup accept an ``examples`` block.  Passing
``--examples`` prints it, followed by a short reminder of the descriptor
grammar, and exits before any settings are loaded.
"""

from __future__ import annotations

import textwrap
from typing import Any

import click

DESCRIPTOR_HINT = (
    "Descriptor items: %s (text) and %d (64-bit int). "
    "A trailing '?' makes an item optional, a final '*' accepts extra fields."
)


def format_examples(examples: str) -> str:
    """Normalize an examples block to a two-space indent."""
    return textwrap.indent(textwrap.dedent(examples).strip("\n"), "  ")


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to *cmd*."""
    body = format_examples(examples)

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(body)
        click.echo(f"\n{DESCRIPTOR_HINT}")
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class FragCommand(click.Command):
    """Command that takes an optional ``examples`` block."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class FragGroup(click.Group):
    """Group whose subcommands default to :class:`FragCommand`."""

    command_class = FragCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)
