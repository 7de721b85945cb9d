"""Subcommand modules for fragstrings.

Provides register_commands() which uses deferred imports to keep
``fragstrings --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from fragstrings.commands.aliases import aliases
    from fragstrings.commands.compile_cmd import compile_cmd
    from fragstrings.commands.decode import decode
    from fragstrings.commands.encode import encode

    cli.add_command(compile_cmd)
    cli.add_command(encode)
    cli.add_command(decode)
    cli.add_command(aliases)
