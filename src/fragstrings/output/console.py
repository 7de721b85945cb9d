"""Rich Console factory and theme for fragstrings output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

FRAG_THEME = Theme(
    {
        "frag.ok": "bold green",
        "frag.error": "bold red",
        "frag.warning": "bold yellow",
        "frag.op": "bold cyan",
        "frag.key": "dim",
        "frag.descriptor": "bold blue",
        "frag.encoded": "bold",
        "frag.type.str": "green",
        "frag.type.int": "magenta",
        "frag.absent": "dim italic",
    }
)

_TYPE_STYLES: dict[str, str] = {
    "str": "frag.type.str",
    "int": "frag.type.int",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=FRAG_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_type(value_type: str) -> str:
    """Return the Rich style name for a slot type."""
    return _TYPE_STYLES.get(value_type, "")
