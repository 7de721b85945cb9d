"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from fragstrings.output.console import create_console, get_output, style_for_type

if TYPE_CHECKING:
    from rich.console import Console

    from fragstrings.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
        if verbose:
            _render_meta(console, result)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def _value_text(value: Any) -> str:
    return "" if value is None else str(value)


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"

    data = result.data
    if result.op == "encode":
        return str(data["encoded"])
    if result.op == "compile":
        return str(data["descriptor"])
    if result.op == "decode":
        return "\t".join(_value_text(v) for v in data["values"])
    if result.op == "decode_batch":
        return "\n".join(
            "\t".join(_value_text(v) for v in item["values"]) for item in data["items"]
        )
    if result.op == "aliases":
        return "\n".join(item["name"] for item in data["items"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="frag.ok")
    op = Text(f"  {result.op}", style="frag.op")
    console.print(label, op, sep="", end="")
    console.print()


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="frag.key")
    v = Text(str(value), style=style)
    console.print(k, v, sep="", end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}", markup=False)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="frag.error")
    op = Text(f"  {result.op}", style="frag.op")
    console.print(label, op, Text(" - "), Text(msg), sep="")

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}", markup=False)


# ── Renderers ─────────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_compile(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    _status_line(console, result)
    _field(console, "descriptor", data["descriptor"], "frag.descriptor")
    if "alias" in data:
        _field(console, "alias", data["alias"])
    _field(console, "prefix", data["prefix"], "frag.descriptor")
    _field(console, "ending", data["ending"])

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right")
    table.add_column("Type")
    table.add_column("Optionality")
    for index, item in enumerate(data["items"]):
        table.add_row(
            str(index),
            Text(item["type"], style=style_for_type(item["type"])),
            item["optionality"],
        )
    console.print(table)


def _render_encode(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "descriptor", result.data["descriptor"], "frag.descriptor")
    _field(console, "encoded", result.data["encoded"], "frag.encoded")


def _render_decode(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "descriptor", result.data["descriptor"], "frag.descriptor")

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right")
    table.add_column("Type")
    table.add_column("Value")
    for field in result.data["fields"]:
        type_text = field["type"] + ("?" if field["optional"] else "")
        if field["present"]:
            value = Text(str(field["value"]))
        else:
            value = Text("(absent)", style="frag.absent")
        table.add_row(
            str(field["index"]),
            Text(type_text, style=style_for_type(field["type"])),
            value,
        )
    console.print(table)


def _render_decode_batch(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    data = result.data
    _status_line(console, result)
    _field(console, "descriptor", data["descriptor"], "frag.descriptor")
    _field(console, "matched", f"{data['matched']}/{data['count']}")

    if not data["items"]:
        return
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Line", justify="right")
    table.add_column("Values")
    for item in data["items"]:
        values = ", ".join("(absent)" if v is None else repr(v) for v in item["values"])
        table.add_row(str(item["line"]), Text(values))
    console.print(table)


def _render_aliases(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    if not result.data["items"]:
        console.print(Text("  No descriptor aliases configured.", style="dim"))
        return
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Alias")
    table.add_column("Descriptor", style="frag.descriptor")
    table.add_column("Valid")
    for item in result.data["items"]:
        valid = Text("yes", style="frag.ok") if item["valid"] else Text("no", style="frag.error")
        table.add_row(f"@{item['name']}", Text(item["descriptor"]), valid)
    console.print(table)


_OP_RENDERERS: dict[str, Any] = {
    "compile": _render_compile,
    "encode": _render_encode,
    "decode": _render_decode,
    "decode_batch": _render_decode_batch,
    "aliases": _render_aliases,
}
