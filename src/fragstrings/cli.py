"""Root CLI group for fragstrings with global flags and command registration."""

from __future__ import annotations

import click

from fragstrings import __version__
from fragstrings.commands import register_commands
from fragstrings.commands._base import FragGroup
from fragstrings.commands._context import AppContext
from fragstrings.config.settings import FragSettings


@click.group(
    cls=FragGroup,
    invoke_without_command=True,
    examples="""\
  fragstrings compile '%s%d?*'
  fragstrings encode '%s%d' user 42
  fragstrings decode '%s%d' '%s%d__user__42'
  fragstrings --json -c ./fragstrings.toml decode @user '%s__bob'""",
)
@click.version_option(version=__version__, prog_name="fragstrings")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Bare values only.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """fragstrings: encode and decode self-describing fragmented strings."""
    ctx.ensure_object(dict)
    settings = FragSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
