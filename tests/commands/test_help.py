"""Parametrized help tests for all CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from fragstrings.cli import cli

# (CLI args, expected keywords in output)
HELP_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["--help"], ["compile", "encode", "decode", "aliases"]),
    (["compile", "--help"], ["DESCRIPTOR", "--examples"]),
    (["encode", "--help"], ["DESCRIPTOR", "VALUES"]),
    (["decode", "--help"], ["DESCRIPTOR", "TEXT", "--stdin"]),
    (["aliases", "--help"], ["@name"]),
]


@pytest.mark.usefixtures("_empty_dir")
@pytest.mark.parametrize("args,keywords", HELP_COMMANDS)
def test_help(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    for keyword in keywords:
        assert keyword in result.output
