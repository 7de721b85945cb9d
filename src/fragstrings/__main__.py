from fragstrings.cli import cli

cli()
