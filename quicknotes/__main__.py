"""Entry point for `python -m quicknotes`."""

from quicknotes.cli.main import cli

cli(prog_name="quicknotes")
