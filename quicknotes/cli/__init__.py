"""
Command-line interface for quicknotes.

Public surface:

    • `cli`  → the Typer application, installed as the `quicknotes` script
"""

from .main import cli

__all__ = ["cli"]
