"""
logging_utils.py

A small collection of logging helpers used across quicknotes.

These helpers keep diagnostic output consistent and centralized. They
deliberately avoid the `logging` framework: the tool is an interactive
console program, and everything it says goes to the same terminal the user
is typing into, through Typer's echo functions.
"""

import typer


def log_verbose(message: str, verbose: bool) -> None:
    """
    Print a high‑level progress message when verbose mode is enabled.

    Parameters
    ----------
    message : str
        A short, plain‑English description of what the program is doing
        (e.g., "Loaded 3 notes from notes/work_notes.txt.").

    verbose : bool
        Whether verbose mode is active. When False, this function does
        nothing.
    """
    if verbose:
        typer.echo(message)


def log_debug(message: str, debug: bool) -> None:
    """
    Print a diagnostic message when debug mode is enabled.

    Debug output carries details that are noise for everyday use, such as
    the text of an OSError behind a "could not save" message. It is dimmed
    so it stays visually separate from the normal console protocol.
    """
    if debug:
        typer.secho(f"[debug] {message}", dim=True)
