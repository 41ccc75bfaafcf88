"""
Root entrypoint for the quicknotes CLI.

    quicknotes [COLLECTION]

Startup is linear:

    1. validate the command line (exactly one collection name)
    2. sanitize the name into something safe for a file name
    3. make sure <notes-dir>/<name>_notes.txt exists
    4. load the notes and hand control to the interactive session

Usage problems print the help text and exit without touching any file.
"""

# ---------------------------------------------------------------------------
# Imports
# ---------------------------------------------------------------------------
from typing import List, Optional

import typer

from quicknotes.config import Settings, load_settings
from quicknotes.logging_utils import log_verbose
from quicknotes.sanitize import sanitize_collection_name
from quicknotes.session import NoteSession
from quicknotes.storage import ensure_notes_file, load_notes, notes_file_path

# ---------------------------------------------------------------------------
# Root CLI application
# ---------------------------------------------------------------------------
# A single-command Typer app: Typer runs the command directly instead of
# expecting a subcommand name. Unknown dash-prefixed tokens are accepted as
# collection text; only -h/--help is a real option.
# ---------------------------------------------------------------------------
cli = typer.Typer(add_completion=False, rich_markup_mode=None)


@cli.command(
    context_settings={
        "help_option_names": ["-h", "--help"],
        "ignore_unknown_options": True,
    }
)
def notes(
    ctx: typer.Context,
    collection: Optional[List[str]] = typer.Argument(
        None,
        metavar="[COLLECTION]",
        help="Name of your notes collection.",
        show_default=False,
    ),
) -> None:
    """
    Keep a named collection of one-line notes in a plain text file.

    Notes are stored in notes/<COLLECTION>_notes.txt under the current
    directory, one "title:content" line per note. An interactive menu lets
    you show, add, and delete notes.
    """
    if not collection or len(collection) != 1:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    run_notes(collection[0], load_settings())


def run_notes(raw_collection: str, settings: Settings) -> None:
    """
    Start a session for one collection. Thin wrapper over storage + session.

    Stops without entering the menu if the notes file cannot be created;
    every other failure is reported by the layer that hit it.
    """
    collection = sanitize_collection_name(raw_collection)
    typer.echo(f"Welcome to the Notes App!\nCollection: {collection}")

    path = notes_file_path(collection, settings.notes_dir)
    if not ensure_notes_file(path, debug=settings.debug):
        typer.echo("ERROR: Unable to initialize notes file.")
        raise typer.Exit()

    notes_list = load_notes(path, debug=settings.debug)
    log_verbose(f"Loaded {len(notes_list)} notes from {path}.", settings.verbose)

    session = NoteSession(
        path,
        notes_list,
        verbose=settings.verbose,
        debug=settings.debug,
    )
    session.run()


# ---------------------------------------------------------------------------
# Entry point for `python -m quicknotes.cli.main`
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    cli()
