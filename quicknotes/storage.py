"""
quicknotes/storage.py

Flat-file persistence for a note collection.

One collection is one UTF-8 text file with one note per line:

    title:content

The storage layer never raises for file-system problems. Each failure is
reported to the user as a single message and the caller decides what to
do next: the session carries on, and only startup treats a failure as
fatal. Every call opens and closes the file inside its own `with` block,
so no handle outlives a single operation.
"""

from pathlib import Path
from typing import Iterable, List

import typer

from quicknotes.logging_utils import log_debug
from quicknotes.types import Note

NOTES_FILE_SUFFIX = "_notes.txt"
ENCODING = "utf-8"


def notes_file_path(collection: str, notes_dir: Path) -> Path:
    """Return the backing file for `collection` inside `notes_dir`."""
    return notes_dir / f"{collection}{NOTES_FILE_SUFFIX}"


# ---------------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------------
def ensure_notes_file(path: Path, debug: bool = False) -> bool:
    """
    Make sure the notes file exists, creating it and its directory if not.

    Returns
    -------
    bool
        True if the file is ready for use, False if creation failed.
    """
    if path.exists():
        return True

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch(exist_ok=False)
    except OSError as e:
        typer.echo("Error creating notes file.")
        log_debug(f"ensure_notes_file({path}): {e}", debug)
        return False

    typer.echo("Notes file created.")
    return True


# ---------------------------------------------------------------------------
# Read
# ---------------------------------------------------------------------------
def load_notes(path: Path, debug: bool = False) -> List[Note]:
    """
    Read every well-formed note from `path`, in file order.

    Lines without a colon are skipped silently. If the file cannot be read
    the user is told and an empty list is returned.
    """
    notes: List[Note] = []
    try:
        with path.open("r", encoding=ENCODING) as f:
            for line in f:
                note = Note.from_line(line)
                if note is not None:
                    notes.append(note)
    except (OSError, UnicodeDecodeError) as e:
        typer.echo("Couldn't read the notes file.")
        log_debug(f"load_notes({path}): {e}", debug)
        return []
    return notes


# ---------------------------------------------------------------------------
# Write
# ---------------------------------------------------------------------------
def append_note(path: Path, note: Note, debug: bool = False) -> bool:
    """Append a single note to the end of the file."""
    try:
        with path.open("a", encoding=ENCODING, newline="\n") as f:
            f.write(note.to_line() + "\n")
    except OSError as e:
        typer.echo("Error saving note to file.")
        log_debug(f"append_note({path}): {e}", debug)
        return False
    return True


def rewrite_notes(path: Path, notes: Iterable[Note], debug: bool = False) -> bool:
    """Truncate the file and write `notes` back in order."""
    try:
        with path.open("w", encoding=ENCODING, newline="\n") as f:
            for note in notes:
                f.write(note.to_line() + "\n")
    except OSError as e:
        typer.echo("Error saving notes to file.")
        log_debug(f"rewrite_notes({path}): {e}", debug)
        return False
    return True
