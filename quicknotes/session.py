"""
quicknotes/session.py

The interactive note session: the in-memory store plus the menu handlers
that change it.

A NoteSession is an explicit context object. It owns:

    • the ordered list of notes for the active collection (the store)
    • the path of the backing file
    • the input source used for every prompt

Handlers keep the store and the file in lockstep: an add appends one line,
a delete rewrites the whole file from the store.
"""

import re
from pathlib import Path
from typing import Callable, Dict, List, Optional

import typer

from quicknotes.logging_utils import log_debug, log_verbose
from quicknotes.storage import append_note, rewrite_notes
from quicknotes.types import Note

Prompt = Callable[[str], str]

# Plain ASCII integer, optionally signed; no digit-group underscores.
_NOTE_NUMBER = re.compile(r"[+-]?[0-9]+")

MENU = (
    "\nChoose an option:\n"
    "1. Show notes\n"
    "2. Add a note\n"
    "3. Delete a note\n"
    "4. Exit"
)


def console_prompt(text: str) -> str:
    """
    Read one line from the terminal.

    An empty answer is returned as "" rather than re-prompting. EOF and
    Ctrl-C surface as typer.Abort.
    """
    return typer.prompt(text, default="", show_default=False)


class NoteSession:
    """
    State and handlers for one run against one collection.

    Parameters
    ----------
    path : Path
        The collection's backing file. It must already exist.
    notes : list[Note], optional
        Initial store contents, normally the result of load_notes().
    prompt : callable, optional
        Input source. Receives the prompt text and returns the raw answer.
        Defaults to console_prompt.
    """

    def __init__(
        self,
        path: Path,
        notes: Optional[List[Note]] = None,
        prompt: Optional[Prompt] = None,
        verbose: bool = False,
        debug: bool = False,
    ) -> None:
        self.path = path
        self.notes: List[Note] = list(notes or [])
        self.prompt: Prompt = prompt or console_prompt
        self.verbose = verbose
        self.debug = debug
        self.running = True

        self._actions: Dict[str, Callable[[], None]] = {
            "1": self.show_notes,
            "2": self.add_note,
            "3": self.delete_note,
            "4": self.exit_app,
        }

    def _ask(self, text: str) -> str:
        return self.prompt(text).strip()

    # -----------------------------------------------------------------------
    # Main loop
    # -----------------------------------------------------------------------
    def run(self) -> None:
        """Show the menu and dispatch choices until the user exits."""
        while self.running:
            typer.echo(MENU)
            try:
                self.dispatch(self._ask("Choice"))
            except typer.Abort:
                # End of input behaves like choosing Exit.
                typer.echo("")
                self.exit_app()

    def dispatch(self, choice: str) -> None:
        action = self._actions.get(choice)
        if action is None:
            typer.echo("Invalid choice. Please try again.")
            return
        log_debug(f"menu choice {choice!r} -> {action.__name__}", self.debug)
        action()

    # -----------------------------------------------------------------------
    # 1. Show notes
    # -----------------------------------------------------------------------
    def show_notes(self) -> None:
        """Display all notes, oldest first."""
        if not self.notes:
            typer.echo("No notes available.")
            return

        typer.echo("Your notes:\n")
        for i, note in enumerate(self.notes, start=1):
            typer.echo(f"{i:03d} - {note.title}: {note.content}")

    # -----------------------------------------------------------------------
    # 2. Add a note
    # -----------------------------------------------------------------------
    def add_note(self) -> None:
        """
        Prompt for a title and content and store the new note.

        An empty title is allowed (it becomes "(untitled)"); empty content is
        rejected and nothing changes.
        """
        title = self._ask("Enter a title for your note")
        content = self._ask("Enter your note")

        if not content:
            typer.echo("Error: Note cannot be empty.\n")
            return

        note = Note(title, content)
        self.notes.append(note)
        append_note(self.path, note, debug=self.debug)
        typer.echo(f"Note added: {note.title}")
        log_verbose(f"Collection now holds {len(self.notes)} notes.", self.verbose)

    # -----------------------------------------------------------------------
    # 3. Delete a note
    # -----------------------------------------------------------------------
    def delete_note(self) -> None:
        """Delete a note chosen by its 1-based number, then rewrite the file."""
        if not self.notes:
            typer.echo("No notes to delete.")
            return

        self.show_notes()
        answer = self._ask("Enter the number of the note to delete (or 0 to cancel)")
        if not _NOTE_NUMBER.fullmatch(answer):
            typer.echo("Invalid note number.")
            return
        number = int(answer)

        if number == 0:
            typer.echo("Delete cancelled.")
            return
        if not 1 <= number <= len(self.notes):
            typer.echo("Invalid note number.")
            return

        removed = self.notes.pop(number - 1)
        rewrite_notes(self.path, self.notes, debug=self.debug)
        typer.echo(f"Deleted note: {removed.title}")
        log_verbose(f"Rewrote {self.path} with {len(self.notes)} notes.", self.verbose)

    # -----------------------------------------------------------------------
    # 4. Exit
    # -----------------------------------------------------------------------
    def exit_app(self) -> None:
        typer.echo("Bye! See you next time.")
        self.running = False
