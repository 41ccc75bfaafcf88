"""
quicknotes/types.py

Centralized type definitions for quicknotes.

The only domain value is the Note: a title/content pair that is stored as a
single `title:content` line in a collection file. Keeping the line format
next to the type means the storage layer never has to know how a note is
rendered or parsed.
"""

from dataclasses import dataclass
from typing import Optional

UNTITLED = "(untitled)"
FIELD_SEPARATOR = ":"


# ---------------------------------------------------------------------------
# Note
# ---------------------------------------------------------------------------
# Immutable value object.
#
# Invariants:
#   • title is never empty (an empty title becomes UNTITLED)
#   • content is stored as given; emptiness is checked at the point of
#     user entry, not here, so hand-edited files still load
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Note:
    title: str
    content: str

    def __post_init__(self) -> None:
        if not self.title:
            # frozen dataclass: bypass __setattr__ during construction
            object.__setattr__(self, "title", UNTITLED)

    def to_line(self) -> str:
        """Render the note in the collection file format (no newline)."""
        return f"{self.title}{FIELD_SEPARATOR}{self.content}"

    @classmethod
    def from_line(cls, line: str) -> Optional["Note"]:
        """
        Parse a stored line into a Note.

        The line is split on the FIRST colon only, so content may itself
        contain colons. Lines without a colon are malformed and yield None.
        """
        line = line.rstrip("\r\n")
        title, sep, content = line.partition(FIELD_SEPARATOR)
        if not sep:
            return None
        return cls(title, content)
