# quicknotes/config.py

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from a .env file into the process environment
load_dotenv()

DEFAULT_NOTES_DIR = "notes"

_TRUTHY = {"1", "true", "yes", "on"}


def _flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    """Runtime settings resolved from the environment."""

    notes_dir: Path
    verbose: bool = False
    debug: bool = False


def load_settings(cwd: Optional[Path] = None) -> Settings:
    """
    Resolve settings from the environment.

    QUICKNOTES_DIR is taken relative to the current working directory
    unless it is absolute. Variables are read on every call so tests can
    change them with monkeypatch.
    """
    base = cwd if cwd is not None else Path.cwd()
    notes_dir = Path(os.getenv("QUICKNOTES_DIR") or DEFAULT_NOTES_DIR)
    if not notes_dir.is_absolute():
        notes_dir = base / notes_dir

    return Settings(
        notes_dir=notes_dir,
        verbose=_flag("QUICKNOTES_VERBOSE"),
        debug=_flag("QUICKNOTES_DEBUG"),
    )
