"""
quicknotes/sanitize.py

Turn a raw collection argument into a name that is safe to embed in a
file name on Windows, macOS, and Linux.
"""

import re
from datetime import datetime
from typing import Optional

import typer

# Characters illegal in file names on common platforms, plus C0 controls.
_FORBIDDEN = re.compile(r'[<>:"/\\|?*\x00-\x1f]')

FALLBACK_FORMAT = "%y%m%d_%H%M%S"


def _warn(message: str) -> None:
    typer.secho(message, fg=typer.colors.YELLOW, err=True)


def sanitize_collection_name(raw: str, now: Optional[datetime] = None) -> str:
    """
    Strip forbidden characters from a collection name.

    If nothing usable is left, a timestamp-based fallback name is generated
    and two warnings are written to stderr. This function never raises.

    Parameters
    ----------
    raw : str
        The collection argument exactly as given on the command line.
    now : datetime, optional
        Clock override for the fallback name. Defaults to local time.

    Returns
    -------
    str
        The cleaned name, or the generated fallback.
    """
    cleaned = _FORBIDDEN.sub("", raw).strip()
    if cleaned:
        return cleaned

    _warn(f'Warning: collection name "{raw}" has no usable characters.')
    fallback = (now or datetime.now()).strftime(FALLBACK_FORMAT)
    _warn(f'Warning: using generated collection name "{fallback}".')
    return fallback
