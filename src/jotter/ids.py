"""
Note identifiers for Jotter.

An id is the filename stem of a note, so it is the only thing standing
between caller input and the filesystem path.
"""

import time
from pathlib import Path

FALLBACK_ID = "note"
NOTE_SUFFIX = ".md"

_ALLOWED = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_-"
)


def sanitize_id(raw: str) -> str:
    """
    Keep only ASCII letters, digits, '_' and '-'.

    Separators, dots, whitespace and non-ASCII characters are dropped.
    Never returns an empty string.
    """
    cleaned = "".join(ch for ch in raw if ch in _ALLOWED)
    return cleaned or FALLBACK_ID


def generate_id() -> str:
    """Generate a note ID from the wall clock (note_<unix ms>)."""
    return f"note_{int(time.time() * 1000)}"


def note_path(notes_dir: Path, note_id: str) -> Path:
    """Path of the note file for an already-sanitized id."""
    return notes_dir / f"{note_id}{NOTE_SUFFIX}"


def is_markdown_file(path: Path) -> bool:
    """True if the file has a .md extension, in any case."""
    return path.suffix.lower() == NOTE_SUFFIX
