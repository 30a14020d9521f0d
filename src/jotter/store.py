"""
Notes store for Jotter.

One Markdown file per note in the notes directory. No index, no cache:
every call re-resolves the directory and goes to disk.
"""

import logging
from pathlib import Path

from pydantic import BaseModel, Field

from jotter.config import get_notes_dir
from jotter.exceptions import (
    CreationExhausted,
    DeleteFailure,
    DirectoryCreationFailure,
    ReadFailure,
    WriteFailure,
)
from jotter.ids import generate_id, is_markdown_file, note_path, sanitize_id

logger = logging.getLogger(__name__)

# Exclusive-create attempts before create_note gives up
MAX_CREATE_ATTEMPTS = 5


class Note(BaseModel):
    """A note as returned to callers."""

    id: str = Field(description="Filename stem, [A-Za-z0-9_-]+")
    path: str = Field(description="Absolute path to the .md file")
    content: str = Field(default="", description="Raw note text")


def ensure_notes_dir(notes_dir: Path | None = None) -> Path:
    """Resolve the notes directory and create it if missing."""
    directory = Path(notes_dir) if notes_dir is not None else get_notes_dir()
    directory = directory.absolute()
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error(f"Failed to create notes dir {directory}: {e}")
        raise DirectoryCreationFailure(f"Failed to create notes dir: {e}") from e
    return directory


def create_note(notes_dir: Path | None = None) -> Note:
    """
    Create a new, empty note.

    The file is opened in exclusive mode, so an existing note is never
    clobbered. On a name collision the id gets an _<attempt> suffix.

    Raises:
        CreationExhausted: every candidate filename was taken
        WriteFailure: the file could not be created or written
    """
    directory = ensure_notes_dir(notes_dir)
    base_id = sanitize_id(generate_id())
    content = ""

    for attempt in range(MAX_CREATE_ATTEMPTS):
        candidate_id = base_id if attempt == 0 else sanitize_id(f"{base_id}_{attempt}")
        candidate = note_path(directory, candidate_id)

        try:
            with open(candidate, "x", encoding="utf-8", newline="") as f:
                f.write(content)
        except FileExistsError:
            logger.debug(f"Note id collision: {candidate_id}")
            continue
        except OSError as e:
            logger.error(f"Failed to write note {candidate}: {e}")
            raise WriteFailure(f"Failed to write note: {e}") from e

        logger.info(f"Created note {candidate.stem}")
        return Note(id=candidate.stem, path=str(candidate), content=content)

    logger.error(f"No free note id after {MAX_CREATE_ATTEMPTS} tries (base {base_id})")
    raise CreationExhausted(
        f"Failed to create note file after {MAX_CREATE_ATTEMPTS} tries: "
        f"{base_id} and its suffixed variants already exist"
    )


def _is_text(name: str) -> bool:
    # Undecodable filenames come back from the OS with surrogate escapes
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def list_notes(notes_dir: Path | None = None) -> list[Note]:
    """
    List every note, newest-looking first.

    Ordering is a plain descending string sort on id. One unreadable
    file fails the whole listing.
    """
    directory = ensure_notes_dir(notes_dir)

    try:
        entries = list(directory.iterdir())
    except OSError as e:
        logger.error(f"Failed to read notes dir {directory}: {e}")
        raise ReadFailure(f"Failed to read notes dir: {e}") from e

    notes = []
    for path in entries:
        if not path.is_file() or not is_markdown_file(path):
            continue

        note_id = path.stem
        if not note_id or not _is_text(note_id):
            continue

        try:
            with open(path, "r", encoding="utf-8", newline="") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read note {path}: {e}")
            raise ReadFailure(f"Failed to read note content ({path}): {e}") from e

        notes.append(Note(id=note_id, path=str(path), content=content))

    notes.sort(key=lambda note: note.id, reverse=True)
    return notes


def update_note(note_id: str, content: str, notes_dir: Path | None = None) -> None:
    """Overwrite a note with content. A missing note is created."""
    directory = ensure_notes_dir(notes_dir)
    path = note_path(directory, sanitize_id(note_id))

    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as e:
        logger.error(f"Failed to write note {path}: {e}")
        raise WriteFailure(f"Failed to write note file: {e}") from e

    logger.info(f"Updated note {path.stem} ({len(content)} chars)")


def delete_note(note_id: str, notes_dir: Path | None = None) -> None:
    """Delete a note. Deleting a note that doesn't exist is not an error."""
    directory = ensure_notes_dir(notes_dir)
    path = note_path(directory, sanitize_id(note_id))

    try:
        path.unlink()
    except FileNotFoundError:
        logger.debug(f"Delete of absent note {path.stem}")
        return
    except OSError as e:
        logger.error(f"Failed to delete note {path}: {e}")
        raise DeleteFailure(f"Failed to delete note file: {e}") from e

    logger.info(f"Deleted note {path.stem}")
