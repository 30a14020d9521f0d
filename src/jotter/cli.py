"""
CLI for Jotter.

Minimal CLI using stdlib for fast startup.
Subcommands import the store lazily.

Usage:
    jotter list [--json]            # List notes, newest first
    jotter new [--json]             # Create an empty note
    jotter write <id> [text...]     # Overwrite a note (stdin if no text)
    jotter rm <id>                  # Delete a note
    jotter --help                   # Show help
"""

import json
import logging
import sys

from jotter.exceptions import JotterError


def print_help() -> None:
    """Print help message."""
    print("""jotter - plain-text notes, one file each

Usage:
    jotter list [--json]          List notes (newest first)
    jotter new [--json]           Create an empty note, print its id and path
    jotter write <id> [text...]   Replace a note's content (reads stdin if no text)
    jotter rm <id>                Delete a note (absent notes are fine)
    jotter path                   Show the notes directory
    jotter health                 Show status of the notes store

Options:
    jotter --help, -h             Show this help
    jotter --version, -v          Show version

Examples:
    jotter new
    echo "Buy milk" | jotter write note_1718000000000
    jotter list --json
    jotter rm note_1718000000000

Notes live in $JOTTER_HOME/notes (default ~/.local/share/jotter/notes).""")


def print_version() -> None:
    """Print version."""
    from jotter import __version__
    print(f"jotter {__version__}")


def configure_logging() -> None:
    """Log to stderr at the configured level (default WARNING)."""
    from jotter.config import get_log_level

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=get_log_level("WARNING"),
        stream=sys.stderr,
    )


def first_line(content: str, width: int = 60) -> str:
    """First non-blank line of a note, truncated for listings."""
    for line in content.splitlines():
        if line.strip():
            return line.strip()[:width]
    return "(empty)"


def cmd_list(args: list[str]) -> int:
    """List notes."""
    from jotter.store import list_notes

    as_json = "--json" in args

    try:
        notes = list_notes()
    except JotterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if as_json:
        print(json.dumps([note.model_dump() for note in notes], indent=2))
        return 0

    if not notes:
        print("No notes.")
        return 0

    for note in notes:
        print(f"  {note.id:24}  {first_line(note.content)}")
    return 0


def cmd_new(args: list[str]) -> int:
    """Create an empty note."""
    from jotter.store import create_note

    try:
        note = create_note()
    except JotterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if "--json" in args:
        print(json.dumps(note.model_dump(), indent=2))
    else:
        print(note.id)
        print(note.path)
    return 0


def cmd_write(args: list[str]) -> int:
    """Overwrite a note's content."""
    from jotter.store import update_note

    if not args:
        print("Usage: jotter write <id> [text...]", file=sys.stderr)
        return 1

    note_id = args[0]
    if len(args) > 1:
        content = " ".join(args[1:])
    else:
        content = sys.stdin.read()

    try:
        update_note(note_id, content)
    except JotterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def cmd_rm(args: list[str]) -> int:
    """Delete a note."""
    from jotter.store import delete_note

    if not args:
        print("Usage: jotter rm <id>", file=sys.stderr)
        return 1

    try:
        delete_note(args[0])
    except JotterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def cmd_path() -> int:
    """Print the notes directory."""
    from jotter.store import ensure_notes_dir

    try:
        print(ensure_notes_dir())
    except JotterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def cmd_health() -> int:
    """Show health report."""
    from jotter.health import format_health_report, run_health_check

    print(format_health_report(run_health_check()))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = sys.argv[1:] if argv is None else argv

    if not args or args[0] in ("--help", "-h", "help"):
        print_help()
        return 0

    if args[0] in ("--version", "-v", "version"):
        print_version()
        return 0

    try:
        configure_logging()
    except JotterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    command, rest = args[0], args[1:]

    if command == "health":
        return cmd_health()

    if command == "path":
        return cmd_path()

    commands = {
        "list": cmd_list,
        "new": cmd_new,
        "write": cmd_write,
        "rm": cmd_rm,
    }
    handler = commands.get(command)
    if handler is None:
        print(f"Unknown command: {command}", file=sys.stderr)
        print("Run 'jotter --help' for usage.", file=sys.stderr)
        return 1

    # Notes directory must exist before any operation runs
    from jotter.store import ensure_notes_dir

    try:
        ensure_notes_dir()
    except JotterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return handler(rest)


if __name__ == "__main__":
    sys.exit(main())
