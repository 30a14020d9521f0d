"""
Health check module for Jotter.

Reports where notes live and whether the store can use them.
"""

import os

from jotter.config import get_app_data_dir, get_notes_dir
from jotter.exceptions import JotterError


def check_data_dir() -> tuple[str, str]:
    """Check that the app data directory resolves."""
    try:
        return "✓", str(get_app_data_dir())
    except JotterError as e:
        return "✗", f"Error: {e}"


def check_notes_dir() -> tuple[str, str]:
    """Check notes directory exists and is writable."""
    try:
        notes_dir = get_notes_dir()
    except JotterError as e:
        return "✗", f"Error: {e}"

    if not notes_dir.exists():
        return "!", f"Not created yet ({notes_dir})"
    if not notes_dir.is_dir():
        return "✗", f"Not a directory ({notes_dir})"
    if not os.access(notes_dir, os.W_OK):
        return "✗", f"Not writable ({notes_dir})"
    return "✓", "OK (writable)"


def check_notes() -> tuple[str, str]:
    """Check that every note can be listed."""
    from jotter.store import list_notes

    try:
        notes = list_notes()
    except JotterError as e:
        return "✗", f"Error: {e}"

    if not notes:
        return "✓", "Empty"
    return "✓", f"OK ({len(notes)} notes)"


def run_health_check() -> dict[str, tuple[str, str]]:
    """Run all health checks."""
    return {
        "Data directory": check_data_dir(),
        "Notes directory": check_notes_dir(),
        "Notes": check_notes(),
    }


def format_health_report(checks: dict[str, tuple[str, str]]) -> str:
    """Format health check results."""
    lines = ["Jotter Health Check", "-" * 40]

    for name, (status, message) in checks.items():
        lines.append(f"{status} {name}: {message}")

    return "\n".join(lines)
