import os

from jotter.health import (
    check_data_dir,
    check_notes,
    check_notes_dir,
    format_health_report,
    run_health_check,
)
from jotter.store import update_note


def test_data_dir_resolves(jotter_env):
    assert check_data_dir() == ("✓", str(jotter_env))


def test_notes_dir_not_created(notes_dir):
    status, message = check_notes_dir()
    assert status == "!"
    assert str(notes_dir) in message


def test_notes_dir_is_a_file(notes_dir):
    notes_dir.parent.mkdir(parents=True)
    notes_dir.write_text("oops")
    status, message = check_notes_dir()
    assert status == "✗"
    assert message.startswith("Not a directory")


def test_notes_count(notes_dir):
    assert check_notes() == ("✓", "Empty")
    update_note("a", "1")
    update_note("b", "2")
    assert check_notes() == ("✓", "OK (2 notes)")
    assert check_notes_dir() == ("✓", "OK (writable)")


def test_notes_unreadable(notes_dir):
    notes_dir.mkdir(parents=True)
    (notes_dir / "bad.md").write_bytes(b"\xff")
    status, message = check_notes()
    assert status == "✗"
    assert "Failed to read note content" in message


def test_report_format(notes_dir):
    checks = run_health_check()
    assert list(checks) == ["Data directory", "Notes directory", "Notes"]

    report = format_health_report(checks)
    lines = report.splitlines()
    assert lines[0] == "Jotter Health Check"
    assert lines[1] == "-" * 40
    assert len(lines) == 5
