import re
from types import SimpleNamespace

import pytest

from jotter.ids import (
    FALLBACK_ID,
    generate_id,
    is_markdown_file,
    note_path,
    sanitize_id,
)

ID_RE = re.compile(r"^[A-Za-z0-9_-]+$")


def test_sanitize_keeps_allowed_chars():
    assert sanitize_id("note_123-abc") == "note_123-abc"


def test_sanitize_strips_traversal():
    assert sanitize_id("../../etc/passwd") == "etcpasswd"


def test_sanitize_strips_windows_separators():
    assert sanitize_id("..\\..\\boot.ini") == "bootini"


def test_sanitize_fallback():
    assert sanitize_id("!!!") == FALLBACK_ID == "note"
    assert sanitize_id("") == "note"


def test_sanitize_drops_unicode_and_whitespace():
    assert sanitize_id("héllo wörld") == "hllowrld"
    assert sanitize_id("日本語") == "note"
    # Fullwidth digits are not ASCII
    assert sanitize_id("１２３") == "note"


@pytest.mark.parametrize(
    "raw",
    ["", " ", "a", "../x", "a/b\\c", "x.md", "\x00\n\t", "note_1_2", "ß-∂-ƒ", "..", "CON"],
)
def test_sanitize_is_total_and_filename_safe(raw):
    result = sanitize_id(raw)
    assert result
    assert ID_RE.match(result)
    # Idempotent
    assert sanitize_id(result) == result


def test_sanitize_falls_back_only_without_allowed_chars():
    assert sanitize_id("-") == "-"
    assert sanitize_id("_") == "_"
    assert sanitize_id(".") == "note"


def test_generate_id_format(monkeypatch):
    monkeypatch.setattr("jotter.ids.time", SimpleNamespace(time=lambda: 1718000000.5))
    assert generate_id() == "note_1718000000500"


def test_generate_id_is_already_sanitized():
    new_id = generate_id()
    assert new_id.startswith("note_")
    assert sanitize_id(new_id) == new_id


@pytest.mark.parametrize("raw", ["../../etc/passwd", "/abs/path", "a/../../b", "..", ""])
def test_note_path_stays_in_notes_dir(tmp_path, raw):
    path = note_path(tmp_path, sanitize_id(raw))
    assert path.parent == tmp_path
    assert path.suffix == ".md"


def test_is_markdown_file(tmp_path):
    assert is_markdown_file(tmp_path / "a.md")
    assert is_markdown_file(tmp_path / "a.MD")
    assert is_markdown_file(tmp_path / "a.Md")
    assert not is_markdown_file(tmp_path / "a.txt")
    assert not is_markdown_file(tmp_path / "a.md.bak")
    assert not is_markdown_file(tmp_path / ".md")
