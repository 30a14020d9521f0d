"""Shared fixtures: every test gets its own data and config directories."""

import pytest


@pytest.fixture(autouse=True)
def jotter_env(tmp_path, monkeypatch):
    """Point JOTTER_HOME and XDG_CONFIG_HOME at temporary directories."""
    home = tmp_path / "data"
    config_home = tmp_path / "config"
    monkeypatch.setenv("JOTTER_HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.delenv("JOTTER_LOG_LEVEL", raising=False)
    return home


@pytest.fixture
def notes_dir(jotter_env):
    """The notes directory the store resolves by default."""
    return jotter_env / "notes"


@pytest.fixture
def fixed_id(monkeypatch):
    """Make create_note generate the same id every time."""
    monkeypatch.setattr("jotter.store.generate_id", lambda: "note_1")
    return "note_1"
