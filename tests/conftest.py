"""
Shared fixtures: isolated data and config directories for every test that
touches the application paths.
"""

from pathlib import Path

import pytest
from loguru import logger

from noteease import configuration
from noteease.initialize import initialize
from noteease.repository.configuration import CONFIGURATION_REPO
from noteease.repository.id_map import ID_MAP_REPO
from noteease.repository.note import NoteRepository
from noteease.state import set_clear_ids
from noteease.view.state import set_show_header


@pytest.fixture
def notes_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "notes.yaml"


@pytest.fixture
def repository(notes_path: Path) -> NoteRepository:
    return NoteRepository(notes_path)


@pytest.fixture
def app_paths(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Point the application at temporary directories and initialize it."""
    config_dir = tmp_path / "config"
    data_dir = tmp_path / "data"

    monkeypatch.setattr(configuration, "CONFIG_PATH", config_dir)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_dir / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", data_dir)
    monkeypatch.setattr(configuration, "DATA_NOTES_PATH", data_dir / "notes.yaml")
    monkeypatch.setattr(configuration, "DATA_ID_MAP_PATH", data_dir / "id_map.yaml")
    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "is_dirty", False)
    monkeypatch.setattr(ID_MAP_REPO, "_id_map", None)
    monkeypatch.setattr(ID_MAP_REPO, "is_dirty", False)

    initialize()
    yield data_dir

    logger.remove()
    set_show_header(True)
    set_clear_ids(True)
