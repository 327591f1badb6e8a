"""Test configuration and fixtures for Random Note Viewer."""

import logging
from pathlib import Path

import pytest

# Add project root to path
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from random_note_viewer.config import ConfigManager
from random_note_viewer.core.exceptions import NoteReadError
from tests.fakes import (
    FakeMetadata,
    FakeNavigator,
    FakePanel,
    FakeRenderer,
    FakeStorage,
    make_record,
)

# Configure test logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


# ---------------------------
# Fixtures
# ---------------------------

@pytest.fixture
def panel():
    return FakePanel()


@pytest.fixture
def storage():
    return FakeStorage()


@pytest.fixture
def metadata():
    return FakeMetadata()


@pytest.fixture
def renderer():
    return FakeRenderer()


@pytest.fixture
def navigator():
    return FakeNavigator()


@pytest.fixture
def records():
    return [make_record("Alpha"), make_record("Beta"), make_record("Gamma", "sub")]


@pytest.fixture
def ghost_error():
    return NoteReadError("file is locked", path="Ghost Note.md")


@pytest.fixture(autouse=True)
def reset_config(monkeypatch, tmp_path):
    """Point user config at a temp folder and reset the config singleton."""
    monkeypatch.setenv("RANDOM_NOTE_CONFIG_DIR", str(tmp_path / "user-config"))
    ConfigManager.reset()
    yield
    ConfigManager.reset()
