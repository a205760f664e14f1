"""Pytest configuration and shared fixtures."""

import sys
from datetime import datetime
from pathlib import Path

import pytest

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from task_tracker.config import Config, ConfigModel  # noqa: E402
from task_tracker.task import Deadline, Event, ToDo  # noqa: E402


@pytest.fixture(autouse=True)
def reset_config():
    """Keep the cached configuration from leaking between tests."""
    Config._instance = None
    yield
    Config._instance = None


@pytest.fixture
def config(tmp_path):
    """Configuration that keeps all files inside the test's tmp_path."""
    return ConfigModel(data_dir=str(tmp_path))


@pytest.fixture
def sample_tasks():
    """One task of each kind."""
    return [
        ToDo(name="read book"),
        Deadline(name="return book", by=datetime(2019, 10, 15, 18, 0)),
        Event(name="project meeting", done=True,
              start=datetime(2019, 10, 15, 14, 0), end=datetime(2019, 10, 15, 16, 0)),
    ]
