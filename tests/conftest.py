# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from duke.core.state import AppState
from duke.tasks.task_list import TaskList
from duke.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="duke",
        log_level="WARNING",
        data_dir=data_dir,
        save_file_path=data_dir / "duke.txt",
        log_dir=data_dir,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState with an empty list and a real save-file under tmp_path."""
    return AppState(
        settings=settings,
        tasks=TaskList(),
        store=TaskStore(settings.save_file_path),
    )
