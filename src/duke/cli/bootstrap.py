# src/duke/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- restores the task list from the save-file and wires it into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.messages import CORRUPTED_SAVE_MESSAGE
from ..core.ports import TaskRepo
from ..core.state import AppState
from ..errors import CorruptSaveError
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.save_file_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, store: TaskRepo | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    A corrupt save-file is truncated right away and reported once through
    state.startup_notice; the list then starts empty. Any other OSError
    (unreadable file, failed truncation) propagates to the caller.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    if store is None:
        store = TaskStore(settings.save_file_path)

    notice: str | None = None
    try:
        tasks = store.load()
    except CorruptSaveError as e:
        logger.warning("Save-file %s is corrupt, resetting it: %s", store.path, e.message)
        store.reset()
        tasks = []
        notice = CORRUPTED_SAVE_MESSAGE

    return AppState(
        settings=settings,
        tasks=TaskList(tasks),
        store=store,
        startup_notice=notice,
    )
