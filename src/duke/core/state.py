# src/duke/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_list import TaskList
from .ports import TaskRepo


@dataclass
class AppState:
    # Settings live on the state so connectors and commands can reach them.
    settings: object

    tasks: TaskList
    store: TaskRepo

    # Shown once by the connector before the first prompt (e.g. corrupt save-file).
    startup_notice: str | None = None
