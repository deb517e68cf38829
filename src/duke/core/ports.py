# src/duke/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The dispatcher depends on this Protocol instead of the concrete save-file
store, which keeps storage swappable and makes failure paths easy to test.
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """Whole-list persistence: load everything, save everything."""

    @property
    def path(self) -> Path: ...

    def load(self) -> list[Task]: ...
    def save(self, tasks: Iterable[Task]) -> None: ...
    def reset(self) -> None: ...
