# src/duke/tasks/task_list.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from .task_models import Task

logger = logging.getLogger(__name__)


class TaskList:
    """
    Ordered, in-memory task list.

    Item numbers are 1-based everywhere outside this class. Index-taking
    methods expect the caller to have checked valid_index() first.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    @property
    def tasks(self) -> list[Task]:
        """Snapshot copy, safe to hand to the store."""
        return list(self._tasks)

    def get(self, n: int) -> Task:
        return self._tasks[n - 1]

    def valid_index(self, n: int) -> bool:
        return 1 <= n <= len(self._tasks)

    def _count_line(self) -> str:
        return f"Now you have {len(self._tasks)} tasks in the list."

    def add(self, task: Task) -> str:
        self._tasks.append(task)
        logger.debug("Task added kind=%s total=%d", task.kind, len(self._tasks))
        return f"Got it. I've added this task:\n  {task.render_for_display()}\n{self._count_line()}"

    def delete(self, n: int) -> str:
        task = self._tasks.pop(n - 1)
        logger.debug("Task deleted n=%d total=%d", n, len(self._tasks))
        return f"Noted. I've removed this task:\n  {task.render_for_display()}\n{self._count_line()}"

    def mark(self, n: int) -> str:
        task = self.get(n)
        task.done = True
        return f"Nice! I've marked this task as done:\n  {task.render_for_display()}"

    def unmark(self, n: int) -> str:
        task = self.get(n)
        task.done = False
        return f"OK, I've marked this task as not done yet:\n  {task.render_for_display()}"

    def list(self) -> str:
        if not self._tasks:
            return "You have no tasks in your list."
        lines = ["Here are the tasks in your list:"]
        for i, task in enumerate(self._tasks, start=1):
            lines.append(f"{i}. {task.render_for_display()}")
        return "\n".join(lines)

    def matching(self, needle: str) -> list[Task]:
        return [t for t in self._tasks if t.matches(needle)]

    def find(self, needle: str) -> str:
        found = self.matching(needle)
        if not found:
            return "No matching tasks found."
        lines = ["Here are the matching tasks in your list:"]
        for i, task in enumerate(found, start=1):
            lines.append(f"{i}. {task.render_for_display()}")
        return "\n".join(lines)
