# src/duke/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from ..errors import CorruptSaveError, InvalidDateTimeError
from .task_models import FIELD_SEPARATOR, Deadline, Event, Task, TaskKind, ToDo, parse_when

logger = logging.getLogger(__name__)

_DONE_FLAGS = {"1": True, "0": False}


def _corrupt(line: str, reason: str) -> CorruptSaveError:
    return CorruptSaveError(f"Unreadable save-file line ({reason}): {line!r}")


def parse_line(line: str) -> Task:
    """
    Parse one save-file line (without its newline) into a task.

    Layout: `<tag> | <done> | <description>[ | <when>]`. For deadlines and
    events the date is always the last field, so a description may itself
    contain the separator.
    """
    parts = line.split(FIELD_SEPARATOR, 2)
    if len(parts) < 3:
        raise _corrupt(line, "too few fields")

    tag, done_raw, rest = parts
    done = _DONE_FLAGS.get(done_raw)
    if done is None:
        raise _corrupt(line, "bad done flag")

    if tag == TaskKind.TODO.tag:
        if not rest:
            raise _corrupt(line, "empty description")
        return ToDo(description=rest, done=done)

    if tag not in (TaskKind.DEADLINE.tag, TaskKind.EVENT.tag):
        raise _corrupt(line, "unknown task type")

    description, sep, when = rest.rpartition(FIELD_SEPARATOR)
    if not sep:
        raise _corrupt(line, "missing date")
    if not description:
        raise _corrupt(line, "empty description")
    try:
        on, at = parse_when(when)
    except InvalidDateTimeError:
        raise _corrupt(line, "bad date/time") from None

    if tag == TaskKind.DEADLINE.tag:
        return Deadline(description=description, by_date=on, by_time=at, done=done)
    return Event(description=description, on_date=on, on_time=at, done=done)


def format_line(task: Task) -> str:
    return task.render_for_storage()


class TaskStore:
    """
    Plain-text save-file.

    Every save() rewrites the whole file: it is written to a temporary
    sibling and moved into place, so the file on disk always holds a
    complete list. Each call opens and closes its own handle.
    """

    def __init__(self, path: str | Path = "data/duke.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Task]:
        """
        Read every task from the save-file.

        A missing file is an empty list. Bytes that are not UTF-8, or any
        unreadable line, make the whole file corrupt (CorruptSaveError).
        Other OSErrors propagate.
        """
        if not self._path.exists():
            logger.info("No save-file at %s, starting empty.", self._path)
            return []

        try:
            with open(self._path, "r", encoding="utf-8", newline="") as f:
                content = f.read()
        except UnicodeDecodeError as e:
            raise CorruptSaveError(
                f"Save-file is not valid UTF-8 (byte {e.start}): {self._path}"
            ) from None

        lines = content.split("\n")
        if lines and lines[-1] == "":
            lines.pop()

        tasks = [parse_line(line) for line in lines]
        logger.info("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        body = "".join(format_line(t) + "\n" for t in tasks)

        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            with open(tmp, "w", encoding="utf-8", newline="") as f:
                f.write(body)
            os.replace(tmp, self._path)
        except OSError:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise
        logger.debug("Saved %d bytes to %s", len(body), self._path)

    def reset(self) -> None:
        """Truncate the save-file to an empty list."""
        self.save([])
        logger.info("Save-file reset: %s", self._path)
