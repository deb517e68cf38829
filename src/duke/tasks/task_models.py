# src/duke/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, time
from enum import StrEnum
from typing import ClassVar, Final

from ..errors import InvalidDateTimeError

# Fixed English abbreviations so display does not depend on the process locale.
MONTH_ABBR: Final[tuple[str, ...]] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

WHEN_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})(?: (\d{2})(\d{2}))?", re.ASCII)

INVALID_DATETIME_MESSAGE: Final[str] = (
    "Invalid date/time format! Expected date and/or time in the following formats: \n"
    "yyyy-mm-dd | Example: 2022-06-26\n"
    "yyyy-mm-dd HHmm | Example: 2022-06-26 2359"
)

FIELD_SEPARATOR: Final[str] = " | "


class TaskKind(StrEnum):
    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"

    @property
    def tag(self) -> str:
        return _TAGS[self]


_TAGS: dict[TaskKind, str] = {
    TaskKind.TODO: "T",
    TaskKind.DEADLINE: "D",
    TaskKind.EVENT: "E",
}


def parse_when(text: str) -> tuple[date, time | None]:
    """
    Parse `YYYY-MM-DD` or `YYYY-MM-DD HHMM` into a date and an optional time.

    Raises InvalidDateTimeError for anything else, including well-shaped but
    impossible values such as 2022-02-30 or 2460.
    """
    m = WHEN_RE.fullmatch(text)
    if not m:
        raise InvalidDateTimeError(INVALID_DATETIME_MESSAGE)
    year, month, day, hour, minute = m.groups()
    try:
        on = date(int(year), int(month), int(day))
        at = time(int(hour), int(minute)) if hour is not None else None
    except ValueError:
        raise InvalidDateTimeError(INVALID_DATETIME_MESSAGE) from None
    return on, at


def format_when(on: date, at: time | None) -> str:
    """Storage form: `YYYY-MM-DD` plus ` HHMM` when a time is set."""
    out = f"{on.year:04d}-{on.month:02d}-{on.day:02d}"
    if at is not None:
        out += f" {at.hour:02d}{at.minute:02d}"
    return out


def display_when(on: date, at: time | None) -> str:
    """Display form: `MMM dd yyyy` plus ` HH:mm` when a time is set."""
    out = f"{MONTH_ABBR[on.month - 1]} {on.day:02d} {on.year:04d}"
    if at is not None:
        out += f" {at.hour:02d}:{at.minute:02d}"
    return out


def _status_box(done: bool) -> str:
    return "[X]" if done else "[ ]"


def _storage_fields(kind: TaskKind, done: bool, description: str) -> list[str]:
    return [kind.tag, "1" if done else "0", description]


@dataclass(slots=True)
class ToDo:
    description: str
    done: bool = False

    kind: ClassVar[TaskKind] = TaskKind.TODO

    def render_for_display(self) -> str:
        return f"[{self.kind.tag}]{_status_box(self.done)} {self.description}"

    def render_for_storage(self) -> str:
        return FIELD_SEPARATOR.join(_storage_fields(self.kind, self.done, self.description))

    def matches(self, needle: str) -> bool:
        return needle in self.description


@dataclass(slots=True)
class Deadline:
    description: str
    by_date: date
    by_time: time | None = None
    done: bool = False

    kind: ClassVar[TaskKind] = TaskKind.DEADLINE

    @classmethod
    def from_input(cls, description: str, when: str) -> Deadline:
        by_date, by_time = parse_when(when)
        return cls(description=description, by_date=by_date, by_time=by_time)

    def render_for_display(self) -> str:
        return (
            f"[{self.kind.tag}]{_status_box(self.done)} {self.description} "
            f"(by: {display_when(self.by_date, self.by_time)})"
        )

    def render_for_storage(self) -> str:
        fields = _storage_fields(self.kind, self.done, self.description)
        fields.append(format_when(self.by_date, self.by_time))
        return FIELD_SEPARATOR.join(fields)

    def matches(self, needle: str) -> bool:
        return needle in self.description


@dataclass(slots=True)
class Event:
    description: str
    on_date: date
    on_time: time | None = None
    done: bool = False

    kind: ClassVar[TaskKind] = TaskKind.EVENT

    @classmethod
    def from_input(cls, description: str, when: str) -> Event:
        on_date, on_time = parse_when(when)
        return cls(description=description, on_date=on_date, on_time=on_time)

    def render_for_display(self) -> str:
        return (
            f"[{self.kind.tag}]{_status_box(self.done)} {self.description} "
            f"(at: {display_when(self.on_date, self.on_time)})"
        )

    def render_for_storage(self) -> str:
        fields = _storage_fields(self.kind, self.done, self.description)
        fields.append(format_when(self.on_date, self.on_time))
        return FIELD_SEPARATOR.join(fields)

    def matches(self, needle: str) -> bool:
        return needle in self.description


Task = ToDo | Deadline | Event
