# tests/test_task_models.py

from __future__ import annotations

from datetime import date, time

import pytest

from duke.errors import InvalidDateTimeError
from duke.tasks.task_models import (
    INVALID_DATETIME_MESSAGE,
    Deadline,
    Event,
    TaskKind,
    ToDo,
    format_when,
    parse_when,
)


def test_display_forms() -> None:
    assert ToDo("read book").render_for_display() == "[T][ ] read book"
    assert ToDo("read book", done=True).render_for_display() == "[T][X] read book"

    d = Deadline("return book", date(2022, 6, 26), time(18, 0))
    assert d.render_for_display() == "[D][ ] return book (by: Jun 26 2022 18:00)"

    e = Event("party", date(2022, 12, 3), done=True)
    assert e.render_for_display() == "[E][X] party (at: Dec 03 2022)"

    early = Event("breakfast", date(2023, 1, 9), time(7, 5))
    assert early.render_for_display() == "[E][ ] breakfast (at: Jan 09 2023 07:05)"


def test_storage_forms() -> None:
    assert ToDo("read book", done=True).render_for_storage() == "T | 1 | read book"
    assert (
        Deadline("return book", date(2022, 6, 26), time(18, 0)).render_for_storage()
        == "D | 0 | return book | 2022-06-26 1800"
    )
    assert Event("party", date(2022, 12, 3)).render_for_storage() == "E | 0 | party | 2022-12-03"


def test_kinds_and_tags() -> None:
    assert ToDo("x").kind is TaskKind.TODO
    assert Deadline("x", date(2022, 1, 1)).kind is TaskKind.DEADLINE
    assert Event("x", date(2022, 1, 1)).kind is TaskKind.EVENT
    assert [k.tag for k in TaskKind] == ["T", "D", "E"]


def test_new_tasks_are_not_done() -> None:
    assert ToDo("x").done is False
    assert Deadline.from_input("x", "2022-06-26").done is False
    assert Event.from_input("x", "2022-06-26 0000").done is False


def test_matches_is_case_sensitive_substring() -> None:
    t = ToDo("Read the Book")
    assert t.matches("the B")
    assert t.matches("")
    assert not t.matches("book")


def test_description_is_kept_verbatim() -> None:
    assert ToDo("  spaced  ").render_for_display() == "[T][ ]   spaced  "


def test_parse_when_accepts_date_and_optional_time() -> None:
    assert parse_when("2022-06-26") == (date(2022, 6, 26), None)
    assert parse_when("2022-06-26 2359") == (date(2022, 6, 26), time(23, 59))
    assert parse_when("2024-02-29 0000") == (date(2024, 2, 29), time(0, 0))


@pytest.mark.parametrize(
    "text",
    [
        "",
        "26/06/2022",
        "2022-6-26",
        "2022-06-26 1800 extra",
        "2022-06-26  1800",
        "2022-06-26 18:00",
        "2022-13-01",
        "2023-02-29",
        "2022-06-26 2400",
        "2022-06-26 1260",
        "２０２２-06-26",
    ],
)
def test_parse_when_rejects(text: str) -> None:
    with pytest.raises(InvalidDateTimeError) as exc:
        parse_when(text)
    assert exc.value.message == INVALID_DATETIME_MESSAGE
    assert exc.value.kind == "invalid_datetime"


def test_format_when_pads_fields() -> None:
    assert format_when(date(999, 1, 2), time(3, 4)) == "0999-01-02 0304"
    assert format_when(date(2022, 6, 26), None) == "2022-06-26"
