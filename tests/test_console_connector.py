# tests/test_console_connector.py

from __future__ import annotations

import builtins
from collections.abc import Iterator

import pytest

from duke.connectors.console_connector import run_console_loop
from duke.core.messages import CORRUPTED_SAVE_MESSAGE, LINE, frame

GREETING_BOX = frame("Wow! Hello! I'm Duke.\nWhat can I do for you?")


def _feed(monkeypatch: pytest.MonkeyPatch, lines: list[str]) -> list[str]:
    """Replace input() with a scripted sequence; EOF once it runs out."""
    consumed: list[str] = []
    it: Iterator[str] = iter(lines)

    def fake_input(prompt: str = "") -> str:
        try:
            line = next(it)
        except StopIteration:
            raise EOFError from None
        consumed.append(line)
        return line

    monkeypatch.setattr(builtins, "input", fake_input)
    return consumed


def test_frame_wraps_body_in_forty_hyphens() -> None:
    assert LINE == "-" * 40
    assert frame("hi") == f"{LINE}\nhi\n{LINE}\n"
    assert frame("hi\n") == f"{LINE}\nhi\n{LINE}\n"


def test_bye_ends_the_loop_without_reading_further(state, monkeypatch, capsys) -> None:
    consumed = _feed(monkeypatch, ["todo read book", "bye", "todo never"])

    run_console_loop(state)

    assert consumed == ["todo read book", "bye"]
    out = capsys.readouterr().out
    assert out == (
        GREETING_BOX
        + frame("Got it. I've added this task:\n  [T][ ] read book\nNow you have 1 tasks in the list.")
        + frame("Bye. Hope to see you again soon!")
    )
    assert [t.description for t in state.tasks] == ["read book"]


def test_eof_ends_the_loop(state, monkeypatch, capsys) -> None:
    _feed(monkeypatch, ["list"])

    run_console_loop(state)

    assert capsys.readouterr().out == GREETING_BOX + frame("You have no tasks in your list.")


def test_startup_notice_is_shown_once(state, monkeypatch, capsys) -> None:
    state.startup_notice = CORRUPTED_SAVE_MESSAGE
    _feed(monkeypatch, ["bye"])

    run_console_loop(state)

    out = capsys.readouterr().out
    assert out.startswith(frame(CORRUPTED_SAVE_MESSAGE) + GREETING_BOX)
    assert out.count("File is corrupted") == 1
