# src/duke/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

from ..core.messages import (
    BYE_MESSAGE,
    INTERNAL_ERROR_MESSAGE,
    READ_WRITE_ERROR_MESSAGE,
    UNKNOWN_COMMAND_MESSAGE,
    merge_messages,
)
from ..core.reply import Reply
from ..core.state import AppState
from ..errors import BadIndexFormatError, BadIndexRangeError, DukeError, MissingDetailsError
from ..tasks.task_models import Deadline, Event, ToDo

# (state, details) -> reply text or a full Reply. details is None when the
# line had nothing after the verb.
CommandHandler = Callable[[AppState, str | None], "str | Reply"]

logger = logging.getLogger(__name__)

_ITEM_NUMBER_RE = re.compile(r"[+-]?(\d+)", re.ASCII)
# Item numbers are 32-bit signed integers; anything wider is not a number.
_ITEM_NUMBER_MIN, _ITEM_NUMBER_MAX = -(2**31), 2**31 - 1


@dataclass(frozen=True, slots=True)
class _Command:
    handler: CommandHandler
    mutates: bool


class CommandRegistry:
    """
    Maps the first word of an input line to a handler.

    Handlers registered with mutates=True have the whole task list written
    back through state.store after they succeed.
    """

    def __init__(self) -> None:
        self._commands: dict[str, _Command] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        *,
        mutates: bool = False,
    ) -> None:
        self._commands[name] = _Command(handler=handler, mutates=mutates)

    def handle(self, state: AppState, line: str) -> Reply:
        """
        Handle one input line like "deadline return book /by 2022-06-26".

        Verbs are case-sensitive. Domain errors and write failures become
        the reply text; the session always continues unless the handler says
        otherwise.
        """
        verb, _, rest = line.partition(" ")
        details = rest or None

        command = self._commands.get(verb)
        if command is None:
            logger.debug("Unknown command verb=%r", verb)
            return Reply(UNKNOWN_COMMAND_MESSAGE)

        logger.debug("Dispatching verb=%s", verb)
        try:
            result = command.handler(state, details)
            if command.mutates:
                state.store.save(state.tasks.tasks)
        except DukeError as e:
            logger.debug("Command %s rejected (%s): %s", verb, e.kind, e.message)
            return Reply(e.message)
        except OSError as e:
            logger.error("Failed to write save-file %s: %s", state.store.path, e)
            return Reply(merge_messages(f"{type(e).__name__}: {e}", READ_WRITE_ERROR_MESSAGE))
        except Exception:
            logger.exception("Command handler crashed (verb=%s).", verb)
            return Reply(INTERNAL_ERROR_MESSAGE)

        if isinstance(result, Reply):
            return result
        return Reply(result)


registry = CommandRegistry()


def _require_details(details: str | None) -> str:
    if details is None:
        raise MissingDetailsError("Missing details!")
    return details


def _item_number(state: AppState, details: str | None) -> int:
    """Validate an item number against the current list (1-based)."""
    if details is None:
        raise MissingDetailsError("Missing item number!")
    m = _ITEM_NUMBER_RE.fullmatch(details)
    digits = m.group(1).lstrip("0") if m else ""
    n = None
    if m and len(digits) <= 10:
        n = int(digits or "0")
        if details.startswith("-"):
            n = -n
    if n is None or not _ITEM_NUMBER_MIN <= n <= _ITEM_NUMBER_MAX:
        raise BadIndexFormatError(
            f'Please specify a numerical value for the item number instead of "{details}"!'
        )
    if not state.tasks.valid_index(n):
        raise BadIndexRangeError("Please specify a valid item number")
    return n


def _split_timed(verb: str, details: str, separator: str) -> tuple[str, str]:
    description, sep, when = details.partition(separator)
    if not sep or not description or not when:
        raise MissingDetailsError(f"Missing details for {verb}!")
    return description, when


def cmd_bye(state: AppState, details: str | None) -> Reply:
    return Reply(BYE_MESSAGE, keep_running=False)


def cmd_list(state: AppState, details: str | None) -> str:
    return state.tasks.list()


def cmd_mark(state: AppState, details: str | None) -> str:
    return state.tasks.mark(_item_number(state, details))


def cmd_unmark(state: AppState, details: str | None) -> str:
    return state.tasks.unmark(_item_number(state, details))


def cmd_delete(state: AppState, details: str | None) -> str:
    return state.tasks.delete(_item_number(state, details))


def cmd_todo(state: AppState, details: str | None) -> str:
    return state.tasks.add(ToDo(_require_details(details)))


def cmd_deadline(state: AppState, details: str | None) -> str:
    description, when = _split_timed("deadline", _require_details(details), " /by ")
    return state.tasks.add(Deadline.from_input(description, when))


def cmd_event(state: AppState, details: str | None) -> str:
    description, when = _split_timed("event", _require_details(details), " /at ")
    return state.tasks.add(Event.from_input(description, when))


def cmd_find(state: AppState, details: str | None) -> str:
    return state.tasks.find(_require_details(details))


registry.register("bye", cmd_bye)
registry.register("list", cmd_list)
registry.register("mark", cmd_mark, mutates=True)
registry.register("unmark", cmd_unmark, mutates=True)
registry.register("delete", cmd_delete, mutates=True)
registry.register("todo", cmd_todo, mutates=True)
registry.register("deadline", cmd_deadline, mutates=True)
registry.register("event", cmd_event, mutates=True)
registry.register("find", cmd_find)
