# src/duke/core/messages.py

from __future__ import annotations

from typing import Final

LINE: Final[str] = "-" * 40

GREETING_MESSAGE: Final[str] = "Wow! Hello! I'm Duke.\nWhat can I do for you?"
BYE_MESSAGE: Final[str] = "Bye. Hope to see you again soon!"
UNKNOWN_COMMAND_MESSAGE: Final[str] = "OoPs! I don't know what that means :P"
READ_WRITE_ERROR_MESSAGE: Final[str] = "Something went wrong with the hard disk!"
CORRUPTED_SAVE_MESSAGE: Final[str] = (
    "File is corrupted and Duke is unable to restore data from previous sessions.\n"
    "Resetting contents of save-file."
)
INTERNAL_ERROR_MESSAGE: Final[str] = "Internal error while handling a command."


def newline_after(text: str) -> str:
    """Return `text` ending with exactly the newline it already had, or one added."""
    return text if text.endswith("\n") else text + "\n"


def frame(text: str) -> str:
    """Wrap a reply between two lines of forty hyphens."""
    return f"{LINE}\n{newline_after(text)}{LINE}\n"


def merge_messages(first: str, second: str) -> str:
    """Join two messages with a blank line between them."""
    return newline_after(first) + "\n" + second
