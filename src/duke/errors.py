# src/duke/errors.py

"""
Domain errors.

Every error carries the exact text shown to the user. The dispatcher turns
them into replies; nothing here is allowed to end the session.
"""

from __future__ import annotations


class DukeError(Exception):
    kind: str = "duke_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingDetailsError(DukeError):
    kind = "missing_details"


class BadIndexFormatError(DukeError):
    kind = "bad_index_format"


class BadIndexRangeError(DukeError):
    kind = "bad_index_range"


class InvalidDateTimeError(DukeError):
    kind = "invalid_datetime"


class CorruptSaveError(DukeError):
    kind = "corrupt_save"
