# src/duke/core/reply.py

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Reply:
    """
    What the dispatcher hands back to a connector.

    keep_running is False only for `bye`; the connector stops reading input then.
    """

    text: str
    keep_running: bool = True
