# src/duke/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import registry as command_registry
from ..core.messages import GREETING_MESSAGE, frame
from ..core.state import AppState

logger = logging.getLogger(__name__)


def _print_framed(text: str) -> None:
    print(frame(text), end="", flush=True)


def run_console_loop(state: AppState) -> None:
    """
    Read one command per line from stdin and print one framed reply each.

    Stops after a reply that does not keep the session running (bye), or on
    EOF / Ctrl+C.
    """
    logger.info("Console connector started (save_file=%s).", state.store.path)

    if state.startup_notice:
        _print_framed(state.startup_notice)
    _print_framed(GREETING_MESSAGE)

    while True:
        try:
            line = input()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        reply = command_registry.handle(state, line)
        _print_framed(reply.text)

        if not reply.keep_running:
            logger.info("Session ended by command.")
            break

    logger.info("Console connector finished.")
