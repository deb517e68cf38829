# src/duke/cli/main.py

"""
CLI entrypoint.

Initializes logging, restores AppState from the save-file, then runs the
console REPL in the main thread. Returns the process exit code.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    # choose console log level from settings.log_level
    console_level = getattr(logging, settings.log_level, logging.WARNING)

    try:
        setup_logging(log_dir=settings.log_dir, console_level=console_level)
    except OSError as e:
        print(f"Unable to open log directory {settings.log_dir}: {e}", file=sys.stderr)
        return 1

    logger.info("Starting %s (save_file=%s)...", settings.app_name, settings.save_file_path)

    try:
        state = create_initial_state(settings=settings)
    except OSError:
        logger.exception("Unable to restore tasks from %s.", settings.save_file_path)
        return 1

    run_console_loop(state)
    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
