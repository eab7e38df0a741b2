# src/tasklist/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console REPL.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging
from ..tasks.errors import MalformedRecordError

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    console_level = getattr(logging, settings.log_level, logging.INFO)
    log_file = settings.log_file_path if settings.log_to_file else None
    setup_logging(log_file=log_file, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    try:
        state = create_initial_state(settings=settings)
    except MalformedRecordError as e:
        logger.error("Refusing to start: %s", e)
        return 1

    if settings.console_enabled:
        run_console_loop(state)
    else:
        logger.info("Console disabled; nothing to do.")

    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
