"""Logging configuration for the wifirtt-live server."""

import logging
import os
import sys

LOG_LEVEL_ENV = "WIFIRTT_LOG_LEVEL"


def configure_logging() -> None:
    """Configure application-wide logging.

    Respects the WIFIRTT_LOG_LEVEL environment variable (default: INFO).
    Logs to stderr with timestamp, logger name, level and message.

    Examples:
        # Debug level, shows every dropped probe attempt and skipped tick
        $ WIFIRTT_LOG_LEVEL=DEBUG wifirtt-live
    """
    log_level_str = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
    log_level = logging.getLevelName(log_level_str)
    if not isinstance(log_level, int):
        log_level = logging.INFO

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )

    # engineio/socketio are chatty at INFO
    for name in ("engineio.server", "socketio.server", "werkzeug"):
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))

    logging.getLogger(__name__).info(
        "Logging configured: level=%s", logging.getLevelName(log_level)
    )
