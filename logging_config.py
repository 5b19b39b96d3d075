#!/usr/bin/python3
"""
Logging setup for the server and command-line tools.

Library modules only create module-level loggers; entry points call
setup_logging() once to attach a console handler to the root logger.
"""

from __future__ import annotations

import logging


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger with a single stderr handler.

    Existing root handlers are removed so repeated calls do not duplicate
    output.

    Args:
        level: Logging level name (e.g. "DEBUG", "INFO").
    """
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(console_handler)
