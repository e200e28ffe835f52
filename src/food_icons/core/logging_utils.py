"""Logging setup for applications embedding the engine."""

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s:%(lineno)d | %(message)s"


def configure_logging(level: str | int = logging.INFO) -> None:
    """
    Install a single stream handler on the root logger.

    Safe to call repeatedly: if the root logger already has handlers
    (REPL, test runner, host application) only the level is updated.

    Args:
        level: Logging level name ("INFO", "DEBUG", ...) or number
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    logging.getLogger("food_icons").setLevel(level)
