"""Logging setup for the actor runtime and the REPL actors.

Status lines go to stderr so that standard output only carries results.
Users can override the level with the ACTOR_REPL_LOG_LEVEL env var and add
a log file with ACTOR_REPL_LOG_DIR.
"""

import logging
import os
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
ROOT_LOGGER = "actor_repl"


def _default_level() -> str:
    return os.getenv("ACTOR_REPL_LOG_LEVEL", "INFO").upper()


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """
    Get a logger inside the actor_repl namespace.

    Handlers are attached once, on the package root logger; child loggers
    propagate to it.

    Args:
        name: Dotted logger name

    Returns:
        Configured logger
    """
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(stream_handler)
        log_dir = os.getenv("ACTOR_REPL_LOG_DIR")
        if log_dir:
            path = Path(log_dir)
            path.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(path / "actor_repl.log", encoding="utf-8")
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            root.addHandler(file_handler)
        root.setLevel(_default_level())
        root.propagate = False

    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def set_level(level: Optional[str]) -> None:
    """Set the level of every actor_repl logger."""
    if level:
        get_logger().setLevel(level.upper())


__all__ = ["get_logger", "set_level", "LOG_FORMAT"]
