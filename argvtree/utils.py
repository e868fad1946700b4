# Argvtree CLI Grammar — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Logging setup for programs built on argvtree.

`setup_logging` attaches handlers to the `argvtree` logger only. Handlers on
the root logger and on the application's own loggers are left alone, so it
can be called from a program that already configures logging.
"""
from __future__ import annotations

import logging
import os

from pythonjsonlogger.json import JsonFormatter
from rich.logging import RichHandler

from argvtree.logger import logger

LOG_MODE_ENV = "ARGVTREE_LOG_MODE"
CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")
JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
TEXT_FORMAT = "%(asctime)s [%(name)s] [%(levelname)s] %(message)s"


def running_in_container(cgroup_path: str = "/proc/1/cgroup") -> bool:
    try:
        with open(cgroup_path, "r", encoding="UTF-8") as f:
            content = f.read()
    except OSError:
        return False
    return any(marker in content for marker in CONTAINER_MARKERS)


def default_log_mode() -> str:
    """`ARGVTREE_LOG_MODE` if set, else "json" inside a container and "cli" outside."""
    return os.getenv(LOG_MODE_ENV) or ("json" if running_in_container() else "cli")


def _console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(rich_tracebacks=True, show_path=False, markup=False)
    if mode == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(JsonFormatter(JSON_FORMAT))
        return handler
    raise ValueError(f"Invalid log mode: {mode}")


def setup_logging(
    mode: str | None = None,
    level: int = logging.WARNING,
    log_file: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
) -> logging.Logger:
    """
    Route the `argvtree` logger to the console, and optionally to a file.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        mode (str | None): "cli" for Rich console output or "json" for one JSON
            object per record. Defaults to `default_log_mode()`.
        level (int): Console level. Parse traces are logged at DEBUG.
        log_file (str | None): Optional path; nothing is written when None.
        json_log_to_file (bool): Format file records as JSON instead of text.
        file_log_level (int): File level.

    Returns:
        logging.Logger: The configured `argvtree` logger.

    Raises:
        ValueError: If `mode` is not "cli" or "json".
    """
    mode = mode or default_log_mode()
    handlers = [_console_handler(mode)]
    handlers[0].setLevel(level)

    if log_file:
        file_handler = logging.FileHandler(log_file, "a", "UTF-8")
        file_handler.setLevel(file_log_level)
        file_handler.setFormatter(
            JsonFormatter(JSON_FORMAT)
            if json_log_to_file
            else logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        )
        handlers.append(file_handler)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)

    logger.setLevel(min(handler.level for handler in handlers))
    logger.propagate = False
    logger.debug("Logging initialized in '%s' mode.", mode)
    return logger
