"""
sqlkit.logger.logger

Small logging facade used by the DuckDB boundary and the CLI. Writes to
stderr and prefixes every message with the calling module and function, so
statement traces can be traced back to the code that issued them.

The level comes from the LOG_LEVEL environment variable unless set
explicitly with ``set_log_level``.
"""

import inspect
import logging
import os
from enum import IntEnum
from pathlib import Path

LOGGER_NAME = "sqlkit"


class LOG_LEVEL(IntEnum):
    NOTSET = 0
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40
    CRITICAL = 50


def get_log_level_from_env(default: LOG_LEVEL = LOG_LEVEL.INFO) -> LOG_LEVEL:
    """
    Read log level from environment variable LOG_LEVEL.
    Supports names (DEBUG, INFO, etc.) or integers.
    Prints a warning if an invalid value is provided.
    """
    raw = os.getenv("LOG_LEVEL")
    if raw is None:
        return default

    raw = raw.strip()

    # Try integer.
    if raw.isdigit():
        try:
            return LOG_LEVEL(int(raw))
        except ValueError:
            print(f"[WARN] Unknown numeric log level: {raw}. Falling back to default: {default.name}")
            return default

    # Try named log level.
    try:
        return LOG_LEVEL[raw.upper()]
    except KeyError:
        print(f"[WARN] Unknown log level: {raw}. Falling back to default: {default.name}")
        return default


def _get_caller_path(levels: int = 2) -> str:
    # stack: _get_caller_path <- _log <- log_* <- caller
    frame = inspect.stack()[3]
    short_path = "/".join(Path(frame.filename).parts[-levels:])
    return f"{short_path}:{frame.function}"


def get_logger() -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.hasHandlers():
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
        logger.setLevel(get_log_level_from_env())
    return logger


def set_log_level(level: LOG_LEVEL | int) -> None:
    get_logger().setLevel(level)


def _log(level: LOG_LEVEL, message: str | None = None):
    logger = get_logger()
    if not logger.isEnabledFor(level):
        return
    msg = f" - {message}" if message else ""
    logger.log(level, f"{_get_caller_path()}{msg}")


# Public logging API.
def log_debug(msg: str | None = None):
    _log(LOG_LEVEL.DEBUG, msg)


def log_info(msg: str | None = None):
    _log(LOG_LEVEL.INFO, msg)


def log_warn(msg: str | None = None):
    _log(LOG_LEVEL.WARN, msg)


def log_warning(msg: str | None = None):
    _log(LOG_LEVEL.WARN, msg)


def log_error(msg: str | None = None):
    _log(LOG_LEVEL.ERROR, msg)
