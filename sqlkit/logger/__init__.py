from sqlkit.logger.logger import (
    LOG_LEVEL,
    get_logger,
    log_debug,
    log_error,
    log_info,
    log_warn,
    log_warning,
    set_log_level,
)

__all__ = [
    "LOG_LEVEL",
    "get_logger",
    "log_debug",
    "log_error",
    "log_info",
    "log_warn",
    "log_warning",
    "set_log_level",
]
