"""Logger module for hello-web

Usage:
    from hello_web.logger import session_logger

    session_logger.info("app listening on port 3000", port=3000)

Custom implementations subclass ``Logger`` and can be passed anywhere a
logger is accepted.
"""

from hello_web.config import get_settings
from hello_web.logger.base import Logger
from hello_web.logger.structured_logger import StructuredLogger

_log_settings = get_settings().log

# Shared logger instance
session_logger: Logger = StructuredLogger(
    level=_log_settings.level,
    log_file=_log_settings.log_file,
    json_format=_log_settings.json_format,
)

__all__ = [
    "Logger",
    "StructuredLogger",
    "session_logger",
]
