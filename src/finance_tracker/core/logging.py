"""Root logger configuration."""

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Handler installed by the last setup_logging() call
_handler: logging.Handler | None = None


def setup_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """
    Configure root logger.

    Calling it again replaces the handler installed by the previous call.

    Args:
        level: Log level ('DEBUG', 'INFO', 'WARNING', 'ERROR')
        json_logs: Emit one JSON object per record instead of plain text
    """
    from finance_tracker.api.middleware.logging import JSONLogFormatter

    global _handler

    log_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    if json_logs:
        handler.setFormatter(JSONLogFormatter())
    else:
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    if _handler is not None:
        root_logger.removeHandler(_handler)
    root_logger.addHandler(handler)
    _handler = handler
