"""
Logging setup for the server process.
"""

import logging
from typing import Union

from rich.logging import RichHandler


class _QuietHealthFilter(logging.Filter):
    """Drop uvicorn access-log records for the liveness probe."""

    def filter(self, record: logging.LogRecord) -> bool:
        return "GET /health" not in record.getMessage()


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    """
    Configure the root logger with a Rich console handler.

    Args:
        level: Logging level, as a number or a name such as ``"DEBUG"``
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = RichHandler(
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
    )
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    logging.getLogger("uvicorn.access").addFilter(_QuietHealthFilter())
    logging.getLogger("httpx").setLevel(logging.WARNING)
