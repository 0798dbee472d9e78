"""
Shared logging utilities.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

# Configure logging format
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Extra attributes copied into JSON records when a log call supplies them.
EXTRA_FIELDS = ("error_code", "storage_key", "month", "transaction_id", "changed")

_HANDLER_MARKER = "_budget_tracker_handler"


class JSONLogFormatter(logging.Formatter):
    """Format log records as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": self.formatTime(record, DATE_FORMAT),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for name in EXTRA_FIELDS:
            if hasattr(record, name):
                log_data[name] = getattr(record, name)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


def _make_formatter(json_format: bool) -> logging.Formatter:
    if json_format:
        return JSONLogFormatter()
    return logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)


def setup_logging(
    level: str = "INFO", log_file: Optional[str] = None, json_format: bool = False
) -> None:
    """
    Configure root logger.

    Calling this again replaces the handlers installed by the previous call.

    Args:
        level: Log level ('DEBUG', 'INFO', 'WARNING', 'ERROR')
        log_file: Optional log file path
        json_format: Emit one JSON object per line instead of plain text
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    root_logger = logging.getLogger()

    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            root_logger.removeHandler(handler)
            handler.close()

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(_make_formatter(json_format))
    setattr(console_handler, _HANDLER_MARKER, True)

    root_logger.setLevel(log_level)
    root_logger.addHandler(console_handler)

    # File handler if specified
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(_make_formatter(json_format))
        setattr(file_handler, _HANDLER_MARKER, True)
        root_logger.addHandler(file_handler)
