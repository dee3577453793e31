"""
LabInsight Logging

One line per record: UTC timestamp, level, logger name, message.  The API
entry point calls setup_logging() once from settings; importing the engine
as a library never touches the host application's handlers.
"""
import logging
import sys
from typing import Optional
from datetime import datetime, timezone


class StructuredFormatter(logging.Formatter):
    """Renders `[timestamp] LEVEL    [logger] message`, optionally ANSI-coloured."""

    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
        'RESET': '\033[0m'
    }

    def __init__(self, use_color: bool = True):
        super().__init__()
        self.use_color = use_color

    def _wrap(self, levelname: str, text: str) -> str:
        if not self.use_color:
            return text
        return f"{self.COLORS.get(levelname, self.COLORS['RESET'])}{text}{self.COLORS['RESET']}"

    def format(self, record: logging.LogRecord) -> str:
        record.timestamp = datetime.now(timezone.utc).isoformat()
        line = self._wrap(
            record.levelname,
            f"[{record.timestamp}] {record.levelname:8} [{record.name}] {record.getMessage()}",
        )
        if record.exc_info:
            # Detector failures are logged with their traceback.
            line += f"\n{self.formatException(record.exc_info)}"
        return line


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    use_color: Optional[bool] = None,
) -> None:
    """
    Install LabInsight's handlers on the root logger.

    Args:
        level: LABINSIGHT_LOG_LEVEL value; unknown names fall back to INFO
        log_file: LABINSIGHT_LOG_FILE path, written without colour
        use_color: colour the console; defaults to whether stdout is a TTY
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    root_logger.handlers.clear()

    if use_color is None:
        use_color = sys.stdout.isatty()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(StructuredFormatter(use_color=use_color))
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(StructuredFormatter(use_color=False))
        root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Module logger; pass __name__."""
    return logging.getLogger(name)
