import logging
import sys
from pathlib import Path
from typing import Optional, TextIO
from datetime import datetime

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name of console records."""

    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def format(self, record):
        # Work on a copy so file handlers sharing the record stay uncolored
        record = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelname)
        if color:
            record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)

def _console_handler(stream: TextIO, log_format: str) -> logging.Handler:
    handler = logging.StreamHandler(stream)
    is_tty = getattr(stream, "isatty", None)
    if is_tty is not None and is_tty():
        handler.setFormatter(ColoredFormatter(log_format))
    else:
        handler.setFormatter(logging.Formatter(log_format))
    return handler

def _file_handler(log_file: Path, log_format: str) -> logging.Handler:
    """Open a handler on a timestamped sibling of ``log_file``."""
    log_file.parent.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    stamped = log_file.with_name(f"{log_file.stem}_{timestamp}{log_file.suffix}")
    handler = logging.FileHandler(stamped, encoding='utf-8')
    handler.setFormatter(logging.Formatter(log_format))
    return handler

def setup_logger(
    name: str = "bundle_settings",
    level: str = "INFO",
    log_format: Optional[str] = None,
    log_file: Optional[Path] = None,
    stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Configure the root logger and return the named application logger.

    Args:
        name: Name of the logger to return
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_format: Optional custom log format
        log_file: Optional path to log file, written with a timestamp suffix
        stream: Console stream, stderr by default so stdout stays free for
            command output

    Returns:
        logging.Logger: Configured logger instance
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    log_format = log_format or DEFAULT_FORMAT
    root_logger.addHandler(_console_handler(stream or sys.stderr, log_format))

    if log_file:
        try:
            file_handler = _file_handler(log_file, log_format)
        except OSError as e:
            root_logger.error(f"Failed to set up file logging: {str(e)}")
        else:
            root_logger.addHandler(file_handler)
            root_logger.info(f"Logging to file: {file_handler.baseFilename}")

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root_logger.setLevel(numeric_level)

    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)
    logger.propagate = True

    return logger
