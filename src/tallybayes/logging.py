"""Logging helpers for tallybayes."""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler

from .config import ConfigError, LoggingConfig

FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class ConsoleFormatter(logging.Formatter):
    """Plain messages, with a (optionally coloured) prefix for problems."""

    COLORS = {logging.WARNING: "\x1b[33m", logging.ERROR: "\x1b[31m"}
    RESET = "\x1b[0m"

    def __init__(self, use_color: bool) -> None:
        super().__init__("%(message)s")
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if record.levelno < logging.WARNING:
            return message
        prefix = record.levelname.lower()
        if self.use_color:
            color = self.COLORS[min(record.levelno, logging.ERROR)]
            prefix = f"{color}{prefix}{self.RESET}"
        return f"{prefix}: {message}"


def configure_logging(logging_config: LoggingConfig) -> None:
    """Route log records to stderr and, if configured, a rotating file."""

    level = level_from_string(logging_config.level)
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(ConsoleFormatter(bool(getattr(sys.stderr, "isatty", bool)())))
    handlers: list[logging.Handler] = [console]

    if logging_config.file is not None:
        log_path = logging_config.file.expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        handlers.append(file_handler)

    logging.basicConfig(level=level, handlers=handlers, force=True)


def level_from_string(level: str) -> int:
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ConfigError(f"Unknown log level: {level}")
    return resolved


__all__ = ["ConsoleFormatter", "configure_logging", "level_from_string"]
