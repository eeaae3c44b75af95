"""Console and JSON-lines logging setup."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any


_LOGGER_NAME = "imgheader"

# Modules log under their package names, so each package logger gets the handlers too.
_PACKAGE_LOGGERS = ("imgheader_core", "imgheader_encoder", "imgheader_emitter", "imgheader_app")

_LEVEL_COLORS = {
    logging.CRITICAL: "31",
    logging.ERROR: "31",
    logging.WARNING: "33",
    logging.INFO: "34",
    logging.DEBUG: "33",
}

_VERBOSITY_LEVELS = [logging.CRITICAL, logging.ERROR, logging.WARNING, logging.INFO, logging.DEBUG]


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts_utc": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        if hasattr(record, "event"):
            payload["event"] = getattr(record, "event")
        return json.dumps(payload, ensure_ascii=True)


class ConsoleFormatter(logging.Formatter):
    """``[date][time][logger][LEVEL] message``, colored by level on a TTY."""

    def __init__(self, color: bool = True) -> None:
        super().__init__()
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        stamp = datetime.fromtimestamp(record.created).strftime("[%Y-%m-%d][%H:%M:%S]")
        line = f"{stamp}[{record.name}][{record.levelname}]"
        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        if not self.color:
            return f"{line} {message}"
        code = _LEVEL_COLORS.get(record.levelno, "0")
        return f"\x1b[{code}m{line}\x1b[0m {message}"


def level_from_verbosity(verbose: int = 0, quiet: int = 0) -> int:
    index = _VERBOSITY_LEVELS.index(logging.WARNING) + verbose - quiet
    return _VERBOSITY_LEVELS[max(0, min(len(_VERBOSITY_LEVELS) - 1, index))]


def configure_logging(
    level: int = logging.WARNING,
    console: bool = True,
    log_file: Path | None = None,
) -> logging.Logger:
    logger = logging.getLogger(_LOGGER_NAME)
    loggers = [logger] + [logging.getLogger(name) for name in _PACKAGE_LOGGERS]
    for each in loggers:
        each.setLevel(level)
    if logger.handlers:
        return logger

    handlers: list[logging.Handler] = []
    if console:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(ConsoleFormatter(color=sys.stderr.isatty()))
        handlers.append(stream_handler)

    if log_file is not None:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
        file_handler.setFormatter(JsonFormatter())
        handlers.append(file_handler)

    for each in loggers:
        for handler in handlers:
            each.addHandler(handler)

    logger.debug("logging configured", extra={"event": "logging_configured"})
    return logger


def get_logger() -> logging.Logger:
    return logging.getLogger(_LOGGER_NAME)
