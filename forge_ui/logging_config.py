"""Structured logging for Forge UI.

Records go to a rotating JSON file (``forge-ui.log``, 10MB, 5 backups) and to
a plain console stream. Both handlers pass through ``CredentialRedactor``:
mirror remote addresses and tracker URLs may carry user credentials, and those
must never reach a log sink.
"""

import logging
import re
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from pythonjsonlogger import jsonlogger

DEFAULT_LOG_DIR = Path(__file__).parent.parent / "logs"
LOG_FILE_NAME = "forge-ui.log"

# Third-party loggers that are chatty at INFO
QUIET_LOGGERS = ("MARKDOWN", "uvicorn.access")

REDACTED = "***REDACTED***"
SENSITIVE_PARAMS = ("token", "access_token", "password", "secret", "key", "auth")

_USERINFO_RE = re.compile(r"(?P<scheme>[a-zA-Z][a-zA-Z0-9+.-]*://)[^/\s@]+@")
_PARAM_RE = re.compile(rf"(?P<param>\b(?:{'|'.join(SENSITIVE_PARAMS)})=)[^&\s\"]+", re.IGNORECASE)

# Attributes every LogRecord has; anything else came in through ``extra``
_RECORD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}


def redact(text: str) -> str:
    """Mask URL user info and sensitive query parameters in ``text``."""
    text = _USERINFO_RE.sub(rf"\g<scheme>{REDACTED}@", text)
    return _PARAM_RE.sub(rf"\g<param>{REDACTED}", text)


class CredentialRedactor(logging.Filter):
    """Redact credentials from the message and string ``extra`` fields."""

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = redact(record.msg)
        for name, value in list(record.__dict__.items()):
            if name not in _RECORD_ATTRS and isinstance(value, str):
                setattr(record, name, redact(value))
        return True


def setup_logging(log_level: str = "INFO", log_dir: Path | None = None) -> logging.Logger:
    """Configure the root logger.

    Args:
        log_level: Console level (DEBUG, INFO, WARNING, ERROR, CRITICAL); the
            JSON file always receives DEBUG and above
        log_dir: Directory for the JSON log file (defaults to ``<project>/logs``)

    Returns:
        Configured root logger instance
    """
    level = getattr(logging, log_level.upper())
    log_dir = log_dir or DEFAULT_LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    redactor = CredentialRedactor()

    json_handler = RotatingFileHandler(
        log_dir / LOG_FILE_NAME,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding="utf-8",
    )
    json_handler.setFormatter(
        jsonlogger.JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(filename)s %(lineno)d",
            timestamp=True,
        )
    )
    json_handler.setLevel(logging.DEBUG)
    json_handler.addFilter(redactor)
    root_logger.addHandler(json_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    )
    console_handler.setLevel(level)
    console_handler.addFilter(redactor)
    root_logger.addHandler(console_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    **extra_fields: Any,
) -> None:
    """Log ``message`` with structured fields.

    Args:
        logger: Logger instance
        level: Log level name (debug, info, warning, error, critical)
        message: Log message
        **extra_fields: Fields for the JSON record, conventionally including
            an ``event_type`` (e.g. ``markup_render_error``)
    """
    getattr(logger, level.lower())(message, extra=extra_fields)
