"""
Structured logging for partner-app-utils.

Failed request attempts, fallbacks to mock data and health probe outcomes
are logged with keyword fields so operators can tell when a dashboard is
serving degraded data. Output is JSON by default, text on request.

Usage:
    from partner_app_utils.logging_config import LogContext, configure_logging, get_logger

    configure_logging(level="INFO", json_output=True)

    logger = get_logger(__name__)
    logger.warning("Vendor approval not confirmed", vendor_id="7")

    with LogContext(service="market_app"):
        logger.debug("Probing")  # emitted with service=market_app

Environment:
    PARTNER_APP_LOG_LEVEL         default level (INFO)
    PARTNER_APP_LOG_FORMAT        "json" or "text"
    PARTNER_APP_LOG_FILE          optional rotating log file
    PARTNER_APP_LOG_MAX_BYTES     rotation size (10MB)
    PARTNER_APP_LOG_BACKUP_COUNT  rotated files kept (5)
"""

import json
import logging
import logging.handlers
import os
import sys
import threading
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

_log_context: ContextVar[Dict[str, Any]] = ContextVar("partner_app_log_context", default={})

LOG_LEVEL = os.environ.get("PARTNER_APP_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.environ.get("PARTNER_APP_LOG_FORMAT", "json")
LOG_FILE = os.environ.get("PARTNER_APP_LOG_FILE", "")
LOG_MAX_BYTES = int(os.environ.get("PARTNER_APP_LOG_MAX_BYTES", 10 * 1024 * 1024))
LOG_BACKUP_COUNT = int(os.environ.get("PARTNER_APP_LOG_BACKUP_COUNT", 5))

PACKAGE_LOGGER = "partner_app_utils"


@dataclass
class LogRecord:
    """One formatted log line before rendering."""

    timestamp: str
    level: str
    logger: str
    message: str
    service: Optional[str] = None
    fields: Dict[str, Any] = field(default_factory=dict)
    exception: Optional[Dict[str, str]] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "ts": self.timestamp,
            "level": self.level,
            "logger": self.logger,
            "msg": self.message,
        }
        if self.service:
            out["service"] = self.service
        out.update(self.fields)
        if self.exception:
            out["exception"] = self.exception
        return out

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), default=str)

    def to_text(self) -> str:
        service = f" [{self.service}]" if self.service else ""
        line = f"{self.timestamp} [{self.level}] [{self.logger}]{service} {self.message}"
        if self.fields:
            line += " " + " ".join(f"{k}={v}" for k, v in self.fields.items())
        if self.exception:
            line += "\n" + self.exception["traceback"]
        return line


class _StructuredFormatter(logging.Formatter):
    """Builds a LogRecord from the stdlib record plus the active LogContext."""

    def build(self, record: logging.LogRecord, timestamp: str, logger_name: str) -> LogRecord:
        fields = dict(_log_context.get())
        service = fields.pop("service", None)
        fields.update(getattr(record, "structured_fields", {}))

        exception = None
        if record.exc_info and record.exc_info[0] is not None:
            exception = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": self.formatException(record.exc_info),
            }

        return LogRecord(
            timestamp=timestamp,
            level=record.levelname,
            logger=logger_name,
            message=record.getMessage(),
            service=service,
            fields=fields,
            exception=exception,
        )


class JSONFormatter(_StructuredFormatter):
    """One JSON object per line, with an ISO-8601 UTC timestamp."""

    def format(self, record: logging.LogRecord) -> str:
        now = datetime.fromtimestamp(record.created, timezone.utc)
        timestamp = now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
        return self.build(record, timestamp, record.name).to_json()


class TextFormatter(_StructuredFormatter):
    """Human-readable lines using the last component of the logger name."""

    def format(self, record: logging.LogRecord) -> str:
        now = datetime.fromtimestamp(record.created, timezone.utc)
        timestamp = now.strftime("%Y-%m-%d %H:%M:%S")
        return self.build(record, timestamp, record.name.rsplit(".", 1)[-1]).to_text()


class StructuredLogger:
    """Wraps a stdlib logger; keyword arguments become structured fields."""

    def __init__(self, name: str):
        self._logger = logging.getLogger(name)

    def _log(self, level: int, message: str, fields: Dict[str, Any]) -> None:
        if self._logger.isEnabledFor(level):
            self._logger.log(level, message, extra={"structured_fields": fields})

    def debug(self, message: str, **fields: Any) -> None:
        self._log(logging.DEBUG, message, fields)

    def info(self, message: str, **fields: Any) -> None:
        self._log(logging.INFO, message, fields)

    def warning(self, message: str, **fields: Any) -> None:
        self._log(logging.WARNING, message, fields)

    def error(self, message: str, **fields: Any) -> None:
        self._log(logging.ERROR, message, fields)


class LogContext:
    """
    Adds fields to every record logged inside the block.

    Fields live in a ContextVar, so each asyncio task (for example each
    concurrent health probe) sees only its own.
    """

    def __init__(self, **fields: Any):
        self._fields = fields
        self._token: Optional[Token] = None

    def __enter__(self) -> "LogContext":
        self._token = _log_context.set({**_log_context.get(), **self._fields})
        return self

    def __exit__(self, *exc) -> None:
        if self._token is not None:
            _log_context.reset(self._token)
            self._token = None


def get_context() -> Dict[str, Any]:
    """Fields contributed by the enclosing LogContext blocks."""
    return dict(_log_context.get())


_loggers: Dict[str, StructuredLogger] = {}
_loggers_lock = threading.Lock()


def get_logger(name: str) -> StructuredLogger:
    """Return the cached StructuredLogger for ``name``."""
    with _loggers_lock:
        logger = _loggers.get(name)
        if logger is None:
            logger = _loggers[name] = StructuredLogger(name)
        return logger


def configure_logging(
    level: Optional[str] = None,
    json_output: Optional[bool] = None,
    log_file: Optional[str] = None,
    propagate: bool = True,
) -> None:
    """
    Install handlers on the root logger. Call once at process startup.

    Arguments left as None fall back to the PARTNER_APP_LOG_* environment
    variables. Unknown level names resolve to INFO.
    """
    log_level = getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO)
    if json_output is None:
        json_output = LOG_FORMAT == "json"
    formatter = JSONFormatter() if json_output else TextFormatter()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    file_path = log_file or LOG_FILE
    if file_path:
        handlers.append(
            logging.handlers.RotatingFileHandler(
                file_path, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT
            )
        )

    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    root.setLevel(log_level)
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(log_level)
        root.addHandler(handler)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(log_level)
    package_logger.propagate = propagate
