# shared/logging/logger.py
# Structured JSON logger used by every module.
# Every log line is valid JSON, so the cluster log stack can query it.
# Lines written while a request is in flight carry its method and path.

import logging
import json
import os
from contextvars import ContextVar, Token
from datetime import datetime, timezone

from constants import SERVICE_NAME


# Extra fields copied onto the JSON line when the caller supplies them
EXTRA_FIELDS = (
    "entity", "record_id", "status_code", "latency_ms", "error", "port",
)

_request: ContextVar[dict] = ContextVar("request", default={})


def bind_request(method: str, path: str) -> Token:
    """Tags every log line in the current context with the request."""
    return _request.set({"method": method, "path": path})


def unbind_request(token: Token) -> None:
    _request.reset(token)


class StructuredFormatter(logging.Formatter):
    """
    Formats every log line as a JSON object.
    Attach extra fields via: logger.info("msg", extra={"entity": "order"})
    """
    def format(self, record: logging.LogRecord) -> str:
        log = {
            "ts":      datetime.now(timezone.utc).isoformat(),
            "level":   record.levelname,
            "service": SERVICE_NAME,
            "logger":  record.name,
            "message": record.getMessage(),
        }
        log.update(_request.get())

        for key in EXTRA_FIELDS:
            if hasattr(record, key):
                log[key] = getattr(record, key)

        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)

        return json.dumps(log, ensure_ascii=False, default=str)


def get_logger(name: str) -> logging.Logger:
    """
    Returns a structured logger for the given module name.
    Call this once per module:  logger = get_logger(__name__)
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)

        level = os.getenv("LOG_LEVEL", "INFO").upper()
        logger.setLevel(getattr(logging, level, logging.INFO))

    return logger
