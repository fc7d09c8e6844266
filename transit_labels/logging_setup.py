"""JSON-lines logging shared by the CLI and the API.

Every record is one JSON object. Route-level context (``route_id``,
``short_name``, row counts) travels as ``extra=`` attributes, and the agency
being normalized is stamped on every record by :class:`AgencyFilter`.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Optional

EXTRA_ATTRIBUTES = (
    "agency",
    "route_id",
    "short_name",
    "rows",
    "excluded",
    "request_path",
    "method",
    "status_code",
    "latency_ms",
)


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        payload: Dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for attr in EXTRA_ATTRIBUTES:
            value = getattr(record, attr, None)
            if value is not None:
                payload[attr] = value
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True)


class AgencyFilter(logging.Filter):
    """Fill in ``record.agency`` unless the call site already passed one."""

    def __init__(self, agency: str):
        super().__init__()
        self.agency = agency

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "agency", None) is None:
            record.agency = self.agency
        return True


def _configure_handler(handler: logging.Handler, agency: Optional[str]) -> None:
    handler.setFormatter(JsonFormatter())
    for existing in [f for f in handler.filters if isinstance(f, AgencyFilter)]:
        handler.removeFilter(existing)
    if agency:
        handler.addFilter(AgencyFilter(agency))


def setup_logging(default_level: str | int = logging.INFO, agency: Optional[str] = None) -> None:
    """Configure the root logger for JSON output; safe to call more than once."""
    level = os.environ.get("LOG_LEVEL", default_level)
    root = logging.getLogger()
    root.setLevel(level.upper() if isinstance(level, str) else level)

    stream_handlers = [handler for handler in root.handlers if isinstance(handler, logging.StreamHandler)]
    if not stream_handlers:
        stream_handlers = [logging.StreamHandler()]
        root.addHandler(stream_handlers[0])
    for handler in stream_handlers:
        _configure_handler(handler, agency)
