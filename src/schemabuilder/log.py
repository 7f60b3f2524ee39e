"""
Logging setup for the schemabuilder command line.

Library modules only create loggers (``logging.getLogger(__name__)``);
handlers are installed here, once, by the entry point.

Two formats:

- ``text``: ``timestamp - logger - LEVEL - message``
- ``json``: one JSON object per record, for log shippers

Usage:
    from schemabuilder.log import configure_logging

    configure_logging(level="debug", fmt="json")
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone

_TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class JsonFormatter(logging.Formatter):
    """Render each record as a single-line JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def configure_logging(level: str = "info", fmt: str = "text") -> logging.Logger:
    """Install a single stderr handler on the ``schemabuilder`` logger."""
    root = logging.getLogger("schemabuilder")
    root.setLevel(level.upper())

    handler = logging.StreamHandler(sys.stderr)
    if fmt == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT))

    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    return root
