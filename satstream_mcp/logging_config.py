"""Logging setup shared by the stdio and HTTP entry points."""

from __future__ import annotations

import json
import logging
import sys

from satstream_mcp.config import SatstreamConfig, default_config

PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "message": record.getMessage(),
            "name": record.name,
        }
        for key in ("tool", "request_id", "error"):
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def configure_logging(config: SatstreamConfig = default_config) -> None:
    """Log to stderr; stdout belongs to the stdio transport."""
    handler = logging.StreamHandler(sys.stderr)
    if config.log_format.lower() == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        handlers=[handler],
    )
