"""
Logging configuration for applications embedding the OAuth2 client.

The client logs under the ``oauth2_client`` namespace: the token endpoint
it calls, transport failures and unexpected status codes. Client secrets,
authorization codes and access tokens are never logged.

- Default: structured JSON lines on stderr
- OAUTH2_LOG_FORMAT=text: plain human-readable lines
"""

import json
import logging
import os
from datetime import UTC, datetime

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class JsonFormatter(logging.Formatter):
    """
    One JSON object per record, stamped with the record's creation time.

    ``extra_fields`` passed via ``extra=`` are merged into the top level, and
    a traceback is added under ``exception`` when one is attached.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "severity": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extra_fields = getattr(record, "extra_fields", None)
        if isinstance(extra_fields, dict):
            entry.update(extra_fields)

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def setup_global_logging(level: int | str | None = None) -> None:
    """
    Configure root logging based on environment.

    Args:
        level: Log level; falls back to OAUTH2_LOG_LEVEL, then INFO
    """
    if level is None:
        level = os.getenv("OAUTH2_LOG_LEVEL", "INFO").upper()

    handler = logging.StreamHandler()
    if os.getenv("OAUTH2_LOG_FORMAT", "json").lower() == "text":
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    else:
        handler.setFormatter(JsonFormatter())

    root_logger = logging.getLogger()
    # Replace existing handlers to avoid duplicate logs
    for h in list(root_logger.handlers):
        root_logger.removeHandler(h)
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
