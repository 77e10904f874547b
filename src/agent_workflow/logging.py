"""JSON-lines logging on stderr.

Stdout belongs to the rendered workflow output; log records never go there.
Context is attached with ``extra=`` and ends up under the ``extra`` key.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

# Every attribute a bare LogRecord carries, plus the ones formatting adds.
_RECORD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}

_NOISY_LOGGERS = ("openai", "httpx", "httpcore")


class JsonFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 (record)
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extra = {k: v for k, v in record.__dict__.items() if k not in _RECORD_ATTRS}
        if extra:
            payload["extra"] = extra
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logging(level: str, *, debug: bool = False) -> None:
    """Replace any root handlers with a single JSON handler on stderr.

    ``debug`` lowers only this package's loggers to DEBUG; HTTP client
    libraries stay at INFO or above.
    """
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(JsonFormatter())
    logging.basicConfig(level=level.upper(), handlers=[handler], force=True)

    if debug:
        logging.getLogger("agent_workflow").setLevel(logging.DEBUG)

    floor = max(logging.getLogger().level, logging.INFO)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(floor)
