import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any


class JsonLineFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        if isinstance(record.msg, dict):
            payload = dict(record.msg)
        else:
            payload = {"message": record.getMessage()}

        payload.setdefault("ts", datetime.now(timezone.utc).isoformat())
        payload.setdefault("level", record.levelname)
        payload.setdefault("logger", record.name)
        return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))


def setup_logging() -> None:
    level_name = os.getenv("DOCGATE_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO
    root = logging.getLogger()
    root.setLevel(level)

    # Replace a previously installed handler so it follows the current sys.stderr.
    for handler in list(root.handlers):
        if getattr(handler, "_docgate_json", False):
            root.removeHandler(handler)

    # stdout is reserved for reports.
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(JsonLineFormatter())
    handler._docgate_json = True  # type: ignore[attr-defined]
    root.addHandler(handler)


def log_event(logger: logging.Logger, event: dict[str, Any], level: int = logging.INFO) -> None:
    safe_event = dict(event)
    safe_event.setdefault("ts", datetime.now(timezone.utc).isoformat())
    safe_event.setdefault("level", logging.getLevelName(level))
    logger.log(level, safe_event)
