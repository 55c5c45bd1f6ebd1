# thinktool/runtime/event_logger.py
from __future__ import annotations

import json
import logging
import sys
import time
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

LOGGER_NAME = "thinktool"


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class JsonLineFormatter(logging.Formatter):
    """
    One JSON object per record:
        {"ts": ..., "event": ..., "level": ..., **fields}
    Extra fields come from `extra={"fields": {...}}`.
    """

    def format(self, record: logging.LogRecord) -> str:
        out: Dict[str, Any] = {
            "ts": _now_iso(),
            "event": record.getMessage(),
            "level": record.levelname.lower(),
            "logger": record.name,
        }
        fields = getattr(record, "fields", None)
        if isinstance(fields, dict):
            out.update(fields)
        if record.exc_info:
            out["exc"] = self.formatException(record.exc_info)
        return json.dumps(out, ensure_ascii=False, default=str)


def configure_logging(level: str = "INFO", log_file: Optional[str | Path] = None) -> logging.Logger:
    """
    Route the package logger to stderr (stdout carries the MCP stream),
    plus an optional JSONL file.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    fmt = JsonLineFormatter()
    stream = logging.StreamHandler(sys.stderr)
    stream.setFormatter(fmt)
    logger.addHandler(stream)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(path, encoding="utf-8")
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    logger.propagate = False
    return logger


class EventLogger:
    """
    Minimal structured event logger on top of `logging`.
    Usage:
        events = EventLogger()
        events.log("server.start", name="think-tool")
        with events.span("tool", tool="think") as ev:
            ... do work ...
            ev["entries"] = 3
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or logging.getLogger(LOGGER_NAME)

    def log(self, event: str, level: int = logging.INFO, **fields: Any) -> None:
        self.logger.log(level, event, extra={"fields": fields})

    @contextmanager
    def span(self, event_prefix: str, **fields: Any) -> Iterator[Dict[str, Any]]:
        """
        Measures latency and writes <event_prefix>.ok or <event_prefix>.fail
        """
        start = time.perf_counter()
        data: Dict[str, Any] = dict(fields)
        try:
            yield data
        except Exception as e:
            latency_ms = int((time.perf_counter() - start) * 1000)
            self.log(
                f"{event_prefix}.fail",
                level=logging.WARNING,
                latency_ms=latency_ms,
                error=str(e),
                error_type=type(e).__name__,
                error_code=getattr(e, "code", None),
                **data,
            )
            raise
        latency_ms = int((time.perf_counter() - start) * 1000)
        self.log(f"{event_prefix}.ok", latency_ms=latency_ms, **data)
