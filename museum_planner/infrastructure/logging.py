"""Structured logging: one JSON object per line."""

from __future__ import annotations

import json
import sys
import time
import uuid
from typing import Any, Optional


class StructuredLogger:
    """JSON-line logger carrying a trace id and named timers."""

    def __init__(self, trace_id: Optional[str] = None, output=None, *, enabled: bool = True):
        self.trace_id = trace_id or str(uuid.uuid4())[:8]
        self._output = output or sys.stderr
        self._enabled = enabled
        self._timers: dict[str, float] = {}

    def _emit(self, data: dict[str, Any]) -> None:
        if not self._enabled:
            return
        data["trace_id"] = self.trace_id
        data["timestamp"] = time.time()
        try:
            self._output.write(json.dumps(data, ensure_ascii=False, default=str) + "\n")
            self._output.flush()
        except (OSError, ValueError) as exc:
            # Last-resort fallback when the configured stream is unusable.
            sys.stderr.write(f"logger_internal_error: {exc}\n")

    def start(self, operation: str, **extra: Any) -> None:
        self._timers[operation] = time.time()
        self._emit({"event": f"{operation}_start", **extra})

    def end(self, operation: str, **extra: Any) -> None:
        started = self._timers.pop(operation, time.time())
        duration_ms = round((time.time() - started) * 1000, 1)
        self._emit({"event": f"{operation}_end", "duration_ms": duration_ms, **extra})

    def event(self, name: str, **extra: Any) -> None:
        self._emit({"event": name, **extra})

    def warning(self, operation: str, message: str, **extra: Any) -> None:
        self._emit({"event": "warning", "operation": operation, "message": message, **extra})

    def error(self, operation: str, error: str, **extra: Any) -> None:
        self._emit({"event": "error", "operation": operation, "error": error, **extra})


_logger: Optional[StructuredLogger] = None


def get_logger(trace_id: Optional[str] = None) -> StructuredLogger:
    global _logger
    if _logger is None or (trace_id and _logger.trace_id != trace_id):
        from museum_planner.config.settings import resolve_settings

        _logger = StructuredLogger(trace_id=trace_id, enabled=resolve_settings().log_json)
    return _logger


def reset_logger() -> None:
    global _logger
    _logger = None


__all__ = ["StructuredLogger", "get_logger", "reset_logger"]
