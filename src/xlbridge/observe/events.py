"""Boundary observability: NDJSON events on stderr and an in-memory call trace.

Both sinks are off unless the config enables them (``emit_events`` and
``trace``); ``observe_call`` feeds whichever is switched on.
"""

from __future__ import annotations

import sys
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, TextIO

import orjson

TRACE_VERSION = "1.0"


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _ms_since(mark: float) -> int:
    return int((time.perf_counter() - mark) * 1000)


class Timer:
    """``with Timer() as t: ...`` then read ``t.elapsed_ms``."""

    def __init__(self) -> None:
        self._mark = 0.0
        self.elapsed_ms = 0

    def __enter__(self) -> "Timer":
        self._mark = time.perf_counter()
        return self

    def __exit__(self, *exc: object) -> None:
        self.elapsed_ms = _ms_since(self._mark)


class EventEmitter:
    """One JSON object per line, written to ``stream`` or stderr."""

    def __init__(self, enabled: bool = False, stream: TextIO | None = None) -> None:
        self.enabled = enabled
        self.stream = stream

    def emit(self, event: str, data: dict[str, Any] | None = None) -> None:
        if not self.enabled:
            return
        line = orjson.dumps({"event": event, "timestamp": _now(), "data": data or {}}, default=repr)
        out = self.stream or sys.stderr
        out.write(line.decode() + "\n")
        out.flush()


class TraceRecorder:
    def __init__(self) -> None:
        self.entries: list[dict[str, Any]] = []
        self._mark = time.perf_counter()

    def record(self, category: str, data: dict[str, Any]) -> None:
        self.entries.append({"category": category, "timestamp_ms": _ms_since(self._mark), **data})

    def clear(self) -> None:
        self.entries = []
        self._mark = time.perf_counter()

    def save(self, path: str | Path) -> str:
        """Dump the recorded calls as indented JSON and return the path written."""
        document = {
            "trace_version": TRACE_VERSION,
            "generated_at": _now(),
            "total_duration_ms": _ms_since(self._mark),
            "entries": self.entries,
        }
        target = Path(path)
        target.write_bytes(orjson.dumps(document, option=orjson.OPT_INDENT_2, default=repr))
        return str(target)


_emitter = EventEmitter()
_trace = TraceRecorder()


def emitter() -> EventEmitter:
    """Shared emitter; enabled state follows the current config."""
    from xlbridge.config import get_config

    _emitter.enabled = get_config().emit_events
    return _emitter


def tracer() -> TraceRecorder | None:
    from xlbridge.config import get_config

    return _trace if get_config().trace else None


def observe_call(op: str | None, native: str, shape: str, duration_ms: int) -> None:
    """Report one boundary crossing to the event stream and the trace."""
    data = {"op": op, "native": native, "shape": shape, "duration_ms": duration_ms}
    emitter().emit("boundary.call", data)
    trace = tracer()
    if trace is not None:
        trace.record("boundary", data)
