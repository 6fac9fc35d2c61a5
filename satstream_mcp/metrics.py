"""Minimal in-process metrics recorder (not suitable for multi-process aggregation)."""

from __future__ import annotations

from collections import Counter
from threading import Lock
from typing import Dict, Optional

MAX_RECENT_DURATIONS = 100


class MetricsRecorder:
    def __init__(self) -> None:
        self._lock = Lock()
        self._requests = 0
        self._request_durations_ms: Dict[str, float] = {}
        self._tool_success: Counter[str] = Counter()
        self._tool_error: Counter[str] = Counter()
        self._error_codes: Counter[str] = Counter()

    def incr_request(self) -> None:
        with self._lock:
            self._requests += 1

    def record_duration(self, request_id: str, duration_ms: float) -> None:
        with self._lock:
            self._request_durations_ms[request_id] = duration_ms
            while len(self._request_durations_ms) > MAX_RECENT_DURATIONS:
                oldest = next(iter(self._request_durations_ms))
                del self._request_durations_ms[oldest]

    def record_tool(self, tool: str, *, success: bool, error_code: Optional[str] = None) -> None:
        with self._lock:
            if success:
                self._tool_success[tool] += 1
            else:
                self._tool_error[tool] += 1
                if error_code:
                    self._error_codes[error_code] += 1

    def snapshot(self) -> Dict[str, object]:
        with self._lock:
            return {
                "requests": self._requests,
                "tool_success": dict(self._tool_success),
                "tool_error": dict(self._tool_error),
                "error_codes": dict(self._error_codes),
                "recent_request_durations_ms": dict(self._request_durations_ms),
            }

    def reset(self) -> None:
        with self._lock:
            self._requests = 0
            self._request_durations_ms.clear()
            self._tool_success.clear()
            self._tool_error.clear()
            self._error_codes.clear()


default_metrics = MetricsRecorder()
