from __future__ import annotations

import threading
from collections import Counter
from typing import Tuple


def _escape(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")


class MetricsCollector:
    """
    In-memory Prometheus-style collector.

    Label values are bounded by the registry: outcomes are a fixed set and
    latency series use "METHOD url" of a configured endpoint or "unmatched".
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._counters: Counter[Tuple[str, str]] = Counter()
        self._latency_buckets: Counter[Tuple[str, str]] = Counter()
        self._bucket_edges = (1, 10, 50, 100, 250, 500, 1000, 2500, 5000)

    def inc(self, name: str, label: str, n: int = 1) -> None:
        with self._lock:
            self._counters[(name, label)] += n

    def observe_latency(self, endpoint: str, latency_ms: float) -> None:
        bucket = self._bucket_for(latency_ms)
        with self._lock:
            self._latency_buckets[(endpoint, bucket)] += 1

    def count(self, name: str, label: str) -> int:
        with self._lock:
            return self._counters[(name, label)]

    def latency_series(self) -> int:
        with self._lock:
            return len({endpoint for endpoint, _ in self._latency_buckets})

    def _bucket_for(self, latency_ms: float) -> str:
        for edge in self._bucket_edges:
            if latency_ms <= edge:
                return str(edge)
        return "+Inf"

    def render_prometheus(self) -> str:
        with self._lock:
            counters = sorted(self._counters.items())
            buckets = sorted(self._latency_buckets.items())

        lines = ["# TYPE mockhttp_requests_total counter"]
        for (name, label), value in counters:
            if name == "mockhttp_requests_total":
                lines.append(f'mockhttp_requests_total{{outcome="{_escape(label)}"}} {value}')

        lines.append("# TYPE mockhttp_latency_ms_bucket counter")
        for (endpoint, bucket), value in buckets:
            lines.append(f'mockhttp_latency_ms_bucket{{endpoint="{_escape(endpoint)}",le="{bucket}"}} {value}')

        return "\n".join(lines) + "\n"


metrics = MetricsCollector()
