from __future__ import annotations

import asyncio
import time
from typing import Any, Callable, Dict, Tuple

from mockhttp.delivery import deliver
from mockhttp.endpoints import Config
from mockhttp.request import Request, method_of
from mockhttp.resolver import resolve
from mockhttp.result import BadUrl, Err, Result, outcome_of

# every miss shares one latency series
UNMATCHED = "unmatched"


def send(registry: Config, callback: Callable[[Result], None], request: Request) -> "asyncio.Task[None]":
    """Resolve ``request`` now and deliver the result to ``callback`` after the endpoint's delay."""
    result, delay_ms = resolve(registry, request)
    return deliver(delay_ms, result, callback)


async def fetch(registry: Config, request: Request) -> Result:
    result, delay_ms = resolve(registry, request)
    await asyncio.sleep(delay_ms / 1000.0)
    return result


def endpoint_label(request: Request, result: Result) -> str:
    # a non-miss matched a configured endpoint with exactly this method and url
    if isinstance(result, Err) and isinstance(result.error, BadUrl):
        return UNMATCHED
    return f"{method_of(request)} {request.url}"


class MockClient:
    """
    Registry-backed client with the same call shape as HttpClient.
    Optionally records one audit event per request and the latency from
    send to delivery.
    """

    def __init__(self, registry: Config, audit=None, metrics=None):
        self.registry = registry
        self.audit = audit
        self.metrics = metrics

    def send(self, callback: Callable[[Result], None], request: Request) -> "asyncio.Task[None]":
        t0 = time.perf_counter()
        result, delay_ms, label = self._resolve(request, t0)

        def _delivered(res: Result) -> None:
            self._observe(label, t0)
            callback(res)

        return deliver(delay_ms, result, _delivered)

    async def fetch(self, request: Request) -> Result:
        t0 = time.perf_counter()
        result, delay_ms, label = self._resolve(request, t0)
        await asyncio.sleep(delay_ms / 1000.0)
        self._observe(label, t0)
        return result

    def _resolve(self, request: Request, t0: float) -> Tuple[Result, float, str]:
        result, delay_ms = resolve(self.registry, request)
        self._record(request, result, delay_ms, t0)
        return result, delay_ms, endpoint_label(request, result)

    def _observe(self, label: str, t0: float) -> None:
        if self.metrics is not None:
            self.metrics.observe_latency(label, (time.perf_counter() - t0) * 1000.0)

    def _record(self, request: Request, result: Result, delay_ms: float, t0: float) -> None:
        outcome = outcome_of(result)
        if self.metrics is not None:
            self.metrics.inc("mockhttp_requests_total", outcome)
        if self.audit is None:
            return
        event: Dict[str, Any] = {
            "method": method_of(request),
            "url": request.url,
            "outcome": outcome,
            "matched": outcome != "bad_url",
            "delay_ms": delay_ms,
            "resolve_ms": (time.perf_counter() - t0) * 1000.0,
        }
        if isinstance(result, Err):
            event["error"] = getattr(result.error, "message", None)
        self.audit.emit(event)
