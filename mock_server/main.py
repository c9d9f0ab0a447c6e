from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse, Response

from mock_runtime.audit import AuditLogger
from mock_runtime.config import settings
from mock_runtime.metrics import MetricsCollector, metrics
from mockhttp import decoders, request as mock_request
from mockhttp.client import MockClient
from mockhttp.endpoints import METHODS, Config, build_registry
from mockhttp.loader import load_registry
from mockhttp.result import Err

# The server hands bodies back untouched, so every request uses the identity decoder.
_BUILDERS: Dict[str, Callable[[str], mock_request.Request]] = {
    "GET": mock_request.get_string,
    "POST": lambda url: mock_request.post(url, None, decoders.string),
    "PUT": lambda url: mock_request.put(url, None, decoders.string),
    "PATCH": lambda url: mock_request.patch(url, None, decoders.string),
    "DELETE": lambda url: mock_request.delete(url, decoders.string),
}


def _media_type(body: str) -> str:
    try:
        json.loads(body)
    except ValueError:
        return "text/plain"
    return "application/json"


def create_app(
    registry: Config,
    audit: Optional[AuditLogger] = None,
    collector: MetricsCollector = metrics,
) -> FastAPI:
    """
    Serve ``registry`` over real HTTP. Endpoint URLs are matched against the
    full request URL as the server sees it, e.g. ``http://localhost:8000/books``.
    """
    app = FastAPI(title="mockhttp dev server")
    client = MockClient(registry, audit=audit, metrics=collector)

    @app.get("/health")
    def health() -> Dict[str, str]:
        return {"status": "ok", "endpoints": str(len(registry))}

    @app.get(settings.metrics_path, response_class=PlainTextResponse)
    def metrics_export() -> str:
        if not settings.metrics_enabled:
            return ""
        return collector.render_prometheus()

    @app.api_route("/{path:path}", methods=list(METHODS))
    async def serve(path: str, request: Request) -> Response:
        req = _BUILDERS[request.method](str(request.url))
        result = await client.fetch(req)
        if isinstance(result, Err):
            return PlainTextResponse(result.error.message, status_code=404)
        return Response(content=result.value, media_type=_media_type(result.value))

    return app


def _default_registry() -> Config:
    if Path(settings.endpoints_file).exists():
        return load_registry(settings.endpoints_file)
    return build_registry([])


app = create_app(
    _default_registry(),
    audit=AuditLogger(settings.audit_log_path) if settings.audit_log_path else None,
)
