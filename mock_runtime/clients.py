from __future__ import annotations

from typing import Optional

from mock_runtime.audit import AuditLogger
from mock_runtime.config import Settings
from mock_runtime.metrics import metrics
from mockhttp.client import MockClient
from mockhttp.client_real import HttpClient, HttpClientConfig
from mockhttp.endpoints import Config
from mockhttp.loader import load_registry


def build_client(settings: Settings, registry: Optional[Config] = None) -> MockClient | HttpClient:
    """
    Pick the transport the same call sites will use.

    HTTP_ADAPTER=real talks to HTTP_BASE_URL over httpx; anything else
    serves the registry (loaded from ENDPOINTS_FILE when not given).
    """
    if settings.http_adapter.lower() == "real":
        return HttpClient(
            HttpClientConfig(
                base_url=settings.http_base_url,
                timeout_ms=settings.http_timeout_ms,
            )
        )

    if registry is None:
        registry = load_registry(settings.endpoints_file)
    audit = AuditLogger(settings.audit_log_path) if settings.audit_log_path else None
    return MockClient(
        registry,
        audit=audit,
        metrics=metrics if settings.metrics_enabled else None,
    )
