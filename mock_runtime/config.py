from __future__ import annotations

from pydantic import BaseModel
from dotenv import load_dotenv
import os

load_dotenv()


class Settings(BaseModel):
    http_adapter: str = os.getenv("HTTP_ADAPTER", "mock")
    endpoints_file: str = os.getenv("ENDPOINTS_FILE", "fixtures/endpoints.yaml")
    audit_log_path: str = os.getenv("AUDIT_LOG_PATH", "")
    http_base_url: str = os.getenv("HTTP_BASE_URL", "")
    http_timeout_ms: int = int(os.getenv("HTTP_TIMEOUT_MS", "5000"))
    metrics_enabled: bool = os.getenv("METRICS_ENABLED", "true").lower() == "true"
    metrics_path: str = os.getenv("METRICS_PATH", "/metrics")


settings = Settings()
