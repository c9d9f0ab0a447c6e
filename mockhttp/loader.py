from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

import yaml
from jsonschema import Draft202012Validator
from pydantic import TypeAdapter, ValidationError

from mockhttp.endpoints import Config, Endpoint, build_registry


_SCHEMA_PATH = Path(__file__).resolve().parent / "endpoints_schema.json"
_ENDPOINT = TypeAdapter(Endpoint)


class EndpointConfigError(ValueError):
    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code


def load_endpoints_schema() -> Dict[str, Any]:
    return json.loads(_SCHEMA_PATH.read_text(encoding="utf-8"))


def _validate_document(document: Any) -> None:
    validator = Draft202012Validator(load_endpoints_schema())
    errors = sorted(validator.iter_errors(document), key=lambda e: [str(p) for p in e.path])
    if errors:
        joined = "; ".join(e.message for e in errors)
        raise EndpointConfigError("INVALID_ENDPOINT_DOCUMENT", f"endpoints schema validation failed: {joined}")


def _as_text(response: Any) -> str:
    # structured bodies in YAML are stored as their JSON text
    if isinstance(response, str):
        return response
    return json.dumps(response)


def parse_registry(document: Any) -> Config:
    _validate_document(document)

    endpoints: List[Endpoint] = []
    for i, raw in enumerate(document.get("endpoints") or []):
        item = dict(raw)
        item["response"] = _as_text(item["response"])
        try:
            endpoints.append(_ENDPOINT.validate_python(item))
        except ValidationError as exc:
            raise EndpointConfigError("INVALID_ENDPOINT", f"endpoint #{i}: {exc}") from exc
    return build_registry(endpoints)


def load_registry(path: str | Path) -> Config:
    try:
        with open(path, "r", encoding="utf-8") as f:
            document = yaml.safe_load(f)
    except OSError as exc:
        raise EndpointConfigError("INVALID_ENDPOINT_DOCUMENT", f"cannot read {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise EndpointConfigError("INVALID_ENDPOINT_DOCUMENT", f"malformed YAML in {path}: {exc}") from exc
    return parse_registry(document)
