from __future__ import annotations

from pathlib import Path

import pytest

from mockhttp.endpoints import Get, Post
from mockhttp.loader import EndpointConfigError, load_registry, parse_registry

FIXTURE = Path(__file__).resolve().parents[1] / "fixtures" / "endpoints.yaml"


def test_load_fixture_file() -> None:
    registry = load_registry(FIXTURE)
    eps = registry.endpoints
    assert len(eps) == 4
    assert isinstance(eps[0], Get)
    assert eps[1].url == "http://localhost:8000/books"
    assert eps[1].response == '["A", "B"]'
    assert eps[1].response_time == 1000
    assert isinstance(eps[2], Post)
    assert eps[2].response == '"Saved!"'
    assert eps[3].response == "not valid json"
    assert eps[3].response_time == 0


def test_string_response_kept_verbatim(tmp_path: Path) -> None:
    path = tmp_path / "eps.yaml"
    path.write_text(
        "endpoints:\n"
        "  - method: GET\n"
        "    url: http://x/books\n"
        "    response: '[\"A\",\"B\"]'\n"
        "    response_time: 7\n",
        encoding="utf-8",
    )
    registry = load_registry(path)
    assert registry.endpoints[0].response == '["A","B"]'
    assert registry.endpoints[0].response_time == 7


def test_empty_endpoint_list_is_allowed() -> None:
    assert len(parse_registry({"endpoints": []})) == 0


@pytest.mark.parametrize(
    "document",
    [
        None,
        {},
        {"endpoints": [{"method": "HEAD", "url": "http://x", "response": ""}]},
        {"endpoints": [{"method": "GET", "response": ""}]},
        {"endpoints": [{"method": "GET", "url": "http://x", "response": "", "responseTime": -5}]},
        {"endpoints": [{"method": "GET", "url": "http://x", "response": "", "status": 500}]},
    ],
)
def test_invalid_documents_rejected(document) -> None:
    with pytest.raises(EndpointConfigError) as exc:
        parse_registry(document)
    assert exc.value.code == "INVALID_ENDPOINT_DOCUMENT"
    assert "schema validation failed" in str(exc.value)


def test_malformed_yaml_is_config_error(tmp_path: Path) -> None:
    path = tmp_path / "broken.yaml"
    path.write_text("endpoints: [ {method: GET\n", encoding="utf-8")
    with pytest.raises(EndpointConfigError) as exc:
        load_registry(path)
    assert exc.value.code == "INVALID_ENDPOINT_DOCUMENT"
    assert "malformed YAML" in str(exc.value)


def test_missing_file_is_config_error(tmp_path: Path) -> None:
    with pytest.raises(EndpointConfigError) as exc:
        load_registry(tmp_path / "absent.yaml")
    assert exc.value.code == "INVALID_ENDPOINT_DOCUMENT"


def test_conflicting_delay_keys_fail_model_validation() -> None:
    document = {
        "endpoints": [
            {"method": "GET", "url": "http://x", "response": "", "responseTime": 1, "response_time": 2},
        ]
    }
    with pytest.raises(EndpointConfigError) as exc:
        parse_registry(document)
    assert exc.value.code == "INVALID_ENDPOINT"
    assert "endpoint #0" in str(exc.value)


def test_fractional_response_time(tmp_path: Path) -> None:
    path = tmp_path / "eps.yaml"
    path.write_text(
        "endpoints:\n"
        "  - {method: GET, url: 'http://x/a', response: '1', responseTime: 250.5}\n"
        "  - {method: GET, url: 'http://x/b', response: '1', responseTime: 250}\n",
        encoding="utf-8",
    )
    a, b = load_registry(path).endpoints
    assert a.response_time == 250.5
    assert b.response_time == 250
    assert isinstance(b.response_time, int)
