from __future__ import annotations

from pydantic import BaseModel

from mockhttp import decoders
from mockhttp.decoders import DecodeError
from mockhttp.result import Ok


class Book(BaseModel):
    title: str
    year: int


def test_string_is_identity() -> None:
    assert decoders.string("[1, 2") == Ok("[1, 2")


def test_json_decoder_builds_models() -> None:
    decode = decoders.json_decoder(list[Book])
    out = decode('[{"title": "Emma", "year": 1815}]')
    assert out == Ok([Book(title="Emma", year=1815)])


def test_json_decoder_reports_failure_as_value() -> None:
    out = decoders.json_decoder(Book)('{"title": "Emma"}')
    assert isinstance(out, DecodeError)
    assert "year" in out.message


def test_json_value_accepts_any_json() -> None:
    assert decoders.json_value('{"a": [1, null]}') == Ok({"a": [1, None]})


def test_map_decoder() -> None:
    count = decoders.map_decoder(decoders.json_decoder(list[str]), len)
    assert count('["A", "B"]') == Ok(2)
    assert isinstance(count("nope"), DecodeError)
