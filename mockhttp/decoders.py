from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, TypeVar, Union

from pydantic import TypeAdapter, ValidationError

from mockhttp.result import Ok

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class DecodeError:
    message: str


# A decoder turns raw response text into Ok(value) or DecodeError. It never raises.
Decoder = Callable[[str], Union[Ok[T], DecodeError]]


def string(text: str) -> Ok[str]:
    return Ok(text)


def json_decoder(tp: Any) -> Decoder:
    """
    Build a decoder that parses JSON text and validates it as ``tp``.

    ``tp`` is anything pydantic can build a TypeAdapter for: builtins,
    typing generics such as ``list[str]``, dataclasses or BaseModel types.
    """
    adapter = TypeAdapter(tp)

    def decode(text: str) -> Ok[Any] | DecodeError:
        try:
            return Ok(adapter.validate_json(text))
        except ValidationError as exc:
            return DecodeError(str(exc))

    return decode


json_value: Decoder = json_decoder(Any)


def map_decoder(decoder: Decoder, fn: Callable[[T], U]) -> Decoder:
    def decode(text: str) -> Ok[U] | DecodeError:
        out = decoder(text)
        if isinstance(out, DecodeError):
            return out
        return Ok(fn(out.value))

    return decode
