from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from mockhttp import decoders
from mockhttp.decoders import Decoder


@dataclass(frozen=True)
class GetRequest:
    url: str
    decoder: Decoder


@dataclass(frozen=True)
class PostRequest:
    url: str
    body: Any
    decoder: Decoder


@dataclass(frozen=True)
class PutRequest:
    url: str
    body: Any
    decoder: Decoder


@dataclass(frozen=True)
class PatchRequest:
    url: str
    body: Any
    decoder: Decoder


@dataclass(frozen=True)
class DeleteRequest:
    url: str
    decoder: Decoder


Request = Union[GetRequest, PostRequest, PutRequest, PatchRequest, DeleteRequest]


def get(url: str, decoder: Decoder) -> GetRequest:
    return GetRequest(url=url, decoder=decoder)


def get_string(url: str) -> GetRequest:
    return GetRequest(url=url, decoder=decoders.string)


def post(url: str, body: Any, decoder: Decoder) -> PostRequest:
    # body is carried for real transports only; matching ignores it
    return PostRequest(url=url, body=body, decoder=decoder)


def put(url: str, body: Any, decoder: Decoder) -> PutRequest:
    return PutRequest(url=url, body=body, decoder=decoder)


def patch(url: str, body: Any, decoder: Decoder) -> PatchRequest:
    return PatchRequest(url=url, body=body, decoder=decoder)


def delete(url: str, decoder: Decoder) -> DeleteRequest:
    return DeleteRequest(url=url, decoder=decoder)


def method_of(request: Request) -> str:
    if isinstance(request, GetRequest):
        return "GET"
    if isinstance(request, PostRequest):
        return "POST"
    if isinstance(request, PutRequest):
        return "PUT"
    if isinstance(request, PatchRequest):
        return "PATCH"
    if isinstance(request, DeleteRequest):
        return "DELETE"
    raise TypeError(f"unsupported request type: {type(request).__name__}")


def body_of(request: Request) -> Any:
    if isinstance(request, (PostRequest, PutRequest, PatchRequest)):
        return request.body
    return None
