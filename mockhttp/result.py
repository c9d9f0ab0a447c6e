from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Status:
    code: int
    message: str

    def __str__(self) -> str:
        return f"{self.code} {self.message}"


@dataclass(frozen=True)
class Response:
    url: str
    status: Status
    headers: Dict[str, str] = field(default_factory=dict)
    body: str = ""


class HttpError:
    """Base for every failure a client can report through the result channel."""

    kind = "http_error"


@dataclass(frozen=True)
class BadUrl(HttpError):
    message: str

    kind = "bad_url"


@dataclass(frozen=True)
class BadPayload(HttpError):
    message: str
    response: Response

    kind = "bad_payload"


@dataclass(frozen=True)
class Timeout(HttpError):
    kind = "timeout"


@dataclass(frozen=True)
class NetworkError(HttpError):
    message: str = ""

    kind = "network_error"


@dataclass(frozen=True)
class BadStatus(HttpError):
    response: Response

    kind = "bad_status"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    error: HttpError

    @property
    def ok(self) -> bool:
        return False


Result = Union[Ok[T], Err]


def outcome_of(result: Result) -> str:
    if isinstance(result, Ok):
        return "ok"
    return result.error.kind
