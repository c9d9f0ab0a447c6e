from __future__ import annotations

from typing import Annotated, Iterable, Iterator, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, NonNegativeFloat, NonNegativeInt


class _EndpointBase(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    url: str
    response: str
    # milliseconds; whole numbers stay int
    response_time: Union[NonNegativeInt, NonNegativeFloat] = Field(default=0, alias="responseTime")


class Get(_EndpointBase):
    method: Literal["GET"] = "GET"


class Post(_EndpointBase):
    method: Literal["POST"] = "POST"


class Put(_EndpointBase):
    method: Literal["PUT"] = "PUT"


class Patch(_EndpointBase):
    method: Literal["PATCH"] = "PATCH"


class Delete(_EndpointBase):
    method: Literal["DELETE"] = "DELETE"


Endpoint = Annotated[Union[Get, Post, Put, Patch, Delete], Field(discriminator="method")]

METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE")


class Config:
    """
    Ordered, read-only collection of endpoints for one mock session.
    Duplicate (method, url) pairs are allowed; the first one registered wins.
    """

    __slots__ = ("_endpoints",)

    def __init__(self, endpoints: Iterable[Endpoint] = ()):
        self._endpoints: Tuple[Endpoint, ...] = tuple(endpoints)

    @property
    def endpoints(self) -> Tuple[Endpoint, ...]:
        return self._endpoints

    def __iter__(self) -> Iterator[Endpoint]:
        return iter(self._endpoints)

    def __len__(self) -> int:
        return len(self._endpoints)

    def __repr__(self) -> str:
        return f"Config({len(self._endpoints)} endpoints)"


def build_registry(endpoints: Iterable[Endpoint]) -> Config:
    return Config(endpoints)
