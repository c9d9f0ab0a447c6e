from __future__ import annotations

from typing import Optional, Tuple

from mockhttp.decoders import DecodeError
from mockhttp.endpoints import Config, Endpoint
from mockhttp.request import Request, method_of
from mockhttp.result import BadPayload, BadUrl, Err, Response, Result, Status

# Decode failures are reported as a well-formed 200 whose body did not parse.
SYNTHETIC_STATUS = Status(200, "Ok")


def lookup(registry: Config, method: str, url: str) -> Optional[Endpoint]:
    for endpoint in registry.endpoints:
        if endpoint.method == method and endpoint.url == url:
            return endpoint
    return None


def bad_url(method: str, url: str) -> BadUrl:
    return BadUrl(f"No endpoint configured for {method} {url}")


def resolve(registry: Config, request: Request) -> Tuple[Result, float]:
    """
    Match ``request`` against ``registry`` and decode the canned body.

    Returns ``(result, delay_ms)``. A miss yields ``Err(BadUrl)`` with no delay;
    a body the decoder rejects yields ``Err(BadPayload)`` carrying the raw body.
    """
    method = method_of(request)
    endpoint = lookup(registry, method, request.url)
    if endpoint is None:
        return Err(bad_url(method, request.url)), 0

    decoded = request.decoder(endpoint.response)
    if isinstance(decoded, DecodeError):
        response = Response(url=endpoint.url, status=SYNTHETIC_STATUS, headers={}, body=endpoint.response)
        return Err(BadPayload(decoded.message, response)), endpoint.response_time

    return decoded, endpoint.response_time
