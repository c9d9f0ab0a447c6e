from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

import httpx

from mockhttp.decoders import DecodeError
from mockhttp.request import Request, body_of, method_of
from mockhttp.result import (
    BadPayload,
    BadStatus,
    BadUrl,
    Err,
    NetworkError,
    Response,
    Result,
    Status,
    Timeout,
)


@dataclass
class HttpClientConfig:
    base_url: str = ""
    timeout_ms: int = 5000
    headers: Dict[str, str] = field(default_factory=dict)


class HttpClient:
    """
    Real network client used when HTTP_ADAPTER=real.
    Reports the same result values as MockClient, plus the network-level
    failures (Timeout, NetworkError, BadStatus) the mock never produces.
    """

    def __init__(self, config: HttpClientConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config
        self._transport = transport

    def send(self, callback: Callable[[Result], None], request: Request) -> "asyncio.Task[None]":
        async def _run() -> None:
            callback(await self.fetch(request))

        return asyncio.get_running_loop().create_task(_run())

    async def fetch(self, request: Request) -> Result:
        method = method_of(request)
        body = body_of(request)
        timeout = max(self.config.timeout_ms / 1000.0, 0.1)
        try:
            async with httpx.AsyncClient(
                base_url=self.config.base_url,
                headers=self.config.headers,
                timeout=timeout,
                transport=self._transport,
                trust_env=False,
            ) as client:
                raw = await client.request(method, request.url, json=body)
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as exc:
            return Err(BadUrl(f"{request.url}: {exc}"))
        except httpx.TimeoutException:
            return Err(Timeout())
        except httpx.TransportError as exc:
            return Err(NetworkError(str(exc)))

        response = _to_response(raw)
        if not raw.is_success:
            return Err(BadStatus(response))

        decoded = request.decoder(raw.text)
        if isinstance(decoded, DecodeError):
            return Err(BadPayload(decoded.message, response))
        return decoded


def _to_response(raw: httpx.Response) -> Response:
    return Response(
        url=str(raw.url),
        status=Status(int(raw.status_code), raw.reason_phrase),
        headers=dict(raw.headers),
        body=raw.text,
    )


def send_real(client: HttpClient, callback: Callable[[Result], None], request: Request) -> "asyncio.Task[None]":
    return client.send(callback, request)
