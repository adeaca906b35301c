"""
HTTP transport backed by httpx.

Sends one request per call over a pooled ``httpx.Client`` and maps httpx
failures onto the package's TransportError hierarchy.
"""

from __future__ import annotations

from typing import Optional

import httpx

from .._models._header import Headers
from .._models._message import Request, Response
from .._types import (
    ConnectionError,
    ReadError,
    TimeoutError,
    TransportConfig,
    TransportError,
    WriteError,
)
from .._utils import logger
from ._base import BaseTransport


class HTTPTransport(BaseTransport):
    """
    Synchronous HTTP transport.

    Credentials embedded in the request URL are stripped before sending so
    that httpx never turns them into Basic authentication.

    Example:
        >>> with HTTPTransport(TransportConfig(read_timeout=10.0)) as transport:
        ...     response = transport.handle_request(Request.get("http://example.com/"))
    """

    def __init__(
        self,
        config: Optional[TransportConfig] = None,
        *,
        client: Optional[httpx.Client] = None,
    ) -> None:
        """
        Initialize transport.

        Args:
            config: Transport configuration. If None, uses defaults.
            client: Pre-built httpx.Client; config is then ignored except
                for the User-Agent header
        """
        super().__init__(config)
        self._client = client or self._create_client()

    def _create_client(self) -> httpx.Client:
        timeout = httpx.Timeout(
            connect=self.config.connect_timeout,
            read=self.config.read_timeout,
            write=self.config.write_timeout,
            pool=self.config.pool_timeout,
        )
        return httpx.Client(
            timeout=timeout,
            verify=self.config.verify,
            follow_redirects=False,
            **self.config.extra,
        )

    def handle_request(self, request: Request) -> Response:
        if self._closed:
            raise TransportError("Transport is closed")

        headers = dict(request.headers.items())
        if self.config.user_agent and "User-Agent" not in request.headers:
            headers["User-Agent"] = self.config.user_agent

        try:
            url = httpx.URL(request.url).copy_with(userinfo=b"")
            raw_request = self._client.build_request(
                request.method, url, headers=headers, content=request.content or None
            )
            raw = self._client.send(raw_request, stream=True)
        except httpx.InvalidURL as e:
            raise TransportError(f"Invalid URL {request.url!r}: {e}") from e
        except httpx.TransportError as e:
            raise self._map_error(e) from e

        try:
            content = raw.read()
        except httpx.TransportError as e:
            raw.close()
            raise self._map_error(e) from e

        logger.debug(f"{request.method} {request.request_uri} -> {raw.status_code}")

        # First value wins for repeated headers
        response_headers = Headers()
        for name, value in raw.headers.multi_items():
            if name not in response_headers:
                response_headers[name] = value

        return Response(
            raw.status_code,
            reason_phrase=raw.reason_phrase or None,
            headers=response_headers,
            content=content,
            request=request,
            on_close=raw.close,
        )

    @staticmethod
    def _map_error(error: httpx.TransportError) -> TransportError:
        if isinstance(error, httpx.TimeoutException):
            return TimeoutError(str(error))
        if isinstance(error, httpx.ConnectError):
            return ConnectionError(str(error))
        if isinstance(error, httpx.ReadError):
            return ReadError(str(error))
        if isinstance(error, httpx.WriteError):
            return WriteError(str(error))
        return TransportError(str(error))

    def close(self) -> None:
        if not self._closed:
            self._client.close()
            self._closed = True
