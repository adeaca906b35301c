"""
Base transport abstraction for HTTP requests.

This module defines the contract the client relies on, inspired by HTTPX's
transport architecture: a transport turns a Request into a Response and
owns the connections behind it.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Optional

from .._types import TransportConfig

if TYPE_CHECKING:
    from .._models._message import Request, Response


class BaseTransport(abc.ABC):
    """
    Abstract base class for synchronous HTTP transports.

    All transports must implement handle_request/close; the context manager
    protocol is provided here.
    """

    def __init__(self, config: Optional[TransportConfig] = None) -> None:
        """
        Initialize transport with configuration.

        Args:
            config: Transport configuration. If None, uses defaults.
        """
        self.config = config or TransportConfig()
        self._closed = False

    @abc.abstractmethod
    def handle_request(self, request: Request) -> Response:
        """
        Send a request and return the response.

        The returned Response must reference ``request`` and must release
        any connection it holds when closed.

        Args:
            request: The HTTP request to send

        Returns:
            The received HTTP response

        Raises:
            TransportError: On network or protocol errors
        """
        ...

    @abc.abstractmethod
    def close(self) -> None:
        """Close the transport and release resources."""
        ...

    def __enter__(self) -> BaseTransport:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    @property
    def is_closed(self) -> bool:
        """Check if transport is closed."""
        return self._closed
