"""
HTTP transport layer.

This package provides the transport contract the client talks to and an
httpx-backed implementation of it.
"""

from .._types import (
    ConnectionError,
    ReadError,
    TimeoutError,
    TransportConfig,
    TransportError,
    WriteError,
)
from ._base import BaseTransport
from ._http import HTTPTransport

__all__ = [
    # Base classes
    "BaseTransport",
    "TransportConfig",
    # Implementations
    "HTTPTransport",
    # Exceptions
    "TransportError",
    "ConnectionError",
    "ReadError",
    "WriteError",
    "TimeoutError",
]
