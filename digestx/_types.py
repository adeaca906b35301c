"""
Type definitions and exceptions for HTTP digest authentication.

This module centralizes the transport configuration, the exception hierarchy
and the type aliases shared by the models, transports and client.
"""

from __future__ import annotations

import typing
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

if typing.TYPE_CHECKING:
    from ._models._header import Headers
    from ._models._auth import Challenge, Credentials


# =============================================================================
# Header Types
# =============================================================================

HeaderTypes = typing.Union[
    "Headers",
    Mapping[str, str],
]


# =============================================================================
# Transport Configuration
# =============================================================================


@dataclass
class TransportConfig:
    """Configuration for HTTP transports."""

    # Timeouts (in seconds)
    connect_timeout: float = 5.0
    read_timeout: float = 30.0
    write_timeout: float = 5.0
    pool_timeout: float = 5.0

    # TLS settings
    verify: bool = True

    user_agent: Optional[str] = None

    # Additional keyword arguments forwarded to httpx.Client
    extra: dict[str, Any] = field(default_factory=dict)


# =============================================================================
# Exceptions
# =============================================================================


class DigestError(Exception):
    """Base exception for the package."""

    pass


class TransportError(DigestError):
    """Base exception for transport errors."""

    pass


class ConnectionError(TransportError):
    """Raised when the connection to the server fails."""

    pass


class WriteError(TransportError):
    """Raised when writing the request fails."""

    pass


class ReadError(TransportError):
    """Raised when reading the response fails."""

    pass


class TimeoutError(TransportError):
    """Raised when operation times out."""

    pass


class AuthenticationError(DigestError):
    """Base exception for failures computing digest credentials."""

    pass


class MissingCredentials(AuthenticationError):
    """Raised when username or password is absent or empty."""

    def __init__(self, message: str = "Username or password not provided in request URL"):
        super().__init__(message)


class UnsupportedQOP(AuthenticationError):
    """Raised when the challenge asks for a qop other than unspecified or auth."""

    def __init__(self, qop: str):
        super().__init__(f"Unsupported QOP directive: '{qop}'")
        self.qop = qop


class AuthorizationError(AuthenticationError):
    """Raised by the client when the Authorization header cannot be computed.

    The underlying MissingCredentials or UnsupportedQOP is kept as __cause__.
    """

    pass


# =============================================================================
# Type Aliases
# =============================================================================

# Client nonce source
CnonceFactory = typing.Callable[[], str]

# Digest calculator: (credentials, challenge, method, request_uri) -> header value
Calculator = typing.Callable[["Credentials", "Challenge", str, str], str]


__all__ = [
    # Header types
    "HeaderTypes",
    # Transport types
    "TransportConfig",
    # Exceptions
    "DigestError",
    "TransportError",
    "ConnectionError",
    "WriteError",
    "ReadError",
    "TimeoutError",
    "AuthenticationError",
    "MissingCredentials",
    "UnsupportedQOP",
    "AuthorizationError",
    # Type aliases
    "CnonceFactory",
    "Calculator",
]
