"""digestx - HTTP Digest Access Authentication (RFC 2617) client for Python."""

from __future__ import annotations

# Client
from ._client import DigestAuthClient

# Digest computation
from ._auth import DigestCalculator, calc_digest_auth, generate_cnonce, md5_hex

# Message models
from ._models import (
    Challenge,
    Credentials,
    Headers,
    Request,
    Response,
    extract_credentials,
    parse_directive,
    parse_directives,
)

# Transports
from ._transports import BaseTransport, HTTPTransport

# Types and exceptions
from ._types import (
    AuthenticationError,
    AuthorizationError,
    Calculator,
    CnonceFactory,
    ConnectionError,
    DigestError,
    MissingCredentials,
    ReadError,
    TimeoutError,
    TransportConfig,
    TransportError,
    UnsupportedQOP,
    WriteError,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "DigestAuthClient",
    # Digest computation
    "DigestCalculator",
    "calc_digest_auth",
    "generate_cnonce",
    "md5_hex",
    # Models
    "Challenge",
    "Credentials",
    "Headers",
    "Request",
    "Response",
    "extract_credentials",
    "parse_directive",
    "parse_directives",
    # Transports
    "BaseTransport",
    "HTTPTransport",
    "TransportConfig",
    # Exceptions
    "DigestError",
    "TransportError",
    "ConnectionError",
    "ReadError",
    "WriteError",
    "TimeoutError",
    "AuthenticationError",
    "MissingCredentials",
    "UnsupportedQOP",
    "AuthorizationError",
    # Type aliases
    "Calculator",
    "CnonceFactory",
]
