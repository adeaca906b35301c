"""
HTTP Models Package.

This package contains models for HTTP messages, headers, and digest
authentication inputs.
"""

from ._auth import (
    Challenge,
    Credentials,
    extract_credentials,
    parse_directive,
    parse_directives,
)
from ._header import Headers
from ._message import Request, Response

__all__ = [
    # Headers
    "Headers",
    # Messages
    "Request",
    "Response",
    # Authentication - Inputs
    "Credentials",
    "Challenge",
    # Authentication - Parsing
    "extract_credentials",
    "parse_directive",
    "parse_directives",
]
