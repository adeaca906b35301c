"""Utilities and constants for HTTP digest authentication."""

import logging
from rich.console import Console
from rich.logging import RichHandler

# Rich Console for pretty printing
console = Console(stderr=True)

# Logger for the package, rendered through RichHandler
logger = logging.getLogger("digestx")
logger.addHandler(
    RichHandler(console=console, rich_tracebacks=True, show_path=False)
)

METHOD = "GET"
UNAUTHORIZED = 401

# Header names (challenge consumed, credentials produced)
WWW_AUTHENTICATE = "WWW-Authenticate"
AUTHORIZATION = "Authorization"

# Digest directive keys; the scheme token is fused to the first directive
REALM_DIRECTIVE = "Digest realm"
NONCE_DIRECTIVE = "nonce"
QOP_DIRECTIVE = "qop"

QOP_UNSPECIFIED = ""
QOP_AUTH = "auth"

# Single-shot usage of a server nonce (RFC 2617 Section 3.2.2)
NONCE_COUNT = "00000001"
CNONCE_BYTES = 8

# HTTP headers with canonization that does not follow simple Title-Case
HEADERS = {
    "www-authenticate": "WWW-Authenticate",
    "authorization": "Authorization",
    "authentication-info": "Authentication-Info",
    "proxy-authenticate": "Proxy-Authenticate",
    "proxy-authorization": "Proxy-Authorization",
    "content-md5": "Content-MD5",
    "etag": "ETag",
    "te": "TE",
    "dnt": "DNT",
}
