from __future__ import annotations

import hashlib
import secrets
from typing import Optional

from ._models._auth import Challenge, Credentials
from ._models._message import Request
from ._types import CnonceFactory, MissingCredentials, UnsupportedQOP
from ._utils import CNONCE_BYTES, NONCE_COUNT, QOP_AUTH, QOP_UNSPECIFIED


def generate_cnonce() -> str:
    """Return 8 secure random bytes as 16 lowercase hex characters."""
    return secrets.token_bytes(CNONCE_BYTES).hex()


def md5_hex(value: str) -> str:
    return hashlib.md5(value.encode()).hexdigest()


class DigestCalculator:
    """
    Compute the Authorization header value for a Digest challenge.

    The client nonce source is injected so tests can supply a fixed sequence;
    the calculator itself holds no per-request state and is safe to share.

    Example:
        >>> calc = DigestCalculator(cnonce_factory=lambda: "0a4f113b")
        >>> calc(Credentials("Mufasa", "Circle Of Life"),
        ...      Challenge("testrealm@host.com", "dcd98b7102dd2f0e8b11d0f600bfb0c093", "auth"),
        ...      "GET", "/dir/index.html")  # doctest: +ELLIPSIS
        'Digest username="Mufasa", ..., response="6629fae49393a05397450978507c4ef1"'
    """

    def __init__(self, cnonce_factory: Optional[CnonceFactory] = None) -> None:
        self.cnonce_factory = cnonce_factory or generate_cnonce

    def __call__(
        self,
        credentials: Credentials,
        challenge: Challenge,
        method: str,
        request_uri: str,
    ) -> str:
        """
        Build the header value.

        Raises:
            MissingCredentials: If username or password is empty
            UnsupportedQOP: If qop is neither unspecified nor 'auth'
        """
        if not credentials.username or not credentials.password:
            raise MissingCredentials()

        ha1 = md5_hex(f"{credentials.username}:{challenge.realm}:{credentials.password}")
        ha2 = md5_hex(f"{method}:{request_uri}")

        qop = challenge.qop
        if qop == QOP_UNSPECIFIED:
            nc = cnonce = ""
            response = md5_hex(f"{ha1}:{challenge.nonce}:{ha2}")
        elif qop == QOP_AUTH:
            nc = NONCE_COUNT
            cnonce = self.cnonce_factory()
            response = md5_hex(f"{ha1}:{challenge.nonce}:{nc}:{cnonce}:{qop}:{ha2}")
        else:
            raise UnsupportedQOP(qop)

        # qop and nc stay unquoted, even when empty
        return (
            f'Digest username="{credentials.username}", realm="{challenge.realm}", '
            f'nonce="{challenge.nonce}", uri="{request_uri}", qop={qop}, nc={nc}, '
            f'cnonce="{cnonce}", response="{response}"'
        )


def calc_digest_auth(
    request: Request,
    realm: str,
    nonce: str,
    qop: str,
    *,
    cnonce_factory: Optional[CnonceFactory] = None,
) -> str:
    """
    Calculate the Authorization header for ``request``.

    The request URL must embed the username and password.
    """
    credentials = Credentials.from_url(request.url)
    calculator = DigestCalculator(cnonce_factory)
    return calculator(
        credentials, Challenge(realm, nonce, qop), request.method, request.request_uri
    )


__all__ = ["DigestCalculator", "calc_digest_auth", "generate_cnonce", "md5_hex"]
