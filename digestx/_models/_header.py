"""
HTTP Headers implementation.

Provides a case-insensitive, order-preserving headers container.
"""

from __future__ import annotations

import typing
from collections.abc import Mapping

from .._utils import HEADERS
from .._types import HeaderTypes


class Headers(typing.MutableMapping[str, str]):
    """Case-insensitive HTTP headers preserving insertion order.

    Header names are stored in canonical casing so that the challenge header
    is found whether the server sent ``WWW-Authenticate`` or ``www-authenticate``.

    Examples:
        >>> h = Headers({"www-authenticate": 'Digest realm="x"'})
        >>> h["WWW-AUTHENTICATE"]
        'Digest realm="x"'
        >>> list(h.keys())
        ['WWW-Authenticate']
    """

    __slots__ = ("_store", "_order")

    @staticmethod
    def _canonical(name: str) -> str:
        """
        Convert header name to canonical form.

        Examples:
        - 'www-authenticate' -> 'WWW-Authenticate' (mapped header)
        - 'content-type' -> 'Content-Type' (title-case fallback)
        - 'X-Custom' -> 'X-Custom'
        """
        name = name.strip()
        lower_name = name.lower()
        if lower_name in HEADERS:
            return HEADERS[lower_name]
        return "-".join(part.capitalize() for part in lower_name.split("-"))

    def __init__(self, headers: HeaderTypes | None = None) -> None:
        # _store maps canonical_name -> value
        self._store: dict[str, str] = {}
        # _order tracks insertion order of canonical names
        self._order: list[str] = []

        if isinstance(headers, Headers):
            self._store = headers._store.copy()
            self._order = headers._order.copy()
        elif isinstance(headers, Mapping):
            for key, value in headers.items():
                self[key] = value
        elif headers is not None:
            raise TypeError("headers must be Headers or Mapping")

    def __getitem__(self, key: str) -> str:
        return self._store[self._canonical(key)]

    def __setitem__(self, key: str, value: str) -> None:
        """Set a header value, replacing any existing value for this key."""
        canonical = self._canonical(key)
        if canonical not in self._store:
            self._order.append(canonical)
        self._store[canonical] = str(value)

    def __delitem__(self, key: str) -> None:
        canonical = self._canonical(key)
        if canonical not in self._store:
            raise KeyError(key)
        del self._store[canonical]
        self._order.remove(canonical)

    def __iter__(self) -> typing.Iterator[str]:
        return iter(list(self._order))

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return self._canonical(key) in self._store

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Headers):
            return NotImplemented
        return self._store == other._store and self._order == other._order

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"Headers({{{items}}})"

    def copy(self) -> Headers:
        """Create a copy of this Headers instance."""
        return Headers(self)


__all__ = ["Headers"]
