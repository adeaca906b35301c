"""In-memory transport used across the test suite."""

from __future__ import annotations

from typing import Callable, Union

from digestx import BaseTransport, Request, Response


Queued = Union[Response, Exception, Callable[[Request], Response]]


class FakeTransport(BaseTransport):
    """Replays queued responses and records every request it receives."""

    def __init__(self, *responses: Queued) -> None:
        super().__init__()
        self._queue = list(responses)
        self.requests: list[Request] = []
        self.responses: list[Response] = []
        # Closed state of every earlier response, captured at each send
        self.closed_at_send: list[list[bool]] = []

    def handle_request(self, request: Request) -> Response:
        self.requests.append(request)
        self.closed_at_send.append([r.is_closed for r in self.responses])
        queued = self._queue.pop(0)
        if isinstance(queued, Exception):
            raise queued
        response = queued(request) if callable(queued) else queued
        response.request = request
        self.responses.append(response)
        return response

    def close(self) -> None:
        self._closed = True
