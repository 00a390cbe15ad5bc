"""HTTP response with a chainable ``.with_*()`` transformation API.

Each transformation returns a new Response. Handlers and middleware
receive a response, derive a new one and pass it on; nothing is
modified in place.
"""

import json as json_module
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response built through immutable transformations.

    The default value (status 200, empty body) is what the dispatcher
    hands to the outermost middleware of a route.
    """

    body: str | bytes = ""
    status: int = 200
    content_type: str = "text/html; charset=utf-8"
    headers: tuple[tuple[str, str], ...] = ()

    # -- Chainable transformations --

    def with_status(self, status: int) -> "Response":
        """Return a new Response with a different status code."""
        return replace(self, status=status)

    def with_body(self, body: Any) -> "Response":
        """Return a new Response with a different body.

        ``None`` becomes an empty body; other non-bytes values are
        converted with ``str()``.
        """
        if body is None:
            body = ""
        elif not isinstance(body, str | bytes):
            body = str(body)
        return replace(self, body=body)

    def with_header(self, name: str, value: str) -> "Response":
        """Return a new Response with an additional header."""
        return replace(self, headers=(*self.headers, (name, value)))

    def add_headers(self, headers: Mapping[str, str]) -> "Response":
        """Return a new Response with *headers* merged in.

        Existing headers with the same (case-insensitive) name are
        replaced, the rest are kept.
        """
        names = {name.lower() for name in headers}
        kept = tuple((n, v) for n, v in self.headers if n.lower() not in names)
        return replace(self, headers=(*kept, *headers.items()))

    def with_headers(self, headers: Mapping[str, str]) -> "Response":
        """Return a new Response whose headers are exactly *headers*."""
        return replace(self, headers=tuple(headers.items()))

    def with_content_type(self, content_type: str) -> "Response":
        """Return a new Response with a different content type."""
        return replace(self, content_type=content_type)

    # -- Accessors --

    def header(self, name: str, default: str | None = None) -> str | None:
        """Return the last value set for header *name*."""
        name_lower = name.lower()
        for key, value in reversed(self.headers):
            if key.lower() == name_lower:
                return value
        return default

    @property
    def body_bytes(self) -> bytes:
        """Body as bytes."""
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return self.body

    @property
    def text(self) -> str:
        """Body as string."""
        if isinstance(self.body, bytes):
            return self.body.decode("utf-8")
        return self.body


# -- Factories --


def text(body: str, status: int = 200) -> Response:
    """A ``text/plain`` response."""
    return Response(body=body, status=status, content_type="text/plain; charset=utf-8")


def html(body: str, status: int = 200) -> Response:
    """A ``text/html`` response."""
    return Response(body=body, status=status)


def json(data: Any, status: int = 200) -> Response:
    """A response carrying *data* serialized as JSON."""
    return Response(
        body=json_module.dumps(data),
        status=status,
        content_type="application/json",
    )


def redirect(url: str, status: int = 302) -> Response:
    """A redirect to *url* with an empty body."""
    return Response(status=status).with_header("Location", url)
