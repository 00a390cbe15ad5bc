"""HTTP request with a per-request attribute store.

Metadata (method, path, headers, query, body) is frozen at creation.
The attribute store is the one mutable part: it is seeded from the
query string and body, and the dispatcher writes path parameters into
it once a route has matched.
"""

from __future__ import annotations

import json as json_module
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any
from urllib.parse import parse_qsl

from essentio.http.headers import Headers
from essentio.http.query import QueryParams


def parse_body(body: bytes, content_type: str | None) -> dict[str, Any]:
    """Decode form and JSON bodies into a flat dict.

    Only JSON objects and url-encoded forms produce fields; anything
    else (including malformed JSON) yields an empty dict. For repeated
    form keys the last value wins.
    """
    if not body or not content_type:
        return {}

    media_type = content_type.split(";", 1)[0].strip().lower()
    if media_type == "application/json":
        try:
            data = json_module.loads(body)
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}

    if media_type == "application/x-www-form-urlencoded":
        return dict(parse_qsl(body.decode("utf-8", errors="replace"), keep_blank_values=True))

    return {}


@dataclass(frozen=True, slots=True)
class Request:
    """An HTTP request.

    ``get()`` reads the merged attribute store (query, then body, then
    path parameters, later sources overriding earlier ones).
    ``input()`` reads body fields only.
    """

    method: str
    path: str
    headers: Headers = field(default_factory=Headers)
    query: QueryParams = field(default_factory=QueryParams)
    body: bytes = b""
    client: tuple[str, int] | None = None

    # Private: body fields parsed once at creation
    _input: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    # Private: merged attribute store
    # (dict contents are mutable even though the field reference is frozen)
    _attributes: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    # Private: bindings captured from the matched route pattern
    _path_params: dict[str, str] = field(default_factory=dict, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self._attributes:
            self._attributes.update(self.query)
            self._attributes.update(self._input)

    # -- Attribute store --

    def get(self, key: str, default: Any = None) -> Any:
        """Return an attribute from query, body or path params."""
        return self._attributes.get(key, default)

    def input(self, key: str, default: Any = None) -> Any:
        """Return a field from the parsed body only."""
        return self._input.get(key, default)

    def set_attribute(self, key: str, value: Any) -> None:
        """Set *key* in the attribute store, replacing any existing value."""
        self._attributes[key] = value

    def bind_path_params(self, params: Mapping[str, str]) -> None:
        """Attach route parameters. They override query and body values."""
        for name, value in params.items():
            self._path_params[name] = value
            self.set_attribute(name, value)

    @property
    def attributes(self) -> Mapping[str, Any]:
        """Read-only view of the attribute store."""
        return MappingProxyType(self._attributes)

    @property
    def path_params(self) -> Mapping[str, str]:
        """Parameters captured by the matched route, in declaration order."""
        return MappingProxyType(self._path_params)

    # -- Computed properties --

    @property
    def content_type(self) -> str | None:
        """The Content-Type header value."""
        return self.headers.get("content-type")

    @property
    def url(self) -> str:
        """Request path with the query string, if any."""
        if self.query.raw:
            return f"{self.path}?{self.query.raw}"
        return self.path

    def json(self) -> Any:
        """Parse the body as JSON."""
        return json_module.loads(self.body)

    def text(self) -> str:
        """The body as text (UTF-8)."""
        return self.body.decode("utf-8")

    # -- Factories --

    @classmethod
    def create(
        cls,
        method: str,
        target: str,
        *,
        headers: Mapping[str, str] | None = None,
        body: bytes | str = b"",
    ) -> Request:
        """Build a request from a method and a request target.

        *target* may carry a query string (``/search?q=x``).
        """
        path, _, query_string = target.partition("?")
        raw_body = body.encode("utf-8") if isinstance(body, str) else body
        parsed_headers = Headers.from_dict(headers)
        return cls(
            method=method,
            path=path or "/",
            headers=parsed_headers,
            query=QueryParams(query_string),
            body=raw_body,
            _input=parse_body(raw_body, parsed_headers.get("content-type")),
        )

    @classmethod
    def from_asgi(cls, scope: Mapping[str, Any], body: bytes = b"") -> Request:
        """Build a request from an ASGI HTTP scope and its full body."""
        headers = Headers(tuple(scope.get("headers", ())))
        client = scope.get("client")
        return cls(
            method=scope["method"],
            path=scope["path"],
            headers=headers,
            query=QueryParams(scope.get("query_string", b"")),
            body=body,
            client=tuple(client) if client else None,
            _input=parse_body(body, headers.get("content-type")),
        )
