"""HTTP primitives — immutable headers, query params, request and response."""

from essentio.http.headers import Headers
from essentio.http.query import QueryParams
from essentio.http.request import Request
from essentio.http.response import Response, html, json, redirect, text

__all__ = [
    "Headers",
    "QueryParams",
    "Request",
    "Response",
    "html",
    "json",
    "redirect",
    "text",
]
