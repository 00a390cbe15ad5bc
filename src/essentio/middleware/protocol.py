"""Middleware protocol and Next type alias.

A middleware is any callable matching::

    def my_mw(request: Request, response: Response, next: Next) -> Response: ...

No base class required. The framework checks the shape, not the lineage.
Calling ``next(request, response)`` runs the inner layers and returns
their response; not calling it short-circuits the chain.
"""

from collections.abc import Callable
from typing import Protocol, TypeAlias

from essentio.http.request import Request
from essentio.http.response import Response

# The next step in the chain: an inner middleware or the route handler
Next: TypeAlias = Callable[[Request, Response], Response]


class Middleware(Protocol):
    """Protocol for essentio middleware.

    Accepts both functions and callable objects::

        # Function middleware
        def timing(request: Request, response: Response, next: Next) -> Response:
            start = time.monotonic()
            response = next(request, response)
            elapsed = time.monotonic() - start
            return response.with_header("X-Time", f"{elapsed:.3f}")

        # Class middleware
        class RequireToken:
            def __call__(self, request: Request, response: Response, next: Next) -> Response:
                if request.headers.get("authorization") is None:
                    return response.with_status(401).with_body("Unauthorized")
                return next(request, response)
    """

    def __call__(self, request: Request, response: Response, next: Next) -> Response: ...
