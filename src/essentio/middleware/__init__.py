"""Middleware — Protocol-based, no inheritance required.

A middleware is any callable matching:
    def mw(request: Request, response: Response, next: Next) -> Response

Route middleware is passed to ``add()`` / the route decorators; app-wide
middleware is registered with ``App.add_middleware``.
"""

from essentio.middleware.protocol import Middleware, Next

__all__ = [
    "Middleware",
    "Next",
]
