"""Essentio — a minimalist web and CLI bootstrap framework.

Maps method + path to handlers, binds ``:name`` path parameters and runs
per-route middleware around the handler, first-declared outermost.

Basic usage::

    from essentio import App, Request

    app = App()

    @app.get("user/:id")
    def show_user(request, response):
        return response.with_body(f"User {request.get('id')}")

    app.handle(Request.create("GET", "/user/42")).body  # "User 42"

``App`` is also an ASGI application and can be served by any ASGI server.
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "Arguments",
    "CommandNotFound",
    "ConfigurationError",
    "Dispatcher",
    "EssentioError",
    "HTTPError",
    "MethodNotAllowed",
    "Middleware",
    "Next",
    "Request",
    "Response",
    "RouteNotFound",
    "Router",
    "get_request",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import essentio`` fast while providing a clean top-level API.
    """
    if name == "App":
        from essentio.app import App

        return App

    if name == "AppConfig":
        from essentio.config import AppConfig

        return AppConfig

    if name == "Arguments":
        from essentio.commands import Arguments

        return Arguments

    if name == "Request":
        from essentio.http.request import Request

        return Request

    if name == "Response":
        from essentio.http.response import Response

        return Response

    if name in ("Router", "Dispatcher"):
        from essentio import routing as _routing

        return getattr(_routing, name)

    if name in ("Middleware", "Next"):
        from essentio.middleware import protocol as _mw

        return getattr(_mw, name)

    if name == "get_request":
        from essentio.context import get_request

        return get_request

    if name in (
        "CommandNotFound",
        "ConfigurationError",
        "EssentioError",
        "HTTPError",
        "MethodNotAllowed",
        "RouteNotFound",
    ):
        from essentio import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
