"""Essentio exception hierarchy.

Shared across Router, Dispatcher, App, and middleware so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class EssentioError(Exception):
    """Base for all essentio-specific errors."""


class ConfigurationError(EssentioError):
    """Raised when the app is set up incorrectly.

    Typically raised when routes or middleware are registered after the
    app has frozen on its first request.
    """


@dataclass(frozen=True, slots=True)
class HTTPError(EssentioError):
    """An error that maps directly to an HTTP status code.

    Raised by the dispatcher, middleware, or handlers. ``App.handle``
    catches these and turns them into a response carrying ``status``.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class RouteNotFound(HTTPError):  # noqa: N818
    """404 — no registered pattern matches the request path under any method."""

    def __init__(self, detail: str = "Route not found") -> None:
        super().__init__(status=404, detail=detail)


class MethodNotAllowed(HTTPError):  # noqa: N818
    """405 — a pattern matches the path, but not for this HTTP method."""

    def __init__(self, detail: str = "Method not allowed") -> None:
        super().__init__(status=405, detail=detail)


class CommandNotFound(EssentioError):  # noqa: N818
    """No command is registered under the requested name."""

    def __init__(self, name: str, available: tuple[str, ...] = ()) -> None:
        self.name = name
        self.available = available
        if name:
            msg = f"Unknown command {name!r}"
        else:
            msg = "No command given"
        if available:
            msg = f"{msg}. Available: {', '.join(available)}"
        super().__init__(msg)
