"""Request-scoped context via ContextVar.

Provides ``request_var``, the ``Request`` currently being handled by
``App.handle`` on this thread or task. It is set before dispatch and
reset afterwards; outside a request ``get_request()`` raises
``LookupError``. ``arguments_var`` plays the same role for the
command run by ``App.run_command``.

``ContextVar`` is task-local under asyncio and thread-local otherwise,
so concurrent requests never see each other's request.
"""

from contextvars import ContextVar
from typing import Any

from essentio.commands import Arguments
from essentio.http.request import Request

request_var: ContextVar[Request] = ContextVar("essentio_request")
"""The current request. Set by ``App.handle`` before dispatch."""

arguments_var: ContextVar[Arguments] = ContextVar("essentio_arguments")
"""The current command arguments. Set by ``App.run_command``."""


def get_request() -> Request:
    """Return the current request.

    Raises ``LookupError`` if called outside a request context.
    """
    return request_var.get()


def request_value(key: str, default: Any = None) -> Any:
    """Read *key* from the current request's attribute store."""
    return get_request().get(key, default)


def get_arguments() -> Arguments:
    """Return the arguments of the running command.

    Raises ``LookupError`` if called outside a command.
    """
    return arguments_var.get()


def argument_value(key: str | int, default: Any = None) -> Any:
    """Read a named (or, for an int *key*, positional) command argument."""
    return get_arguments().get(key, default)
