"""Shared type aliases used across essentio modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Route handler: called as handler(request, response) and returns a response
Handler: TypeAlias = Callable[[Any, Any], Any]

# Middleware: called as mw(request, response, next) and returns a response
MiddlewareFunc: TypeAlias = Callable[[Any, Any, Handler], Any]

# Error handler: receives (request, error?) and returns a response
ErrorHandler: TypeAlias = Callable[..., Any]

# Command handler: receives the parsed Arguments and returns an exit code or None
CommandHandler: TypeAlias = Callable[[Any], Any]
