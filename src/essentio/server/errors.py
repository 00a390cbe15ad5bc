"""Error handling at the application boundary.

Maps HTTPError exceptions and unexpected failures to Response objects,
using registered error handlers or the defaults below. This is the only
place routing failures are logged.
"""

import inspect
import logging
import traceback

from essentio._internal.types import ErrorHandler
from essentio.errors import HTTPError
from essentio.http.request import Request
from essentio.http.response import Response, text

logger = logging.getLogger("essentio.server")

INTERNAL_ERROR_MESSAGE = "Something went wrong. Please try again later."


def call_error_handler(handler: ErrorHandler, request: Request, exc: Exception) -> Response:
    """Invoke a user-registered error handler with introspected arguments.

    Error handlers may accept zero, one (request), or two (request, exc) args.
    A non-Response return value becomes the body of an HTML response.
    """
    params = list(inspect.signature(handler).parameters.values())

    if len(params) >= 2:
        result = handler(request, exc)
    elif len(params) == 1:
        result = handler(request)
    else:
        result = handler()

    if isinstance(result, Response):
        return result
    return Response().with_body(result)


def _run_error_handler(handler: ErrorHandler, request: Request, exc: Exception) -> Response | None:
    """Call *handler*, or return ``None`` if the handler itself fails."""
    try:
        return call_error_handler(handler, request, exc)
    except Exception:
        logger.exception(
            "Error handler %s failed for %s %s",
            getattr(handler, "__name__", handler),
            request.method,
            request.path,
        )
        return None


def handle_http_error(
    exc: HTTPError,
    request: Request,
    error_handlers: dict[int | type, ErrorHandler],
) -> Response:
    """Map an HTTPError to a Response using registered error handlers."""
    logger.debug("%d %s %s — %s", exc.status, request.method, request.path, exc.detail)

    # Try exact exception type, then status code
    handler = error_handlers.get(type(exc)) or error_handlers.get(exc.status)
    if handler is not None:
        response = _run_error_handler(handler, request, exc)
        if response is None:
            return text(INTERNAL_ERROR_MESSAGE, status=500)
        # Keep the error status unless the handler chose its own
        if response.status == 200:
            response = response.with_status(exc.status)
        return response

    response = Response(body=exc.detail or f"Error {exc.status}", status=exc.status)
    for name, value in exc.headers:
        response = response.with_header(name, value)
    return response


def handle_internal_error(
    exc: Exception,
    request: Request,
    error_handlers: dict[int | type, ErrorHandler],
    debug: bool,
) -> Response:
    """Handle unexpected exceptions as 500 errors."""
    logger.exception("500 %s %s", request.method, request.path)

    handler = error_handlers.get(500) or error_handlers.get(type(exc))
    if handler is not None:
        response = _run_error_handler(handler, request, exc)
        if response is not None:
            return response

    if debug:
        return text("".join(traceback.format_exception(exc)), status=500)

    return text(INTERNAL_ERROR_MESSAGE, status=500)
