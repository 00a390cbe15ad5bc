"""Dispatcher — resolves one request to one route and runs its chain.

Lookup is two-pass: an exact method+path scan first, then a path-only
scan that only decides between 405 and 404. Neither pass logs; routing
failures are raised for the application boundary to render.
"""

from collections.abc import Sequence

from essentio._internal.types import Handler, MiddlewareFunc
from essentio.errors import MethodNotAllowed, RouteNotFound
from essentio.http.request import Request
from essentio.http.response import Response
from essentio.routing.route import RouteMatch
from essentio.routing.router import Router, split_path


def compose(handler: Handler, middleware: Sequence[MiddlewareFunc]) -> Handler:
    """Wrap *handler* in *middleware*, first entry outermost.

    Built innermost-first: the layer closest to the handler is created
    before the ones around it. For ``[m1, m2]`` the call order is
    ``m1 -> m2 -> handler`` and post-processing unwinds ``m2`` then ``m1``.
    """
    chain = handler
    for mw in reversed(middleware):
        inner = chain

        def link(
            request: Request,
            response: Response,
            _mw: MiddlewareFunc = mw,
            _next: Handler = inner,
        ) -> Response:
            return _mw(request, response, _next)

        chain = link
    return chain


class Dispatcher:
    """Runs requests against a route table.

    The table is only read here. Each call binds parameters onto its own
    request and seeds the chain with *default_response*. Responses are
    immutable, so one seed serves every dispatch.
    """

    __slots__ = ("default_response", "router")

    def __init__(self, router: Router, default_response: Response | None = None) -> None:
        self.router = router
        self.default_response = default_response or Response()

    def resolve(self, method: str, path: str) -> RouteMatch:
        """Find the route for *method* and *path* or raise a routing error."""
        parts = split_path(path)

        match = self.router.find(parts, method)
        if match is not None:
            return match

        if self.router.find(parts) is not None:
            raise MethodNotAllowed()

        raise RouteNotFound()

    def dispatch(self, request: Request, response: Response | None = None) -> Response:
        """Resolve *request*, bind its path params and invoke the chain.

        *response* seeds the chain; ``default_response`` is used when
        it is omitted.
        """
        match = self.resolve(request.method, request.path)

        request.bind_path_params(match.path_params)

        chain = compose(match.route.handler, match.route.middleware)
        if response is None:
            response = self.default_response
        return chain(request, response)


def dispatch(router: Router, request: Request) -> Response:
    """Shortcut for ``Dispatcher(router).dispatch(request)``."""
    return Dispatcher(router).dispatch(request)
