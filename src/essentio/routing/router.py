"""Ordered route table with first-match-wins lookup.

Routes are appended in registration order and scanned linearly. The
table never reorders or indexes routes, so when two patterns overlap
the one registered first always wins.
"""

from collections.abc import Iterable, Sequence

from essentio._internal.types import Handler, MiddlewareFunc
from essentio.routing.route import PathSegment, Route, RouteMatch


def split_path(path: str) -> list[str]:
    """Split a path into segments after trimming surrounding slashes.

    Empty segments between consecutive slashes are kept, so ``"a//b"``
    yields ``["a", "", "b"]``. The root path yields ``[""]``.
    """
    return path.strip("/").split("/")


def parse_path(path: str) -> tuple[PathSegment, ...]:
    """Compile a declared route path into segments.

    Examples::

        "home"                -> (PathSegment("home"),)
        "/user/:id"           -> (PathSegment("user"), PathSegment(":id", is_param=True, param_name="id"))
        "post/:pid/c/:cid"    -> four segments, two of them params

    Segments are opaque: anything after the leading colon is the
    parameter name, so ``"::id"`` declares a parameter named ``":id"``.
    """
    segments: list[PathSegment] = []
    for part in split_path(path):
        if part.startswith(":"):
            segments.append(PathSegment(value=part, is_param=True, param_name=part[1:]))
        else:
            segments.append(PathSegment(value=part))
    return tuple(segments)


def match_segments(pattern: Sequence[PathSegment], parts: Sequence[str]) -> dict[str, str] | None:
    """Match request path segments against a compiled pattern.

    Returns the captured parameters on success, ``None`` otherwise.
    A parameter never captures an empty segment.
    """
    if len(pattern) != len(parts):
        return None

    params: dict[str, str] = {}
    for seg, part in zip(pattern, parts, strict=True):
        if seg.is_param:
            if not part:
                return None
            params[seg.param_name or ""] = part
        elif seg.value != part:
            return None
    return params


class Router:
    """Append-only table of routes.

    Usage::

        router = Router()
        router.add("GET", "users", list_users)
        router.add("GET", "users/:id", show_user, [auth])
        match = router.find(split_path("/users/42"), "GET")
    """

    __slots__ = ("_routes",)

    def __init__(self) -> None:
        self._routes: list[Route] = []

    def add(
        self,
        method: str,
        path: str,
        handler: Handler,
        middleware: Iterable[MiddlewareFunc] = (),
    ) -> Route:
        """Register a route. Duplicate patterns are accepted as-is."""
        route = Route(
            method=method,
            path=path,
            segments=parse_path(path),
            handler=handler,
            middleware=tuple(middleware),
        )
        self._routes.append(route)
        return route

    @property
    def routes(self) -> tuple[Route, ...]:
        """All registered routes in registration order."""
        return tuple(self._routes)

    def find(self, parts: Sequence[str], method: str | None = None) -> RouteMatch | None:
        """Return the first route matching *parts*.

        When *method* is given only routes registered for that exact
        method are considered; otherwise the method is ignored.
        """
        for route in self._routes:
            if method is not None and route.method != method:
                continue
            params = match_segments(route.segments, parts)
            if params is not None:
                return RouteMatch(route=route, path_params=params)
        return None

    def __len__(self) -> int:
        return len(self._routes)
