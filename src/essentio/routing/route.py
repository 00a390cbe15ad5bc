"""Route, PathSegment and RouteMatch frozen dataclasses."""

from dataclasses import dataclass, field

from essentio._internal.types import Handler, MiddlewareFunc


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route path.

    Literal:  ``users``  (is_param=False)
    Param:    ``:id``    (is_param=True, param_name="id")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None


@dataclass(frozen=True, slots=True)
class Route:
    """A registered endpoint.

    Created by ``Router.add`` and never mutated afterwards.
    """

    method: str
    path: str
    segments: tuple[PathSegment, ...]
    handler: Handler
    middleware: tuple[MiddlewareFunc, ...] = ()

    @property
    def param_names(self) -> tuple[str, ...]:
        """Parameter names in declaration order."""
        return tuple(s.param_name or "" for s in self.segments if s.is_param)


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route lookup."""

    route: Route
    path_params: dict[str, str] = field(default_factory=dict)
