"""Tests for essentio.routing.route — Route, RouteMatch, PathSegment."""

import pytest

from essentio.routing.route import PathSegment, Route, RouteMatch
from essentio.routing.router import parse_path


def _handler(request, response):
    return response


class TestPathSegment:
    def test_literal(self) -> None:
        seg = PathSegment(value="users")
        assert seg.value == "users"
        assert seg.is_param is False
        assert seg.param_name is None

    def test_param(self) -> None:
        seg = PathSegment(value=":id", is_param=True, param_name="id")
        assert seg.is_param is True
        assert seg.param_name == "id"

    def test_frozen(self) -> None:
        seg = PathSegment(value="users")
        with pytest.raises(AttributeError):
            seg.value = "other"  # type: ignore[misc]


class TestRoute:
    def test_creation(self) -> None:
        route = Route(method="GET", path="users", segments=parse_path("users"), handler=_handler)
        assert route.method == "GET"
        assert route.handler is _handler
        assert route.middleware == ()

    def test_param_names(self) -> None:
        path = "post/:postId/comment/:commentId"
        route = Route(method="GET", path=path, segments=parse_path(path), handler=_handler)
        assert route.param_names == ("postId", "commentId")

    def test_frozen(self) -> None:
        route = Route(method="GET", path="/", segments=parse_path("/"), handler=_handler)
        with pytest.raises(AttributeError):
            route.method = "POST"  # type: ignore[misc]


class TestRouteMatch:
    def test_creation(self) -> None:
        route = Route(method="GET", path="u/:id", segments=parse_path("u/:id"), handler=_handler)
        match = RouteMatch(route=route, path_params={"id": "1"})
        assert match.route is route
        assert match.path_params == {"id": "1"}

    def test_default_params_empty(self) -> None:
        route = Route(method="GET", path="u", segments=parse_path("u"), handler=_handler)
        assert RouteMatch(route=route).path_params == {}
