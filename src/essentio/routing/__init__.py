"""Routing — ordered route table, two-pass dispatch, middleware onion.

Routes are registered during setup and scanned in registration order
for every request.
"""

from essentio.routing.dispatch import Dispatcher, compose, dispatch
from essentio.routing.route import PathSegment, Route, RouteMatch
from essentio.routing.router import Router, match_segments, parse_path, split_path

__all__ = [
    "Dispatcher",
    "PathSegment",
    "Route",
    "RouteMatch",
    "Router",
    "compose",
    "dispatch",
    "match_segments",
    "parse_path",
    "split_path",
]
