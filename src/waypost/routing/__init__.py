"""Routing — ordered route table with first-match-wins path matching.

Routes are registered during setup and frozen into an immutable
``RouteTable`` that is passed explicitly to ``dispatch()``.
"""

from waypost.routing.dispatch import dispatch, resolve
from waypost.routing.match import match_path
from waypost.routing.route import Route, RouteMatch, RouteTable

__all__ = [
    "Route",
    "RouteMatch",
    "RouteTable",
    "dispatch",
    "match_path",
    "resolve",
]
