"""Routing — ordered route table with first-match-wins resolution.

Patterns are compiled once when the Router is built; the table is
immutable for the lifetime of the app.
"""

from wren.routing.pattern import CompiledPattern, compile_pattern, normalize_path
from wren.routing.route import PathSegment, Route, RouteMatch
from wren.routing.router import Router

__all__ = [
    "CompiledPattern",
    "PathSegment",
    "Route",
    "RouteMatch",
    "Router",
    "compile_pattern",
    "normalize_path",
]
