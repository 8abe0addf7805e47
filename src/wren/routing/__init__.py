"""Routing — named route table with first-match path matching and URL generation.

Routes are registered during setup, in priority order, and the table is
frozen before serving.
"""

from wren.routing.generator import generate
from wren.routing.matcher import match
from wren.routing.route import MatchResult, PathSegment, RouteSpec, parse_path
from wren.routing.router import Router
from wren.routing.table import RouteTable

__all__ = [
    "MatchResult",
    "PathSegment",
    "RouteSpec",
    "RouteTable",
    "Router",
    "generate",
    "match",
    "parse_path",
]
