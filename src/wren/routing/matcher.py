"""Forward matching: (method, path) -> MatchResult.

Routes are tried in registration order and the first compatible one
wins. Each route is compared segment by segment:

- literal segments compare case-insensitively
- ``{name}`` placeholders must match their pattern over the whole segment
- a placeholder with a default may be omitted when the request ends there

Captured values are percent-decoded before the pattern test and keep
their case.
"""

from urllib.parse import unquote

from wren.errors import NotFound, RoutingError
from wren.routing.route import MatchResult, RouteSpec, normalize_path
from wren.routing.table import RouteTable


def match(table: RouteTable, method: str, path: str) -> MatchResult:
    """Match a request against *table*.

    Returns a ``MatchResult`` for the first route whose methods and path
    pattern accept the request.
    Raises ``NotFound`` if no route matches.
    Raises ``RoutingError`` if a scanned route has a placeholder without
    a pattern.
    """
    method = method.upper()
    strip = table.config.strip_trailing_slash
    request_path = normalize_path(path, strip_trailing_slash=strip)
    request_segments = request_path.split("/")

    for route in table.all():
        if method not in route.methods:
            continue
        data = _match_route(route, request_path, request_segments, strip)
        if data is not None:
            return MatchResult(route=route, data=data)

    raise NotFound(f"No route matches {method} {path!r}")


def _match_route(
    route: RouteSpec,
    request_path: str,
    request_segments: list[str],
    strip: bool,
) -> dict[str, str] | None:
    """Return extracted data if *route* accepts the path, else ``None``."""
    route_path = normalize_path(route.path, strip_trailing_slash=strip)

    # Literal-only routes: plain string equality
    if not route.params and request_path == route_path:
        return {}

    route_segments = route_path.split("/")
    data: dict[str, str] = {}

    for i, route_seg in enumerate(route_segments):
        request_seg = request_segments[i] if i < len(request_segments) else ""

        if request_seg.lower() == route_seg.lower():
            continue

        placeholder = route.segments[i].param_name
        if placeholder is None:
            return None

        if placeholder not in route.params:
            raise RoutingError(route.name, placeholder)

        value = unquote(request_seg)
        if route.segment_matches(placeholder, value):
            data[placeholder] = value
            continue

        if placeholder in route.defaults and _exhausted(request_segments, i):
            data[placeholder] = route.defaults[placeholder]
            return data

        return None

    # No implicit prefix matching
    if len(request_segments) > len(route_segments):
        return None

    return data


def _exhausted(request_segments: list[str], index: int) -> bool:
    """True if the request has nothing left at or after *index*."""
    if index + 1 < len(request_segments):
        return False
    return index >= len(request_segments) or request_segments[index] == ""
