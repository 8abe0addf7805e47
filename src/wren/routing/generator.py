"""Reverse routing: (route, data) -> concrete path.

Parameters are processed in their declared order. Supplied values are
validated and percent-encoded one at a time; the literal skeleton of the
pattern is left untouched. The first parameter that falls back to its
default truncates the path right before its placeholder, so defaulted
parameters must be trailing.
"""

from collections.abc import Mapping
from urllib.parse import quote, urlencode

from wren.errors import InsufficientParams, InvalidParam, MissingParam
from wren.routing.route import RouteSpec


def generate(
    route: RouteSpec,
    data: Mapping[str, object] | None = None,
    *,
    query: Mapping[str, object] | None = None,
    fragment: str | None = None,
) -> str:
    """Build the path for *route* from *data*.

    Values are converted with ``str()``. Keys that are not parameters of
    the route are ignored. *query* is appended as ``?k=v&...`` and
    *fragment* as ``#fragment``.

    Raises ``MissingParam`` when a parameter has neither a value nor a
    default, ``InvalidParam`` when a value fails its pattern, and
    ``InsufficientParams`` when required parameters remain unsatisfied.
    """
    data = data or {}
    url = route.path
    satisfied: set[str] = set()

    for param in route.params:
        if param not in data and param not in route.defaults:
            raise MissingParam(route.name, param)

        if param in data:
            value = str(data[param])
            if not route.value_matches(param, value):
                raise InvalidParam(route.name, param, value)
            url = url.replace(f"{{{param}}}", quote(value, safe=""))
            satisfied.add(param)
            continue

        # Defaulted: drop this placeholder and everything after it
        cut = url.find(f"{{{param}}}")
        if cut != -1:
            url = url[:cut]
        break

    required = [p for p in route.params if p not in route.defaults]
    missing = tuple(p for p in required if p not in satisfied)
    if missing:
        raise InsufficientParams(route.name, missing)

    if query:
        url += "?" + urlencode({k: str(v) for k, v in query.items()})
    if fragment:
        url += "#" + quote(fragment, safe="")
    return url
