"""Wren exception hierarchy.

Shared across the route table, matcher, generator, and linter so every
module raises and catches the same types.
"""

from dataclasses import dataclass


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when a route or the route table is set up incorrectly.

    Typically surfaces at startup, while routes are being declared.
    """


class DuplicateName(WrenError):  # noqa: N818 — mirrors the registration contract
    """A route with this name is already registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Route with name {name!r} has already been registered")


class RoutingError(WrenError):
    """A route is malformed in a way only detected while matching.

    Raised mid-scan when a placeholder in the path has no pattern in
    ``params``. Fatal for the ``match()`` call — run ``wren check`` to
    catch these before serving.
    """

    def __init__(self, route: str, param: str) -> None:
        self.route = route
        self.param = param
        super().__init__(f"Route {route!r} has no pattern for parameter {param!r}")


@dataclass(frozen=True)
class HTTPError(WrenError):
    """An error that maps directly to an HTTP status code.

    The owning web layer catches these and renders the matching response.
    """

    status: int
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """404 — no route matched the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class RouteNotFound(NotFound):  # noqa: N818
    """No route is registered under the requested name."""

    def __init__(self, name: str) -> None:
        object.__setattr__(self, "name", name)
        super().__init__(f"Route with name {name!r} not found")


class UrlGenerationError(WrenError):
    """Data supplied for URL generation does not fit the route."""


class MissingParam(UrlGenerationError):  # noqa: N818
    """A required parameter has neither a value nor a default."""

    def __init__(self, route: str, param: str) -> None:
        self.route = route
        self.param = param
        super().__init__(f"Data not provided for parameter {param!r} of route {route!r}")


class InvalidParam(UrlGenerationError):  # noqa: N818
    """A supplied value does not satisfy its parameter's pattern."""

    def __init__(self, route: str, param: str, value: str) -> None:
        self.route = route
        self.param = param
        self.value = value
        super().__init__(
            f"Value {value!r} for parameter {param!r} of route {route!r} "
            "doesn't match the requirements"
        )


class InsufficientParams(UrlGenerationError):  # noqa: N818
    """Required parameters were left unsatisfied after substitution."""

    def __init__(self, route: str, params: tuple[str, ...]) -> None:
        self.route = route
        self.params = params
        super().__init__(
            f"Data wasn't provided for parameters {', '.join(params)} of route {route!r}"
        )
