"""Wren — named request routing with reverse URL generation.

Maps an inbound (method, path) pair to a registered route, extracting
parameter values, and builds concrete paths back from a route name plus
data. Dispatch and I/O belong to the web layer that owns the handlers.

Basic usage::

    from wren import Router

    router = Router()
    router.add_route("index", "/index", "index_handler")
    router.add_route(
        "page", "/{page}", "page_handler",
        params={"page": r"\\d+"}, defaults={"page": 0},
    )
    router.freeze()

    result = router.match("GET", "/42")
    result.name, result.data            # ("page", {"page": "42"})
    router.url_for("page")              # "/"

Declared routes (``@route`` on handlers)::

    from wren.declare import route

    @route("user_post", "/{user}/{post}", params={"user": r"\\w+", "post": r"\\d+"})
    def show_post(request): ...

    router.include(my_views_module)
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "DuplicateName",
    "HTTPError",
    "InsufficientParams",
    "InvalidParam",
    "MatchResult",
    "MissingParam",
    "NotFound",
    "RouteNotFound",
    "RouteSpec",
    "RouteTable",
    "Router",
    "RouterConfig",
    "RoutingError",
    "UrlGenerationError",
    "WrenError",
    "check_route_table",
    "generate",
    "match",
    "route",
]

_ERRORS = frozenset({
    "ConfigurationError",
    "DuplicateName",
    "HTTPError",
    "InsufficientParams",
    "InvalidParam",
    "MissingParam",
    "NotFound",
    "RouteNotFound",
    "RoutingError",
    "UrlGenerationError",
    "WrenError",
})

_ROUTING = frozenset({"MatchResult", "RouteSpec", "RouteTable", "Router", "generate", "match"})


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    if name in _ROUTING:
        from wren import routing as _routing

        return getattr(_routing, name)

    if name == "RouterConfig":
        from wren.config import RouterConfig

        return RouterConfig

    if name in _ERRORS:
        from wren import errors as _errors

        return getattr(_errors, name)

    if name == "route":
        from wren.declare import route

        return route

    if name == "check_route_table":
        from wren.lint import check_route_table

        return check_route_table

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
