"""RouteSpec, MatchResult and PathSegment frozen dataclasses."""

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from wren.errors import ConfigurationError

# A placeholder occupies a whole segment: "{name}"
PLACEHOLDER_RE = re.compile(r"^\{(\w+)\}$")

DEFAULT_METHODS: frozenset[str] = frozenset({"GET", "HEAD"})


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route path.

    Literal:     ``users``  (is_param=False)
    Placeholder: ``{id}``   (is_param=True, param_name="id")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None


def split_path(path: str, *, strip_trailing_slash: bool = True) -> list[str]:
    """Split a path on ``/`` keeping empty segments.

    ``"/users/42"`` becomes ``["", "users", "42"]``. With
    *strip_trailing_slash* one trailing ``/`` is dropped first, except
    for the root path ``"/"``.
    """
    return normalize_path(path, strip_trailing_slash=strip_trailing_slash).split("/")


def normalize_path(path: str, *, strip_trailing_slash: bool = True) -> str:
    if strip_trailing_slash and len(path) > 1 and path.endswith("/"):
        return path[:-1]
    return path


def parse_path(path: str) -> tuple[PathSegment, ...]:
    """Parse a route path pattern into segments.

    Examples::

        "/users"      -> (PathSegment(""), PathSegment("users"))
        "/users/{id}" -> (PathSegment(""), PathSegment("users"),
                          PathSegment("{id}", is_param=True, param_name="id"))

    Only whole-segment placeholders count; ``"v{n}"`` stays a literal.
    """
    segments: list[PathSegment] = []
    for part in path.split("/"):
        m = PLACEHOLDER_RE.match(part)
        if m:
            segments.append(PathSegment(value=part, is_param=True, param_name=m.group(1)))
        else:
            segments.append(PathSegment(value=part))
    return tuple(segments)


def _compile(route: str, params: Mapping[str, str], flags: int) -> dict[str, re.Pattern[str]]:
    compiled: dict[str, re.Pattern[str]] = {}
    for param, pattern in params.items():
        try:
            compiled[param] = re.compile(pattern, flags)
        except re.error as exc:
            msg = f"Route {route!r}: invalid pattern {pattern!r} for parameter {param!r}: {exc}"
            raise ConfigurationError(msg) from exc
    return compiled


def _handler_repr(handler: Any) -> Any:
    if isinstance(handler, (str, tuple)):
        return handler
    qualname = getattr(handler, "__qualname__", None)
    module = getattr(handler, "__module__", None)
    if qualname and module:
        return f"{module}.{qualname}"
    return "<callable>" if callable(handler) else repr(handler)


@dataclass(frozen=True, slots=True)
class RouteSpec:
    """A named route: path pattern, methods, parameter rules and handler.

    Immutable once created. ``params`` maps each placeholder to a regex
    fragment that must match the *whole* segment; ``defaults`` supplies
    values for trailing placeholders the request may omit.

    Usage::

        RouteSpec(
            name="page",
            path="/{page}",
            handler=list_pages,
            params={"page": r"\\d+"},
            defaults={"page": "0"},
        )

    Method tokens are upper-cased on creation. Default values are stored
    as strings.
    """

    name: str
    path: str
    handler: Any
    methods: frozenset[str] = DEFAULT_METHODS
    params: Mapping[str, str] = field(default_factory=dict, hash=False)
    defaults: Mapping[str, str] = field(default_factory=dict, hash=False)

    segments: tuple[PathSegment, ...] = field(init=False, repr=False, compare=False, hash=False)
    _matchers: dict[str, re.Pattern[str]] = field(
        init=False, repr=False, compare=False, hash=False
    )
    _validators: dict[str, re.Pattern[str]] = field(
        init=False, repr=False, compare=False, hash=False
    )

    def __post_init__(self) -> None:
        if not self.name:
            msg = f"Route for path {self.path!r} needs a non-empty name"
            raise ConfigurationError(msg)

        methods: Iterable[str] = self.methods
        if isinstance(methods, str):
            methods = (methods,)
        object.__setattr__(self, "methods", frozenset(m.upper() for m in methods))

        params = dict(self.params or {})
        defaults = {k: str(v) for k, v in (self.defaults or {}).items()}
        object.__setattr__(self, "params", MappingProxyType(params))
        object.__setattr__(self, "defaults", MappingProxyType(defaults))
        object.__setattr__(self, "segments", parse_path(self.path))
        object.__setattr__(self, "_matchers", _compile(self.name, params, 0))
        object.__setattr__(self, "_validators", _compile(self.name, params, re.IGNORECASE))

    @property
    def placeholders(self) -> tuple[str, ...]:
        """Placeholder names in pattern order."""
        return tuple(s.param_name for s in self.segments if s.param_name is not None)

    @property
    def has_params(self) -> bool:
        return bool(self.params)

    @property
    def has_defaults(self) -> bool:
        return bool(self.defaults)

    def segment_matches(self, param: str, value: str) -> bool:
        """Whole-segment, case-sensitive test used when matching requests."""
        return self._matchers[param].fullmatch(value) is not None

    def value_matches(self, param: str, value: str) -> bool:
        """Whole-value, case-insensitive test used when generating URLs."""
        return self._validators[param].fullmatch(value) is not None

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly representation for debugging and documentation."""
        return {
            "name": self.name,
            "path": self.path,
            "methods": sorted(self.methods),
            "handler": _handler_repr(self.handler),
            "params": dict(self.params),
            "defaults": dict(self.defaults),
        }


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Result of a successful route match."""

    route: RouteSpec
    data: dict[str, str]

    @property
    def name(self) -> str:
        return self.route.name

    @property
    def handler(self) -> Any:
        return self.route.handler
