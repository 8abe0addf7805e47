"""Decorator-driven route declaration.

Handlers declare their routes where they are defined::

    from wren.declare import route

    @route("page", "/{page}", params={"page": r"\\d+"}, defaults={"page": 0})
    def list_pages(request): ...

    class Posts:
        @route("user_post", "/{user}/{post}", params={"user": r"\\w+", "post": r"\\d+"})
        def show(self, request): ...

and :func:`collect_routes` turns modules, classes, instances or plain
functions into ``RouteSpec`` records ready for ``RouteTable.register_many``.
Decorating never registers anything by itself.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import ModuleType
from typing import Any, TypeVar

from wren.routing.route import DEFAULT_METHODS, RouteSpec

logger = logging.getLogger("wren.declare")

F = TypeVar("F", bound=Callable[..., Any])

# Attribute holding the declarations attached to a handler
ROUTES_ATTR = "__wren_routes__"


@dataclass(frozen=True, slots=True)
class RouteDeclaration:
    """A route declared on a handler, not yet bound to a handler reference."""

    name: str
    path: str
    methods: frozenset[str] | None = None
    params: Mapping[str, str] = field(default_factory=dict)
    defaults: Mapping[str, object] = field(default_factory=dict)

    def to_spec(self, handler: Any, default_methods: frozenset[str] = DEFAULT_METHODS) -> RouteSpec:
        return RouteSpec(
            name=self.name,
            path=self.path,
            handler=handler,
            methods=self.methods if self.methods is not None else default_methods,
            params=dict(self.params),
            defaults=dict(self.defaults),  # type: ignore[arg-type]
        )


def route(
    name: str,
    path: str,
    *,
    methods: Iterable[str] | None = None,
    params: Mapping[str, str] | None = None,
    defaults: Mapping[str, object] | None = None,
) -> Callable[[F], F]:
    """Declare a route on a function or method.

    Stackable: a handler may carry several routes. They are collected
    in the order they appear in the source, top to bottom.
    """
    if isinstance(methods, str):
        methods = (methods,)
    declaration = RouteDeclaration(
        name=name,
        path=path,
        methods=frozenset(m.upper() for m in methods) if methods is not None else None,
        params=dict(params or {}),
        defaults=dict(defaults or {}),
    )

    def decorator(func: F) -> F:
        declared: tuple[RouteDeclaration, ...] = getattr(func, ROUTES_ATTR, ())
        # Decorators apply bottom-up; prepend to keep source order
        setattr(func, ROUTES_ATTR, (declaration, *declared))
        return func

    return decorator


def declarations_of(obj: Any) -> tuple[RouteDeclaration, ...]:
    """Routes declared on *obj* via :func:`route`, if any."""
    if isinstance(obj, (staticmethod, classmethod)):
        obj = obj.__func__
    return tuple(getattr(obj, ROUTES_ATTR, ()))


def collect_routes(
    *sources: Any,
    default_methods: frozenset[str] = DEFAULT_METHODS,
) -> list[RouteSpec]:
    """Build ``RouteSpec`` records from declared handlers.

    Each source may be a module, a class, an instance or a function.
    Module members are visited in definition order and only members
    defined in that module are considered (re-exports are skipped).

    The handler reference is the function itself for plain functions,
    and ``("module.Class", "method")`` for methods defined on a class.
    """
    specs = [
        declaration.to_spec(handler, default_methods)
        for source in sources
        for handler, declaration in _walk(source)
    ]
    logger.debug("Collected %d declared routes from %d sources", len(specs), len(sources))
    return specs


def _walk(source: Any) -> Iterator[tuple[Any, RouteDeclaration]]:
    if isinstance(source, ModuleType):
        yield from _walk_module(source)
    elif inspect.isclass(source):
        yield from _walk_class(source)
    elif inspect.isfunction(source) or inspect.ismethod(source):
        for declaration in declarations_of(source):
            yield source, declaration
    else:
        yield from _walk_class(type(source))


def _walk_module(module: ModuleType) -> Iterator[tuple[Any, RouteDeclaration]]:
    for obj in list(vars(module).values()):
        if getattr(obj, "__module__", None) != module.__name__:
            continue
        if inspect.isclass(obj):
            yield from _walk_class(obj)
        elif inspect.isfunction(obj):
            for declaration in declarations_of(obj):
                yield obj, declaration


def _walk_class(cls: type) -> Iterator[tuple[Any, RouteDeclaration]]:
    class_ref = f"{cls.__module__}.{cls.__qualname__}"
    # Base classes first so overrides keep their declared position
    names: dict[str, None] = {}
    for klass in reversed(cls.__mro__):
        for attr in vars(klass):
            names.setdefault(attr, None)

    for attr in names:
        member = inspect.getattr_static(cls, attr)
        for declaration in declarations_of(member):
            yield (class_ref, attr), declaration
