"""Ordered route table keyed by unique route name.

Registration order is match priority: the first compatible route wins,
so routes must be registered from most to least specific.
"""

import logging
from collections.abc import Iterable, Iterator

from wren.config import RouterConfig
from wren.errors import ConfigurationError, DuplicateName, RouteNotFound
from wren.routing.route import RouteSpec

logger = logging.getLogger("wren.routing")


class RouteTable:
    """Named routes in registration order.

    Built during a single-writer setup phase, then read concurrently by
    ``match()`` and ``generate()``. Call :meth:`freeze` once setup is
    done; further registration raises ``ConfigurationError``.

    Without an explicit *config* the table reads ``WREN_*`` environment
    variables (see :meth:`RouterConfig.from_env`).

    Usage::

        table = RouteTable()
        table.register(RouteSpec("index", "/index", handler))
        table.freeze()
        table.lookup("index")
    """

    __slots__ = ("_config", "_frozen", "_routes")

    def __init__(self, config: RouterConfig | None = None) -> None:
        self._config = config or RouterConfig.from_env()
        self._routes: dict[str, RouteSpec] = {}
        self._frozen = False

    @property
    def config(self) -> RouterConfig:
        return self._config

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(self, spec: RouteSpec) -> RouteSpec:
        """Append *spec* to the table.

        Raises ``DuplicateName`` if the name is taken (the table is left
        unchanged), and ``ConfigurationError`` if the table is frozen or
        the route uses a method outside ``config.allowed_methods``.
        """
        if self._frozen:
            msg = f"Cannot register route {spec.name!r}: the route table is frozen."
            raise ConfigurationError(msg)

        if spec.name in self._routes:
            raise DuplicateName(spec.name)

        allowed = self._config.allowed_methods
        if allowed is not None and not spec.methods <= allowed:
            unsupported = ", ".join(sorted(spec.methods - allowed))
            msg = f"Route {spec.name!r} uses unsupported methods: {unsupported}"
            raise ConfigurationError(msg)

        self._routes[spec.name] = spec
        logger.debug(
            "Registered route %s %s [%s]", spec.name, spec.path, ", ".join(sorted(spec.methods))
        )
        return spec

    def register_many(self, specs: Iterable[RouteSpec]) -> None:
        """Register *specs* in order.

        Sequential, not atomic: the first failure propagates and routes
        registered before it stay in the table.
        """
        for spec in specs:
            self.register(spec)

    def lookup(self, name: str) -> RouteSpec:
        """Return the route registered as *name* or raise ``RouteNotFound``."""
        try:
            return self._routes[name]
        except KeyError:
            raise RouteNotFound(name) from None

    def has(self, name: str) -> bool:
        return name in self._routes

    def all(self) -> tuple[RouteSpec, ...]:
        """Snapshot of every route, in registration order."""
        return tuple(self._routes.values())

    def names(self) -> tuple[str, ...]:
        return tuple(self._routes)

    def freeze(self) -> None:
        """End the setup phase. No more routes can be registered."""
        if not self._frozen:
            self._frozen = True
            logger.debug("Route table frozen with %d routes", len(self._routes))

    def __contains__(self, name: object) -> bool:
        return name in self._routes

    def __iter__(self) -> Iterator[RouteSpec]:
        return iter(self.all())

    def __len__(self) -> int:
        return len(self._routes)

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "open"
        return f"<RouteTable {len(self._routes)} routes, {state}>"
