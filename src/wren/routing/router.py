"""Router — a route table bundled with its config and both algorithms.

Each Router owns its own table; there is no process-wide registry.
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from wren.config import RouterConfig
from wren.errors import ConfigurationError
from wren.routing.generator import generate
from wren.routing.matcher import match
from wren.routing.route import MatchResult, RouteSpec
from wren.routing.table import RouteTable

# Positional order accepted by insert_config() for tuple records
_RECORD_FIELDS = ("name", "path", "handler", "methods", "params", "defaults")


class Router:
    """Named routes with forward matching and reverse URL generation.

    Usage::

        router = Router()
        router.add_route("page", "/{page}", list_pages,
                         params={"page": r"\\d+"}, defaults={"page": 0})
        router.freeze()

        result = router.match("GET", "/42")      # result.data == {"page": "42"}
        router.url_for("page", {"page": 5})       # "/5"
    """

    __slots__ = ("_table",)

    def __init__(self, config: RouterConfig | None = None) -> None:
        self._table = RouteTable(config)

    @property
    def config(self) -> RouterConfig:
        return self._table.config

    @property
    def table(self) -> RouteTable:
        return self._table

    @property
    def routes(self) -> tuple[RouteSpec, ...]:
        """All registered routes, in registration (match priority) order."""
        return self._table.all()

    def add_route(
        self,
        name: str,
        path: str,
        handler: Any,
        methods: Iterable[str] | None = None,
        params: Mapping[str, str] | None = None,
        defaults: Mapping[str, object] | None = None,
    ) -> RouteSpec:
        """Create a ``RouteSpec`` and register it.

        *methods* falls back to ``config.default_methods``.
        """
        if methods is None:
            methods = self.config.default_methods
        spec = RouteSpec(
            name=name,
            path=path,
            handler=handler,
            methods=methods,  # type: ignore[arg-type]
            params=params or {},
            defaults=defaults or {},  # type: ignore[arg-type]
        )
        return self._table.register(spec)

    def add_routes(self, *specs: RouteSpec) -> None:
        """Register prebuilt routes in order (sequential, not atomic)."""
        self._table.register_many(specs)

    def include(self, *sources: Any) -> None:
        """Register every route declared with ``@wren.declare.route`` in *sources*."""
        from wren.declare import collect_routes

        self._table.register_many(
            collect_routes(*sources, default_methods=self.config.default_methods)
        )

    def insert_config(self, records: Iterable[Mapping[str, Any] | Sequence[Any]]) -> None:
        """Register routes from plain records.

        A record is either a mapping with ``name``, ``path``, ``handler``
        and optional ``methods``, ``params``, ``defaults`` keys, or a
        sequence in that same positional order.
        """
        for record in records:
            if isinstance(record, Mapping):
                kwargs = dict(record)
            else:
                if len(record) > len(_RECORD_FIELDS):
                    msg = f"Route record has too many fields: {record!r}"
                    raise ConfigurationError(msg)
                kwargs = dict(zip(_RECORD_FIELDS, record, strict=False))
            try:
                self.add_route(**kwargs)
            except TypeError as exc:
                msg = f"Malformed route record {record!r}: {exc}"
                raise ConfigurationError(msg) from exc

    def has_route(self, name: str) -> bool:
        return self._table.has(name)

    def get_route(self, name: str) -> RouteSpec:
        return self._table.lookup(name)

    def freeze(self) -> None:
        self._table.freeze()

    def match(self, method: str, path: str) -> MatchResult:
        return match(self._table, method, path)

    def url_for(
        self,
        name: str,
        data: Mapping[str, object] | None = None,
        *,
        query: Mapping[str, object] | None = None,
        fragment: str | None = None,
    ) -> str:
        """Generate the path for the route registered as *name*."""
        return generate(self._table.lookup(name), data, query=query, fragment=fragment)

    def __repr__(self) -> str:
        return f"<Router {len(self._table)} routes>"
