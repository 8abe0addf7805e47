"""Route table import resolution — resolves ``"module:attribute"`` strings.

Shared utility used by every ``wren`` subcommand to locate the route
table from a user-supplied import string.
"""

import importlib
import sys

from wren.routing.router import Router
from wren.routing.table import RouteTable


def resolve_table(import_string: str) -> RouteTable:
    """Resolve an import string to a ``RouteTable``.

    Accepts ``"module:attribute"`` format.  When the attribute portion
    is omitted, defaults to ``"router"`` (e.g. ``"myapp"`` resolves to
    ``myapp.router``).

    The attribute may be a ``Router``, a ``RouteTable``, or a
    zero-argument factory returning either.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is neither a Router nor a RouteTable.

    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "router"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    # Support factory functions
    if callable(obj) and not isinstance(obj, (Router, RouteTable)):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if isinstance(obj, Router):
        return obj.table
    if isinstance(obj, RouteTable):
        return obj

    msg = f"{import_string!r} resolved to {type(obj).__name__}, not a wren Router or RouteTable"
    raise TypeError(msg)


def load_table(import_string: str) -> RouteTable:
    """Like :func:`resolve_table`, but exits 1 with a message on failure."""
    try:
        return resolve_table(import_string)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
