"""``wren routes`` — list registered routes.

Prints every route in match priority order with name, path, methods,
and handler.
"""

import argparse
import json

from wren.cli._resolve import load_table


def run_routes(args: argparse.Namespace) -> None:
    """List registered routes for ``args.target``."""
    table = load_table(args.target)
    routes = table.all()

    if args.json:
        print(json.dumps([r.to_dict() for r in routes], indent=2, default=str))
        return

    if not routes:
        print("No routes registered.")
        return

    # Build rows: (name, path, methods_str, handler)
    rows: list[tuple[str, str, str, str]] = []
    for route in routes:
        handler = route.to_dict()["handler"]
        if isinstance(handler, tuple):
            handler = "::".join(map(str, handler))
        rows.append((route.name, route.path, ", ".join(sorted(route.methods)), str(handler)))

    max_name = max(max(len(r[0]) for r in rows), 4)  # "NAME" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header
    max_methods = max(max(len(r[2]) for r in rows), 7)  # "METHODS" header

    fmt = f"{{:<{max_name}}}  {{:<{max_path}}}  {{:<{max_methods}}}  {{}}"
    print(fmt.format("NAME", "PATH", "METHODS", "HANDLER"))
    sep_len = max_name + max_path + max_methods + 6 + max(len(r[3]) for r in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))
