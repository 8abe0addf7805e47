"""``wren match`` and ``wren url`` — try the router from the shell.

``wren match myapp:router GET /users/42`` prints the matched route and
its data; ``wren url myapp:router user id=42`` prints a generated path.
Routing failures print ``Error: ...`` to stderr and exit with code 1.
"""

import argparse
import json
import sys

from wren.cli._resolve import load_table
from wren.errors import NotFound, RoutingError, UrlGenerationError
from wren.routing.generator import generate
from wren.routing.matcher import match


def _pairs(items: list[str]) -> dict[str, str]:
    data: dict[str, str] = {}
    for item in items:
        key, sep, value = item.partition("=")
        if not sep or not key:
            print(f"Error: expected key=value, got {item!r}", file=sys.stderr)
            raise SystemExit(2)
        data[key] = value
    return data


def run_match(args: argparse.Namespace) -> None:
    """Match ``args.method`` / ``args.path`` and print the result as JSON."""
    table = load_table(args.target)
    try:
        result = match(table, args.method, args.path)
    except (NotFound, RoutingError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    print(json.dumps({"route": result.name, "data": result.data}, indent=2))


def run_url(args: argparse.Namespace) -> None:
    """Generate and print the path for route ``args.name``."""
    table = load_table(args.target)
    try:
        url = generate(
            table.lookup(args.name),
            _pairs(args.data),
            query=_pairs(args.query) or None,
            fragment=args.fragment,
        )
    except (NotFound, UrlGenerationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    print(url)
