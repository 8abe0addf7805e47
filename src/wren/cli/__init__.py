"""Wren CLI — inspect, validate and exercise a route table.

Entry point registered as ``wren`` in ``pyproject.toml``::

    [project.scripts]
    wren = "wren.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``wren`` command."""
    parser = argparse.ArgumentParser(
        prog="wren",
        description="Wren — named request routing with reverse URL generation.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log registration and checks at DEBUG level",
    )
    subparsers = parser.add_subparsers(dest="command")

    target_help = "Import string of a Router or RouteTable (e.g. myapp:router)"

    # -- wren routes ------------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument("target", help=target_help)
    routes_parser.add_argument("--json", action="store_true", help="Print routes as JSON")

    # -- wren check -------------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Validate route table consistency")
    check_parser.add_argument("target", help=target_help)
    check_parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit 1 on warnings as well as errors",
    )

    # -- wren match -------------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Match a method and path")
    match_parser.add_argument("target", help=target_help)
    match_parser.add_argument("method", help="HTTP method (e.g. GET)")
    match_parser.add_argument("path", help="Request path (e.g. /users/42)")

    # -- wren url ---------------------------------------------------------
    url_parser = subparsers.add_parser("url", help="Generate a path for a named route")
    url_parser.add_argument("target", help=target_help)
    url_parser.add_argument("name", help="Route name")
    url_parser.add_argument("data", nargs="*", metavar="KEY=VALUE", help="Parameter values")
    url_parser.add_argument(
        "--query",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Query string pair (repeatable)",
    )
    url_parser.add_argument("--fragment", default=None, help="URL fragment")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "routes":
        from wren.cli._routes import run_routes

        run_routes(args)
    elif args.command == "check":
        from wren.cli._check import run_check

        run_check(args)
    elif args.command == "match":
        from wren.cli._lookup import run_match

        run_match(args)
    elif args.command == "url":
        from wren.cli._lookup import run_url

        run_url(args)
