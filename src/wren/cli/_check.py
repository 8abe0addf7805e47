"""``wren check`` — route table consistency validation command.

Resolves an import string to a route table and runs the linter,
printing results to stdout.  Exits with code 1 if errors are found.
"""

import argparse

from wren.cli._resolve import load_table
from wren.lint import check_route_table


def run_check(args: argparse.Namespace) -> None:
    """Validate the route table named by ``args.target``."""
    result = check_route_table(load_table(args.target))
    print(result.summary())
    if not result.ok or (args.strict and result.warnings):
        raise SystemExit(1)
