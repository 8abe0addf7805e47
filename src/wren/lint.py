"""Route table consistency checks.

Validates that every registered route is internally consistent and that
routes do not shadow each other. Read-only: uses nothing but
``RouteTable.all()`` and ``RouteTable.lookup()``, so it can run against a
live, frozen table.

Usage::

    result = check_route_table(router.table)
    for issue in result.issues:
        print(f"{issue.severity.value}: {issue.message}")

    # Or via CLI:
    #   wren check myapp:router

"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from wren.routing.route import RouteSpec, normalize_path, parse_path

if TYPE_CHECKING:
    from wren.routing.table import RouteTable

logger = logging.getLogger("wren.lint")

# ---------------------------------------------------------------------------
# Issue types
# ---------------------------------------------------------------------------


class Severity(Enum):
    """Severity of a route table issue."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True, slots=True)
class RouteIssue:
    """A single issue found while checking the route table."""

    severity: Severity
    category: str
    message: str
    route: str
    param: str | None = None
    details: str | None = None


@dataclass(slots=True)
class CheckResult:
    """Result of a route table check."""

    issues: list[RouteIssue] = field(default_factory=list)
    routes_checked: int = 0

    @property
    def errors(self) -> list[RouteIssue]:
        return [i for i in self.issues if i.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[RouteIssue]:
        return [i for i in self.issues if i.severity == Severity.WARNING]

    @property
    def ok(self) -> bool:
        return not self.errors

    def by_category(self) -> dict[str, list[RouteIssue]]:
        grouped: dict[str, list[RouteIssue]] = defaultdict(list)
        for issue in self.issues:
            grouped[issue.category].append(issue)
        return dict(grouped)

    def summary(self) -> str:
        """Human-readable summary."""
        lines = [f"Checked {self.routes_checked} routes."]
        if self.ok and not self.warnings:
            lines.append("No issues found.")
        elif self.ok:
            lines.append(f"No errors. {len(self.warnings)} warning(s).")
        else:
            lines.append(f"{len(self.errors)} error(s), {len(self.warnings)} warning(s).")
        for issue in self.issues:
            prefix = issue.severity.value.upper()
            lines.append(f"  [{prefix}] {issue.message}")
            if issue.details:
                lines.append(f"           {issue.details}")
        return "\n".join(lines)


# ---------------------------------------------------------------------------
# Per-route checks
# ---------------------------------------------------------------------------


def _check_patterns(route: RouteSpec) -> list[RouteIssue]:
    """Placeholders without a pattern, and patterns without a placeholder."""
    issues: list[RouteIssue] = []
    placeholders = route.placeholders
    for name in placeholders:
        if name not in route.params:
            issues.append(
                RouteIssue(
                    severity=Severity.ERROR,
                    category="missing-pattern",
                    message=f"Route {route.name!r}: placeholder {{{name}}} has no pattern",
                    route=route.name,
                    param=name,
                    details="Matching raises RoutingError when it reaches this route.",
                )
            )
    for name in route.params:
        if name not in placeholders:
            issues.append(
                RouteIssue(
                    severity=Severity.INFO,
                    category="unused-param",
                    message=f"Route {route.name!r}: parameter {name!r} does not appear in {route.path!r}",
                    route=route.name,
                    param=name,
                )
            )
    return issues


def _check_defaults(route: RouteSpec) -> list[RouteIssue]:
    """Defaults for undeclared parameters, and defaults failing their own pattern."""
    issues: list[RouteIssue] = []
    for name, value in route.defaults.items():
        if name not in route.params:
            issues.append(
                RouteIssue(
                    severity=Severity.ERROR,
                    category="unknown-default",
                    message=f"Route {route.name!r}: default given for undeclared parameter {name!r}",
                    route=route.name,
                    param=name,
                )
            )
        elif not route.value_matches(name, value):
            issues.append(
                RouteIssue(
                    severity=Severity.WARNING,
                    category="invalid-default",
                    message=f"Route {route.name!r}: default for {name!r} doesn't match its pattern",
                    route=route.name,
                    param=name,
                    details=f"Expected {route.params[name]!r}, got {value!r}",
                )
            )
    return issues


def _check_trailing_defaults(route: RouteSpec, strip: bool) -> list[RouteIssue]:
    """Defaulted placeholders must come after every required segment."""
    issues: list[RouteIssue] = []
    defaulted: str | None = None
    for segment in parse_path(normalize_path(route.path, strip_trailing_slash=strip)):
        name = segment.param_name
        if name is not None and name in route.defaults:
            defaulted = defaulted or name
            continue
        if defaulted is None or (name is None and not segment.value):
            continue
        what = f"placeholder {{{name}}}" if name is not None else f"segment {segment.value!r}"
        issues.append(
            RouteIssue(
                severity=Severity.ERROR,
                category="non-trailing-default",
                message=(
                    f"Route {route.name!r}: {what} follows defaulted placeholder {{{defaulted}}}"
                ),
                route=route.name,
                param=name,
                details="Defaults only apply to trailing placeholders; requests omitting "
                f"{{{defaulted}}} will never match this route.",
            )
        )
    return issues


# ---------------------------------------------------------------------------
# Table-wide checks
# ---------------------------------------------------------------------------


def _effective_path(route: RouteSpec, strip: bool) -> tuple[str, ...]:
    """Path key two routes share when one can answer the other's requests.

    Defaulted placeholders are dropped, literals are case-folded and other
    placeholders are reduced to their pattern. A trailing slash that
    survives normalization stays part of the key.
    """
    path = normalize_path(route.path, strip_trailing_slash=strip)
    key: list[str] = []
    for segment in parse_path(path):
        name = segment.param_name
        if name is None:
            if segment.value:
                key.append(segment.value.lower())
        elif name not in route.defaults:
            key.append("{" + route.params.get(name, "") + "}")
    if len(path) > 1 and path.endswith("/"):
        key.append("/")
    return tuple(key)


def _check_duplicate_paths(table: RouteTable, routes: tuple[RouteSpec, ...]) -> list[RouteIssue]:
    issues: list[RouteIssue] = []
    strip = table.config.strip_trailing_slash
    seen: dict[tuple[str, ...], list[str]] = defaultdict(list)
    for route in routes:
        key = _effective_path(route, strip)
        for earlier_name in seen[key]:
            earlier = table.lookup(earlier_name)
            shared = route.methods & earlier.methods
            if not shared:
                continue
            issues.append(
                RouteIssue(
                    severity=Severity.WARNING,
                    category="duplicate-path",
                    message=(
                        f"Route {route.name!r} matches the same path as earlier route "
                        f"{earlier.name!r} for {', '.join(sorted(shared))}"
                    ),
                    route=route.name,
                    details=f"{earlier.path!r} is registered first and wins; "
                    f"{route.path!r} is shadowed.",
                )
            )
            break
        seen[key].append(route.name)
    return issues


def check_route_table(table: RouteTable) -> CheckResult:
    """Validate every route in *table*.

    Checks:
    1. **Patterns**: every placeholder has a pattern (error); every
       pattern has a placeholder (info).
    2. **Defaults**: every default names a declared parameter (error)
       and satisfies that parameter's pattern (warning).
    3. **Trailing defaults**: nothing required follows a defaulted
       placeholder (error).
    4. **Shadowing**: no two routes with overlapping methods share an
       effective path (warning).
    """
    routes = table.all()
    result = CheckResult(routes_checked=len(routes))

    for route in routes:
        result.issues.extend(_check_patterns(route))
        result.issues.extend(_check_defaults(route))
        result.issues.extend(_check_trailing_defaults(route, table.config.strip_trailing_slash))
    result.issues.extend(_check_duplicate_paths(table, routes))

    logger.debug(
        "Checked %d routes: %d error(s), %d warning(s)",
        result.routes_checked,
        len(result.errors),
        len(result.warnings),
    )
    return result
