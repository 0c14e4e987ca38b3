"""``waypost routes`` — print the route table in match order."""

import argparse
import sys

from waypost.cli._resolve import resolve_app
from waypost.routing.route import RouteTable


def format_routes(table: RouteTable) -> str:
    """Render *table* as a METHODS / PATTERN / HANDLERS text table.

    Routes that can never match because an earlier pattern covers them
    are marked ``(unreachable)``.
    """
    shadowed = {id(later) for _, later in table.shadowed()}

    rows: list[tuple[str, str, str]] = []
    for route in table:
        methods = ", ".join(route.methods)
        handlers = ", ".join(getattr(h, "__name__", repr(h)) for h in route.handlers.values())
        if route.name:
            handlers = f"{handlers} ({route.name})"
        if id(route) in shadowed:
            handlers = f"{handlers} (unreachable)"
        rows.append((methods, route.pattern, handlers))

    width_methods = max([len("METHODS"), *(len(r[0]) for r in rows)])
    width_pattern = max([len("PATTERN"), *(len(r[1]) for r in rows)])

    fmt = f"{{:<{width_methods}}}  {{:<{width_pattern}}}  {{}}"
    lines = [fmt.format("METHODS", "PATTERN", "HANDLERS")]
    sep_len = width_methods + width_pattern + 4 + max((len(r[2]) for r in rows), default=8)
    lines.append("-" * min(sep_len, 80))
    lines.extend(fmt.format(*row) for row in rows)
    return "\n".join(lines)


def run_routes(args: argparse.Namespace) -> None:
    """List the routes of the app named by ``args.app``."""
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    table = app.routes
    if not table:
        print("No routes registered.")
        return

    print(format_routes(table))
