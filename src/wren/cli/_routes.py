"""``wren routes`` — list the route table in resolution order."""

import argparse
import sys

from wren.cli._load import load_app
from wren.errors import ConfigurationError


def run_routes(args: argparse.Namespace) -> None:
    """Print PATTERN, NAME and VIEW for every route, then the fallback."""
    try:
        router = load_app(args.app).router
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    routes = router.routes
    if not routes:
        print("No routes registered.")
        return

    rows = [
        (route.pattern, route.name or "-", getattr(route.view, "__name__", repr(route.view)))
        for route in routes
    ]
    fallback = router.not_found.view
    rows.append(("(fallback)", "-", getattr(fallback, "__name__", repr(fallback))))

    max_pattern = max(max(len(r[0]) for r in rows), 7)  # "PATTERN" header
    max_name = max(max(len(r[1]) for r in rows), 4)  # "NAME" header

    fmt = f"{{:<{max_pattern}}}  {{:<{max_name}}}  {{}}"
    print(fmt.format("PATTERN", "NAME", "VIEW"))
    sep_len = max_pattern + max_name + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))
