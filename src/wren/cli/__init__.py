"""Wren CLI — route table listing and headless rendering.

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
        description="Wren — declarative client-side path routing.",
    )
    parser.add_argument(
        "--log-level",
        default="warning",
        choices=["debug", "info", "warning", "error"],
        help="Logging verbosity",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- wren routes ------------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List the route table")
    routes_parser.add_argument("app", help="App or factory (e.g. wren.site:create_app)")

    # -- wren render ------------------------------------------------------
    render_parser = subparsers.add_parser("render", help="Render a path headlessly")
    render_parser.add_argument("app", help="App or factory (e.g. wren.site:create_app)")
    render_parser.add_argument("path", help="Path to dispatch (e.g. /user/1)")
    render_parser.add_argument("--api-base-url", default=None, help="Data endpoint views fetch from")
    render_parser.add_argument("--mount-id", default=None, help="Id of the mount point element")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "routes":
        from wren.cli._routes import run_routes

        run_routes(args)
    elif args.command == "render":
        from wren.cli._render import run_render

        run_render(args)
