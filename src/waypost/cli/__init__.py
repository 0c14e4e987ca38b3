"""Waypost CLI — serve an app and inspect its route table.

Entry point registered as ``waypost`` in ``pyproject.toml``::

    [project.scripts]
    waypost = "waypost.cli:main"
"""

import argparse
import sys

DEFAULT_APP = "waypost.api:create_app"


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``waypost`` command."""
    parser = argparse.ArgumentParser(
        prog="waypost",
        description="Waypost — a small JSON API server with a first-match path router.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- waypost run ------------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Start the dev or production server")
    run_parser.add_argument(
        "app",
        nargs="?",
        default=DEFAULT_APP,
        help=f"Import string (default: {DEFAULT_APP})",
    )
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    run_parser.add_argument(
        "--production",
        action="store_true",
        help="Run in production mode (multi-worker, no reload)",
    )
    run_parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Worker count (0=auto-detect, production only)",
    )
    run_parser.add_argument(
        "--log-level",
        default=None,
        choices=("debug", "info", "warning", "error", "critical"),
        help="Log level (default: from app config)",
    )

    # -- waypost routes ---------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List the route table in match order")
    routes_parser.add_argument(
        "app",
        nargs="?",
        default=DEFAULT_APP,
        help=f"Import string (default: {DEFAULT_APP})",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "run":
        from waypost.cli._run import run_server

        run_server(args)
    elif args.command == "routes":
        from waypost.cli._routes import run_routes

        run_routes(args)
