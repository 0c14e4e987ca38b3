"""``waypost run`` — development or production server command."""

import argparse
import sys

from waypost.cli._resolve import resolve_app
from waypost.server.logs import configure_logging


def run_server(args: argparse.Namespace) -> None:
    """Resolve ``args.app`` and serve it.

    Production mode is used when ``--production`` is given or the app's
    config has ``debug=False``; otherwise a single reloading worker runs.
    CLI flags override the app config.
    """
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    log_level = args.log_level or app.config.log_level
    configure_logging(log_level)

    # Freeze now so registration errors surface before the server binds
    app._ensure_frozen()

    host = args.host or app.config.host
    port = args.port or app.config.port

    if args.production or not app.config.debug:
        from waypost.server.production import run_production_server

        run_production_server(
            app,
            host=host,
            port=port,
            workers=args.workers if args.workers is not None else app.config.workers,
            log_level=log_level,
        )
    else:
        from waypost.server.dev import run_dev_server

        run_dev_server(
            app,
            host,
            port,
            reload=True,
            reload_include=app.config.reload_include,
            reload_dirs=app.config.reload_dirs,
            app_path=args.app,
        )
