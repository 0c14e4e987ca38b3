"""Production server — multi-worker pounce without reload."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from waypost.app import App


def run_production_server(
    app: App,
    host: str = "0.0.0.0",
    port: int = 3000,
    workers: int = 0,
    *,
    log_level: str = "info",
) -> None:
    """Run a waypost app under pounce with *workers* workers.

    ``workers=0`` lets pounce pick one worker per CPU. The route table
    is immutable and the matcher is pure, so workers share nothing but
    the data directory.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=workers,
        log_level=log_level,
    )
    server = Server(config, app)
    server.run()
