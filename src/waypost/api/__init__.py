"""The accounts JSON API, served from flat JSON files.

Run it with::

    waypost run waypost.api:create_app
"""

from waypost.api.routes import build_routes
from waypost.app import App
from waypost.config import AppConfig
from waypost.data.store import JsonFileStore, RecordStore


def create_app(config: AppConfig | None = None, store: RecordStore | None = None) -> App:
    """Build the API app.

    *config* defaults to ``AppConfig.from_env()``; *store* defaults to a
    ``JsonFileStore`` rooted at ``config.data_dir``.
    """
    config = config or AppConfig.from_env()
    store = store or JsonFileStore(config.data_dir)
    return App(config, routes=build_routes(store))


__all__ = ["create_app"]
