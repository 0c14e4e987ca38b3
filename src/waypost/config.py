"""Application configuration.

AppConfig is a frozen dataclass, immutable after creation.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from waypost.errors import ConfigurationError

_TRUTHY = ("1", "true", "yes", "on")


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(debug=True, port=3000, data_dir="var/db")
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 3000
    debug: bool = False
    workers: int = 0  # 0 = auto-detect from CPU count (production only)

    # Reload (development mode, requires debug=True)
    reload_include: tuple[str, ...] = ()
    reload_dirs: tuple[str, ...] = ()

    # Data
    data_dir: str | Path = "db"

    # Limits
    max_content_length: int = 1024 * 1024  # 1 MB

    # Logging
    log_level: str = "info"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "AppConfig":
        """Build a config from environment variables.

        Recognised variables: ``HOST``, ``PORT``, ``WAYPOST_DEBUG``,
        ``WAYPOST_DATA_DIR``, ``WAYPOST_WORKERS``, ``WAYPOST_LOG_LEVEL``.
        Unset variables keep their defaults.

        Raises ``ConfigurationError`` if a numeric variable is not an integer.
        """
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            host=env.get("HOST", defaults.host),
            port=_env_int(env, "PORT", defaults.port),
            debug=env.get("WAYPOST_DEBUG", "").lower() in _TRUTHY,
            workers=_env_int(env, "WAYPOST_WORKERS", defaults.workers),
            data_dir=env.get("WAYPOST_DATA_DIR", defaults.data_dir),
            log_level=env.get("WAYPOST_LOG_LEVEL", defaults.log_level).lower(),
        )


def _env_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        msg = f"Environment variable {name} must be an integer, got {raw!r}"
        raise ConfigurationError(msg) from None
