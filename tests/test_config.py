"""Tests for waypost.config — AppConfig frozen dataclass."""

from pathlib import Path

import pytest

from waypost.config import AppConfig
from waypost.errors import ConfigurationError


class TestAppConfig:
    def test_defaults(self) -> None:
        cfg = AppConfig()

        assert cfg.host == "127.0.0.1"
        assert cfg.port == 3000
        assert cfg.debug is False
        assert cfg.workers == 0
        assert cfg.data_dir == "db"
        assert cfg.max_content_length == 1024 * 1024
        assert cfg.log_level == "info"

    def test_override(self) -> None:
        cfg = AppConfig(host="0.0.0.0", port=8080, debug=True, data_dir=Path("var"))

        assert cfg.host == "0.0.0.0"
        assert cfg.port == 8080
        assert cfg.debug is True
        assert cfg.data_dir == Path("var")

    def test_frozen(self) -> None:
        cfg = AppConfig()

        with pytest.raises(AttributeError):
            cfg.debug = True  # type: ignore[misc]


class TestFromEnv:
    def test_empty_env_gives_defaults(self) -> None:
        assert AppConfig.from_env({}) == AppConfig()

    def test_reads_variables(self) -> None:
        cfg = AppConfig.from_env(
            {
                "HOST": "0.0.0.0",
                "PORT": "4000",
                "WAYPOST_DEBUG": "true",
                "WAYPOST_DATA_DIR": "/srv/data",
                "WAYPOST_WORKERS": "4",
                "WAYPOST_LOG_LEVEL": "DEBUG",
            }
        )
        assert cfg.host == "0.0.0.0"
        assert cfg.port == 4000
        assert cfg.debug is True
        assert cfg.data_dir == "/srv/data"
        assert cfg.workers == 4
        assert cfg.log_level == "debug"

    @pytest.mark.parametrize("value", ["0", "false", "no", ""])
    def test_debug_falsy(self, value: str) -> None:
        assert AppConfig.from_env({"WAYPOST_DEBUG": value}).debug is False

    def test_empty_port_uses_default(self) -> None:
        assert AppConfig.from_env({"PORT": ""}).port == 3000

    def test_invalid_port(self) -> None:
        with pytest.raises(ConfigurationError, match="PORT"):
            AppConfig.from_env({"PORT": "eighty"})

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "5050")
        assert AppConfig.from_env().port == 5050
