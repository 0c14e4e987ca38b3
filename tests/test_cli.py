"""Tests for the waypost CLI — argument handling, app resolution, routes listing."""

import logging
import sys
import types
from collections.abc import Iterator

import pytest

from waypost.app import App
from waypost.cli import main
from waypost.cli._resolve import resolve_app
from waypost.cli._routes import format_routes
from waypost.routing.route import Route, RouteTable
from waypost.server.logs import configure_logging


def _index(request, params):
    return "index"


def _item(request, params):
    return "item"


@pytest.fixture
def fake_module() -> Iterator[types.ModuleType]:
    """Register an importable module holding apps and factories."""
    module = types.ModuleType("waypost_cli_fixture")
    app = App()
    app.add_route("/", "GET", _index, name="home")
    module.app = app
    module.make_app = lambda: App(routes=[Route("/made", {"GET": _index})])
    module.broken = lambda: 1 / 0
    module.not_an_app = 42
    module.empty = App()
    sys.modules[module.__name__] = module
    yield module
    del sys.modules[module.__name__]


class TestMain:
    def test_no_command_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "usage: waypost" in capsys.readouterr().out

    def test_help_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_bad_log_level_rejected(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["run", "--log-level", "loud"])
        assert exc_info.value.code == 2


class TestResolveApp:
    def test_instance(self, fake_module: types.ModuleType) -> None:
        assert resolve_app("waypost_cli_fixture:app") is fake_module.app

    def test_default_attribute_is_app(self, fake_module: types.ModuleType) -> None:
        assert resolve_app("waypost_cli_fixture") is fake_module.app

    def test_factory_is_called(self, fake_module: types.ModuleType) -> None:
        app = resolve_app("waypost_cli_fixture:make_app")
        assert [r.pattern for r in app.routes] == ["/made"]

    def test_failing_factory(self, fake_module: types.ModuleType) -> None:
        with pytest.raises(TypeError, match="raised an error"):
            resolve_app("waypost_cli_fixture:broken")

    def test_not_an_app(self, fake_module: types.ModuleType) -> None:
        with pytest.raises(TypeError, match="not a waypost.App"):
            resolve_app("waypost_cli_fixture:not_an_app")

    def test_missing_attribute(self, fake_module: types.ModuleType) -> None:
        with pytest.raises(AttributeError):
            resolve_app("waypost_cli_fixture:nothing")

    def test_missing_module(self) -> None:
        with pytest.raises(ModuleNotFoundError):
            resolve_app("waypost_no_such_module:app")


class TestRoutesCommand:
    def test_lists_routes(
        self, fake_module: types.ModuleType, capsys: pytest.CaptureFixture[str]
    ) -> None:
        main(["routes", "waypost_cli_fixture:app"])
        out = capsys.readouterr().out
        assert "METHODS" in out
        assert "_index (home)" in out

    def test_empty_app(
        self, fake_module: types.ModuleType, capsys: pytest.CaptureFixture[str]
    ) -> None:
        main(["routes", "waypost_cli_fixture:empty"])
        assert capsys.readouterr().out.strip() == "No routes registered."

    def test_unresolvable_app_exits_1(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "waypost_no_such_module:app"])
        assert exc_info.value.code == 1
        assert capsys.readouterr().err.startswith("Error:")

    def test_default_api_app(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.delenv("PORT", raising=False)
        main(["routes"])
        out = capsys.readouterr().out
        assert "/api/accounts/:id" in out
        assert "GET, PUT, DELETE" in out


class TestFormatRoutes:
    def test_match_order(self) -> None:
        table = RouteTable(
            (
                Route("/items", {"GET": _index, "POST": _item}),
                Route("/items/:id", {"GET": _item}),
            )
        )
        lines = format_routes(table).splitlines()
        assert lines[0].split() == ["METHODS", "PATTERN", "HANDLERS"]
        assert "/items " in lines[2]
        assert "/items/:id" in lines[3]
        assert "GET, POST" in lines[2]

    def test_marks_unreachable(self) -> None:
        table = RouteTable(
            (
                Route("/items/:id", {"GET": _item}),
                Route("/items/new", {"GET": _index}),
            )
        )
        lines = format_routes(table).splitlines()
        assert "(unreachable)" not in lines[2]
        assert lines[3].endswith("(unreachable)")


@pytest.fixture
def waypost_logger() -> Iterator[logging.Logger]:
    logger = logging.getLogger("waypost")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


class TestConfigureLogging:
    def test_sets_level_and_single_handler(self, waypost_logger: logging.Logger) -> None:
        configure_logging("debug")
        configure_logging("warning")
        ours = [h for h in waypost_logger.handlers if getattr(h, "_waypost", False)]
        assert len(ours) == 1
        assert waypost_logger.level == logging.WARNING

    def test_unknown_level(self, waypost_logger: logging.Logger) -> None:
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging("loud")
