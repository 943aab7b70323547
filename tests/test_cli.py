"""Tests for configuration and the command line."""

import sys
import types

import pytest

from pagewire import ApiTable, ConfigurationError, ServerConfig
from pagewire.cli import build_parser, resolve_api


class TestServerConfig:
    def test_defaults(self):
        config = ServerConfig()
        assert (config.host, config.port) == ("127.0.0.1", 9000)
        assert config.strict is False
        assert config.not_found_page == "pages/404.html"

    def test_frozen(self):
        with pytest.raises(AttributeError):
            ServerConfig().port = 1  # type: ignore[misc]

    @pytest.mark.parametrize(
        "kwargs",
        [{"port": -1}, {"port": 70000}, {"max_connections": 0}, {"request_timeout": 0}],
    )
    def test_invalid(self, kwargs):
        with pytest.raises(ConfigurationError):
            ServerConfig(**kwargs)


class TestCli:
    def test_parser_defaults(self):
        args = build_parser().parse_args([])
        assert args.port == 9000
        assert args.root == "."
        assert args.strict is False
        assert args.api is None

    def test_parser_flags(self):
        args = build_parser().parse_args(
            ["--port", "8080", "--strict", "--root", "site", "--max-connections", "5"]
        )
        assert (args.port, args.strict, args.root, args.max_connections) == (8080, True, "site", 5)

    def test_resolve_api(self, monkeypatch):
        module = types.ModuleType("fake_api_module")
        module.table = ApiTable()
        module.other = object()
        monkeypatch.setitem(sys.modules, "fake_api_module", module)

        assert resolve_api("fake_api_module:table") is module.table
        with pytest.raises(ConfigurationError, match="not an ApiTable"):
            resolve_api("fake_api_module:other")
        with pytest.raises(ConfigurationError, match="no attribute"):
            resolve_api("fake_api_module:missing")
        with pytest.raises(ConfigurationError, match="module:attribute"):
            resolve_api("fake_api_module")

    def test_log_level_is_case_insensitive(self):
        assert build_parser().parse_args(["--log-level", "DEBUG"]).log_level == "debug"

    def test_invalid_log_level_is_a_usage_error(self, capsys):
        with pytest.raises(SystemExit) as info:
            build_parser().parse_args(["--log-level", "loud"])
        assert info.value.code == 2
        assert "invalid choice" in capsys.readouterr().err


def test_importing_main_module_does_not_start_server(monkeypatch):
    import importlib

    import pagewire.cli

    calls = []
    monkeypatch.setattr(pagewire.cli, "main", lambda *a, **k: calls.append(a))
    monkeypatch.delitem(sys.modules, "pagewire.__main__", raising=False)
    importlib.import_module("pagewire.__main__")
    assert calls == []
