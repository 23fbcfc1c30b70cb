"""Tests for spaserve.config — ServeConfig frozen dataclass."""

import logging
from pathlib import Path

import pytest

from spaserve.config import DEFAULT_PORT, ServeConfig
from spaserve.errors import ConfigurationError


class TestServeConfig:
    def test_defaults(self) -> None:
        cfg = ServeConfig()

        assert cfg.host == "0.0.0.0"
        assert cfg.port == 8080
        assert cfg.workers == 1
        assert cfg.build_dir == "dist"
        assert cfg.static_dir == "static"
        assert cfg.log_level == "info"

    def test_default_document_paths(self) -> None:
        cfg = ServeConfig()

        assert cfg.index_path == Path("dist") / "index.html"
        assert cfg.not_found_path == Path("static") / "404.html"

    def test_paths_follow_root(self, tmp_path: Path) -> None:
        cfg = ServeConfig(root=tmp_path, build_dir="build", static_dir="public")

        assert cfg.index_path == tmp_path / "build" / "index.html"
        assert cfg.not_found_path == tmp_path / "public" / "404.html"

    def test_frozen(self) -> None:
        cfg = ServeConfig()

        with pytest.raises(AttributeError):
            cfg.port = 9000  # type: ignore[misc]

    def test_with_overrides_skips_none(self) -> None:
        cfg = ServeConfig().with_overrides(port=3000, host=None)

        assert cfg.port == 3000
        assert cfg.host == "0.0.0.0"

    def test_with_overrides_no_changes_returns_self(self) -> None:
        cfg = ServeConfig()
        assert cfg.with_overrides(port=None) is cfg


class TestFromEnv:
    def test_port_unset_uses_default(self) -> None:
        cfg = ServeConfig.from_env({})
        assert cfg.port == DEFAULT_PORT

    def test_port_empty_uses_default(self) -> None:
        cfg = ServeConfig.from_env({"PORT": ""})
        assert cfg.port == DEFAULT_PORT

    def test_port_from_env(self) -> None:
        cfg = ServeConfig.from_env({"PORT": "9999"})
        assert cfg.port == 9999

    def test_reads_os_environ_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "9999")
        assert ServeConfig.from_env().port == 9999

    def test_os_environ_without_port(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("PORT", raising=False)
        assert ServeConfig.from_env().port == DEFAULT_PORT

    def test_override_beats_env(self) -> None:
        cfg = ServeConfig.from_env({"PORT": "9999"}, port=3000)
        assert cfg.port == 3000

    def test_other_overrides_applied(self, tmp_path: Path) -> None:
        cfg = ServeConfig.from_env({}, root=tmp_path, workers=4)

        assert cfg.root == tmp_path
        assert cfg.workers == 4

    def test_non_integer_port_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="PORT must be an integer"):
            ServeConfig.from_env({"PORT": "http"})

    def test_default_port_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="spaserve.config"):
            ServeConfig.from_env({})
        assert "Defaulting to port 8080" in caplog.text

    def test_explicit_port_not_logged_as_default(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="spaserve.config"):
            ServeConfig.from_env({"PORT": "9999"})
        assert "Defaulting" not in caplog.text

    @pytest.mark.parametrize("port", ["70000", "-1"])
    def test_out_of_range_port_rejected(self, port: str) -> None:
        with pytest.raises(ConfigurationError, match="port must be 0-65535"):
            ServeConfig.from_env({"PORT": port})

    def test_out_of_range_port_override_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="port must be 0-65535"):
            ServeConfig.from_env({}, port=99999)

    def test_port_bounds_accepted(self) -> None:
        assert ServeConfig.from_env({"PORT": "0"}).port == 0
        assert ServeConfig.from_env({"PORT": "65535"}).port == 65535

    def test_negative_workers_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="workers must be >= 0"):
            ServeConfig.from_env({}, workers=-1)
