"""Tests for environment configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from yamldb.interfaces.config import StoreConfig, require_env
from yamldb.shared.exceptions import ConfigurationError


class TestRequireEnv:
    def test_returns_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("YAMLDB_TEST_VAR", "value")
        assert require_env("YAMLDB_TEST_VAR") == "value"

    def test_missing_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("YAMLDB_TEST_VAR", raising=False)
        with pytest.raises(ConfigurationError, match="YAMLDB_TEST_VAR"):
            require_env("YAMLDB_TEST_VAR")

    def test_blank_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("YAMLDB_TEST_VAR", "   ")
        with pytest.raises(ConfigurationError):
            require_env("YAMLDB_TEST_VAR")


class TestStoreConfig:
    def test_from_env(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        path = tmp_path / "storage.yml"
        monkeypatch.setenv("STORAGE_PATH", str(path))

        config = StoreConfig.from_env()

        assert config.path == path

    def test_from_env_missing_path(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("STORAGE_PATH", raising=False)
        with pytest.raises(ConfigurationError, match="STORAGE_PATH"):
            StoreConfig.from_env()

    def test_is_frozen(self, tmp_path: Path) -> None:
        config = StoreConfig(path=tmp_path)
        with pytest.raises(AttributeError):
            config.path = Path("other")  # type: ignore[misc]
