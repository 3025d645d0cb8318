"""Shared fixtures for integration tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from yamldb.infrastructure.storage.yaml_store import YamlStore


@pytest.fixture
def storage_path(tmp_path: Path) -> Path:
    return tmp_path / "state" / "instances.yml"


@pytest.fixture
def store(storage_path: Path) -> YamlStore:
    return YamlStore(path=storage_path)
