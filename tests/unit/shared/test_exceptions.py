"""Tests for shared exception hierarchy."""

from __future__ import annotations

from pathlib import Path

import pytest

from yamldb.shared.exceptions import (
    ConfigurationError,
    CorruptStorageError,
    InvalidParametersError,
    RepoNotFoundError,
    YamlDbError,
)

# =============================================================================
# Hierarchy
# =============================================================================


def test_all_exceptions_inherit_from_yamldb_error() -> None:
    exceptions = [
        InvalidParametersError,
        RepoNotFoundError,
        CorruptStorageError,
        ConfigurationError,
    ]
    for exc_class in exceptions:
        assert issubclass(exc_class, YamlDbError)


def test_yamldb_error_inherits_from_exception() -> None:
    assert issubclass(YamlDbError, Exception)


# =============================================================================
# Structured Context
# =============================================================================


def test_invalid_parameters_error_names_operation() -> None:
    err = InvalidParametersError(operation="exists", reason="got 3 arguments")

    assert err.operation == "exists"
    assert str(err) == "db|exists: invalid parameters (got 3 arguments)"


def test_repo_not_found_error_carries_repo() -> None:
    err = RepoNotFoundError(repo="foo")

    assert err.repo == "foo"
    assert "'foo'" in str(err)


def test_corrupt_storage_error_carries_path() -> None:
    path = Path("/tmp/storage.yml")
    err = CorruptStorageError(path=path, reason="expected a mapping")

    assert err.path == path
    assert "storage.yml" in str(err)
    assert "expected a mapping" in str(err)


# =============================================================================
# Catchability
# =============================================================================


def test_repo_not_found_catchable_as_yamldb_error() -> None:
    with pytest.raises(YamlDbError):
        raise RepoNotFoundError(repo="foo")
