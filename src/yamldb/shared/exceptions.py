"""Typed exception hierarchy for yamldb."""

from __future__ import annotations

from pathlib import Path

# =============================================================================
# BASE
# =============================================================================


class YamlDbError(Exception):
    """Base exception for all yamldb errors."""


# =============================================================================
# STORE
# =============================================================================


class InvalidParametersError(YamlDbError):
    """An operation was called with an unsupported argument shape."""

    def __init__(self, operation: str, reason: str) -> None:
        self.operation = operation
        super().__init__(f"db|{operation}: invalid parameters ({reason})")


class RepoNotFoundError(YamlDbError):
    """The repository is not present in the store."""

    def __init__(self, repo: str) -> None:
        self.repo = repo
        super().__init__(f"Repository not found: {repo!r}")


class CorruptStorageError(YamlDbError):
    """The storage file could not be parsed into a mapping."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Corrupt storage file {path}: {reason}")


# =============================================================================
# CONFIGURATION
# =============================================================================


class ConfigurationError(YamlDbError):
    """Invalid or missing configuration."""
