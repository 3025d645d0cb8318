"""Configuration assembly from environment variables."""

from __future__ import annotations

import os

from dataclasses import dataclass
from pathlib import Path

from yamldb.shared.constants import STORAGE_PATH_ENV
from yamldb.shared.exceptions import ConfigurationError


def require_env(name: str) -> str:
    """Read a required environment variable or raise.

    Raises:
        ConfigurationError: If the variable is missing or empty.
    """
    value = os.environ.get(name, "").strip()
    if not value:
        msg = f"Missing required environment variable: {name}"
        raise ConfigurationError(msg)
    return value


@dataclass(frozen=True)
class StoreConfig:
    """Typed configuration for a YamlStore."""

    path: Path

    @classmethod
    def from_env(cls) -> StoreConfig:
        """Build config from environment variables.

        Required:
            STORAGE_PATH
        """
        return cls(path=Path(require_env(STORAGE_PATH_ENV)).expanduser())
