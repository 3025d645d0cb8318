"""Centralized defaults for yamldb."""

from __future__ import annotations

# =============================================================================
# CONFIGURATION
# =============================================================================

STORAGE_PATH_ENV = "STORAGE_PATH"
"""Environment variable holding the path of the storage file."""

# =============================================================================
# SERIALIZATION
# =============================================================================

FILE_ENCODING = "utf-8"
YAML_INDENT = 2
