"""Mapping YAML serialization."""

from __future__ import annotations

from pathlib import Path
from typing import Any, cast

import yaml

from yamldb.shared.constants import YAML_INDENT
from yamldb.shared.exceptions import CorruptStorageError
from yamldb.shared.types import Mapping


class _BlockDumper(yaml.SafeDumper):
    """Safe dumper that indents sequence items under their parent key."""

    def increase_indent(self, flow: bool = False, indentless: bool = False) -> None:
        return super().increase_indent(flow, False)


# =============================================================================
# SERIALIZE
# =============================================================================


def serialize(mapping: Mapping) -> str:
    """Serialize a mapping to block-style YAML.

    Keys and branches keep their insertion order. An empty mapping
    becomes ``{}\\n``.
    """
    # SafeDumper rejects str subclasses such as RepoName.
    plain = {str(r): [str(b) for b in bs] for r, bs in mapping.items()}
    return yaml.dump(
        plain,
        Dumper=_BlockDumper,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
        indent=YAML_INDENT,
    )


# =============================================================================
# DESERIALIZE
# =============================================================================


def deserialize(data: str, path: Path) -> Mapping:
    """Parse YAML text into a mapping.

    An empty document is an empty mapping.

    Raises:
        CorruptStorageError: If the YAML is malformed, is not a mapping
            of lists, or holds a null repo or branch.
    """
    try:
        raw: Any = yaml.safe_load(data)
    except yaml.YAMLError as e:
        raise CorruptStorageError(path, f"invalid YAML: {e}") from e

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        reason = f"expected a mapping, got {type(raw).__name__}"
        raise CorruptStorageError(path, reason)

    mapping: Mapping = {}
    for key, value in cast(dict[object, object], raw).items():
        if key is None:
            raise CorruptStorageError(path, "null repo name")
        if not isinstance(value, list):
            reason = f"expected a list under {key!r}, got {type(value).__name__}"
            raise CorruptStorageError(path, reason)
        branches = cast(list[object], value)
        if any(b is None for b in branches):
            raise CorruptStorageError(path, f"null branch under {key!r}")
        mapping[str(key)] = [str(b) for b in branches]
    return mapping
