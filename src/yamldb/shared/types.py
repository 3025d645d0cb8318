"""Domain-specific types that prevent primitive obsession."""

from __future__ import annotations

from dataclasses import dataclass

# =============================================================================
# NEWTYPES
# =============================================================================


class RepoName(str):
    """A repository name, the key under which branches are tracked."""


class BranchName(str):
    """A branch identifier stored under a repository."""


Mapping = dict[str, list[str]]
"""Repo name to ordered branch names, as stored on disk."""


# =============================================================================
# VALUE OBJECTS
# =============================================================================


@dataclass(frozen=True)
class Instance:
    """A single active repo/branch pair."""

    repo: RepoName
    branch: BranchName
