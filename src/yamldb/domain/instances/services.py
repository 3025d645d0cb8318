"""Pure operations on the repo -> branches mapping.

None of these functions touch the filesystem; the store loads a mapping,
passes it through one of them and writes the result back.
"""

from __future__ import annotations

from yamldb.shared.exceptions import RepoNotFoundError
from yamldb.shared.types import BranchName, Instance, Mapping, RepoName


def append_branch(mapping: Mapping, repo: str, branch: str) -> Mapping:
    """Return a copy of *mapping* with *branch* appended under *repo*.

    The repo is created when absent. Duplicates are kept.
    """
    updated = {key: list(values) for key, values in mapping.items()}
    updated.setdefault(repo, []).append(branch)
    return updated


def remove_branch(mapping: Mapping, repo: str, branch: str) -> Mapping:
    """Return a copy of *mapping* without any *branch* entry under *repo*.

    A repo whose list ends up empty is dropped entirely.

    Raises:
        RepoNotFoundError: If *repo* is not in the mapping.
    """
    if repo not in mapping:
        raise RepoNotFoundError(repo)

    updated = {key: list(values) for key, values in mapping.items()}
    remaining = [b for b in updated[repo] if b != branch]
    if remaining:
        updated[repo] = remaining
    else:
        del updated[repo]
    return updated


def branches_of(mapping: Mapping, repo: str) -> list[str]:
    """Copy of the branches stored under *repo*, empty if unknown."""
    return list(mapping.get(repo, []))


def flatten_instances(mapping: Mapping, repo: str | None = None) -> list[Instance]:
    """Flatten *mapping* into ordered instances.

    With *repo*, only that repo's branches are returned. Otherwise every
    repo is visited in key order.
    """
    repos = [repo] if repo is not None else list(mapping)
    return [
        Instance(repo=RepoName(name), branch=BranchName(branch))
        for name in repos
        for branch in mapping.get(name, [])
    ]
