"""Repository protocols for active instances."""

from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import Future
from typing import Protocol

from yamldb.shared.types import Instance, Mapping

CompletionCallback = Callable[[BaseException | None], None]
"""Called once a write finishes: ``None`` on success, the error otherwise."""


class InstanceRepository(Protocol):
    """Persistence port for repo/branch instance markers."""

    def load(self) -> Mapping:
        """Load the full mapping, empty if nothing is stored yet."""
        ...

    def save(
        self, mapping: Mapping, callback: CompletionCallback | None = None
    ) -> Future[None]:
        """Replace the stored mapping."""
        ...

    def add(
        self, repo: str, branch: str, callback: CompletionCallback | None = None
    ) -> Future[None]:
        """Append a branch to a repo."""
        ...

    def remove(
        self, repo: str, branch: str, callback: CompletionCallback | None = None
    ) -> Future[None]:
        """Remove every occurrence of a branch from a repo."""
        ...

    def exists(self, *args: str) -> bool:
        """Check for a repo, or a branch within a repo."""
        ...

    def branches(self, repo: str) -> list[str]:
        """Branches stored under a repo, in order."""
        ...

    def instances(self, repo: str | None = None) -> list[Instance]:
        """Flatten the mapping into repo/branch pairs."""
        ...
