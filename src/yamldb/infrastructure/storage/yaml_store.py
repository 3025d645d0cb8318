"""YAML file persistence for repo/branch instance markers.

Every operation is a full cycle: read the whole file, compute, and (for
mutations) rewrite the whole file. There is no locking, so two writers
interleaving their cycles can lose an update.
"""

from __future__ import annotations

import logging
import warnings

from collections.abc import Callable
from concurrent.futures import Future
from dataclasses import dataclass
from pathlib import Path

from yamldb.domain.instances import services
from yamldb.domain.instances.repositories import CompletionCallback
from yamldb.infrastructure.storage import serializer
from yamldb.shared.constants import FILE_ENCODING
from yamldb.shared.exceptions import InvalidParametersError
from yamldb.shared.types import Instance, Mapping

logger = logging.getLogger(__name__)


@dataclass
class YamlStore:
    """Implements InstanceRepository on top of a single YAML file.

    Mutations return an already-resolved ``concurrent.futures.Future``.
    Call ``.result()`` to block and re-raise, or wrap it with
    ``asyncio.wrap_future`` from async code. An optional callback is
    invoked once the future resolves and receives ``None`` or the error;
    anything the callback raises propagates to the caller.
    """

    path: Path

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    def load(self) -> Mapping:
        """Load the stored mapping.

        Returns:
            The mapping, or an empty one if the file does not exist.

        Raises:
            CorruptStorageError: If the file is not a YAML mapping.
            OSError: On any read failure other than a missing file.
        """
        text = self._read_text()
        if text is None:
            return {}
        return serializer.deserialize(text, self.path)

    def list(self) -> str:
        """Return the raw contents of the storage file, or ``""`` if no file.

        Deprecated: use ``serializer.serialize(store.load())``.
        """
        warnings.warn(
            "YamlStore.list() is deprecated, serialize load() instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return self._read_text() or ""

    def exists(self, *args: str) -> bool:
        """Check whether a repo, or a branch under a repo, is stored.

        ``exists(repo)`` tests for the repo key; ``exists(repo, branch)``
        tests for the branch within that repo.

        Raises:
            InvalidParametersError: If not called with one or two arguments.
        """
        if len(args) not in (1, 2):
            reason = f"expected 1 or 2 arguments, got {len(args)}"
            raise InvalidParametersError("exists", reason)

        mapping = self.load()
        if len(args) == 1:
            return args[0] in mapping
        repo, branch = args
        return branch in mapping.get(repo, [])

    def branches(self, repo: str) -> list[str]:
        return services.branches_of(self.load(), repo)

    def instances(self, repo: str | None = None) -> list[Instance]:
        return services.flatten_instances(self.load(), repo)

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------

    def save(
        self, mapping: Mapping, callback: CompletionCallback | None = None
    ) -> Future[None]:
        """Overwrite the file with *mapping*."""
        return self._complete(lambda: self._write(mapping), callback)

    def add(
        self, repo: str, branch: str, callback: CompletionCallback | None = None
    ) -> Future[None]:
        """Append *branch* under *repo*, creating the repo if needed."""

        def work() -> None:
            logger.debug("Adding %s/%s to %s", repo, branch, self.path)
            self._write(services.append_branch(self.load(), repo, branch))

        return self._complete(work, callback)

    def remove(
        self, repo: str, branch: str, callback: CompletionCallback | None = None
    ) -> Future[None]:
        """Remove every *branch* entry under *repo*.

        The future fails with ``RepoNotFoundError`` when *repo* is not
        stored, and the file is left untouched.
        """

        def work() -> None:
            logger.debug("Removing %s/%s from %s", repo, branch, self.path)
            self._write(services.remove_branch(self.load(), repo, branch))

        return self._complete(work, callback)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _read_text(self) -> str | None:
        try:
            return self.path.read_text(encoding=FILE_ENCODING)
        except FileNotFoundError:
            logger.debug("No storage file at %s, treating as empty", self.path)
            return None

    def _write(self, mapping: Mapping) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(serializer.serialize(mapping), encoding=FILE_ENCODING)
        logger.debug("Wrote %d repos to %s", len(mapping), self.path)

    def _complete(
        self,
        work: Callable[[], None],
        callback: CompletionCallback | None,
    ) -> Future[None]:
        future: Future[None] = Future()
        try:
            work()
        except Exception as e:
            logger.debug("Operation on %s failed: %s", self.path, e)
            future.set_exception(e)
        else:
            future.set_result(None)

        if callback is not None:
            callback(future.exception())
        return future
