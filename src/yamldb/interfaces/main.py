"""Command-line entry point.

Usage::

    yamldb add REPO BRANCH
    yamldb remove REPO BRANCH
    yamldb exists REPO [BRANCH]
    yamldb branches REPO
    yamldb instances [REPO]
    yamldb list

The storage file is taken from ``STORAGE_PATH``.
"""

from __future__ import annotations

import logging
import sys

from yamldb.domain.instances.repositories import InstanceRepository
from yamldb.infrastructure.storage import serializer
from yamldb.infrastructure.storage.yaml_store import YamlStore
from yamldb.interfaces.config import StoreConfig
from yamldb.shared.exceptions import YamlDbError

logger = logging.getLogger(__name__)

# Command -> (min args, max args).
_COMMANDS: dict[str, tuple[int, int]] = {
    "add": (2, 2),
    "remove": (2, 2),
    "exists": (1, 2),
    "branches": (1, 1),
    "instances": (0, 1),
    "list": (0, 0),
}

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def main(argv: list[str] | None = None) -> int:
    """Run one store command and return the process exit status."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    args = sys.argv[1:] if argv is None else argv
    if not args or args[0] not in _COMMANDS:
        valid = ", ".join(sorted(_COMMANDS))
        given = args[0] if args else ""
        logger.error("Unknown command: %r (valid: %s)", given, valid)
        return EXIT_USAGE

    command, params = args[0], args[1:]
    low, high = _COMMANDS[command]
    if not low <= len(params) <= high:
        logger.error(
            "%s takes %d to %d arguments, got %d", command, low, high, len(params)
        )
        return EXIT_USAGE

    try:
        store: InstanceRepository = YamlStore(path=StoreConfig.from_env().path)
        return _run(store, command, params)
    except (YamlDbError, OSError) as e:
        logger.error("%s failed: %s", command, e)
        return EXIT_FAILURE


def _run(store: InstanceRepository, command: str, params: list[str]) -> int:
    if command == "add":
        store.add(params[0], params[1]).result()
        logger.info("Added %s/%s", params[0], params[1])
    elif command == "remove":
        store.remove(params[0], params[1]).result()
        logger.info("Removed %s/%s", params[0], params[1])
    elif command == "exists":
        return EXIT_OK if store.exists(*params) else EXIT_FAILURE
    elif command == "branches":
        for branch in store.branches(params[0]):
            print(branch)
    elif command == "instances":
        for instance in store.instances(*params):
            print(f"{instance.repo} {instance.branch}")
    elif command == "list":
        sys.stdout.write(serializer.serialize(store.load()))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
