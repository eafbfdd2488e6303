# --- Directory scanning convenience -----------------------------------------
import logging
import os
from typing import Iterator

from seer.indexer import GoIndexer, GoParseError

logger = logging.getLogger(__name__)

GO_SUFFIX = ".go"


def read_bytes(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()


def _raise(err: OSError):
    raise err


def iter_go_files(root_dir: str) -> Iterator[str]:
    """
    Yields every file under `root_dir` ending in .go, in sorted order so that
    key collisions resolve the same way on every run. A plain file path is
    yielded as-is when it has the suffix. Enumeration errors are raised.
    """
    if os.path.isfile(root_dir):
        if root_dir.endswith(GO_SUFFIX):
            yield root_dir
        return

    for dirpath, dirnames, filenames in os.walk(root_dir, onerror=_raise):
        dirnames.sort()
        for fn in sorted(filenames):
            if fn.endswith(GO_SUFFIX):
                yield os.path.join(dirpath, fn)


def index_directory(indexer: GoIndexer, root_dir: str) -> int:
    """
    Recursively index all .go files under `root_dir`. Returns the number of
    files indexed.

    Files that cannot be read or parsed are logged and skipped. An error
    enumerating the tree itself (e.g. `root_dir` does not exist) is raised.
    """
    indexed = 0
    for full in iter_go_files(root_dir):
        logger.debug("Analyzing file: %s", full)
        try:
            src = read_bytes(full)
        except OSError as e:
            logger.warning("Error reading file %s: %s", full, e)
            continue

        try:
            indexer.index_source(src, full)
        except GoParseError as e:
            logger.warning("Error parsing file %s: %s", full, e)
            continue
        indexed += 1

    return indexed
