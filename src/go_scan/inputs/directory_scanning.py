# --- Directory scanning ------------------------------------------------------
import logging
import os

from go_scan.errors import ScanError, TraversalError
from go_scan.indexer import GoIndexer
from go_scan.models.ast_models import ProjectSnapshot

log = logging.getLogger(__name__)

SOURCE_SUFFIX = ".go"
TEST_SUFFIX = "_test.go"


def is_skipped_dir(name: str) -> bool:
    return name.startswith(".") or name == "vendor"


def is_source_file(name: str) -> bool:
    return name.endswith(SOURCE_SUFFIX) and not name.endswith(TEST_SUFFIX)


def scan(root_dir, tolerant: bool = False) -> ProjectSnapshot:
    """
    Recursively index all non-test .go files under root_dir.

    Hidden directories and `vendor` are never descended into, and symlinked
    directories are not followed. Entries are visited in sorted order.

    By default the first unreadable directory or file, or the first file that
    fails to parse, raises a ScanError and nothing is returned. With
    tolerant=True those errors are collected in `snapshot.errors`, the
    offending file contributes nothing, and the rest of the tree is still
    indexed. A root that isn't a readable directory always raises.
    """
    root_dir = os.fspath(root_dir)
    if not os.path.isdir(root_dir):
        raise TraversalError(root_dir, "not a directory")

    indexer = GoIndexer()
    snapshot = ProjectSnapshot()

    def record(error: ScanError):
        if not tolerant:
            raise error
        log.warning("Skipping %s", error)
        snapshot.errors.append(error)

    def on_walk_error(e: OSError):
        error = TraversalError(e.filename or root_dir, e.strerror or str(e))
        error.__cause__ = e
        if e.filename is not None and os.path.normpath(e.filename) == os.path.normpath(root_dir):
            raise error
        record(error)

    for dirpath, dirnames, filenames in os.walk(root_dir, onerror=on_walk_error):
        dirnames[:] = sorted(d for d in dirnames if not is_skipped_dir(d))
        for fn in sorted(filenames):
            if not is_source_file(fn):
                continue
            full = os.path.join(dirpath, fn)
            try:
                declarations = indexer.index_file(full)
            except ScanError as e:
                record(e)
                continue
            snapshot.add_file(full, declarations)

    log.debug("Scanned %s: %d declarations across %d files",
              root_dir, len(snapshot.declarations), len(snapshot.files))
    return snapshot
