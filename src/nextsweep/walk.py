from __future__ import annotations

import logging
import os
from pathlib import Path

from nextsweep.patterns import IGNORED_DIRS, IGNORED_SUBPATHS

logger = logging.getLogger(__name__)


def list_files(root_dir: Path, prune_root: Path | None = None) -> list[Path]:
    """Recursively list files under ``root_dir``, skipping ignored directories.

    ``IGNORED_SUBPATHS`` are matched relative to ``prune_root`` (``root_dir``
    when not given). A missing root yields an empty list; a directory that
    cannot be read is logged and skipped.
    """
    root_dir = Path(root_dir)
    if not root_dir.is_dir():
        return []
    prune_root = Path(prune_root) if prune_root is not None else root_dir

    results: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root_dir, onerror=_log_walk_error):
        current = Path(dirpath)
        dirnames[:] = [
            name for name in dirnames if not _is_pruned(current / name, prune_root)
        ]
        for name in filenames:
            results.append(current / name)
    results.sort(key=lambda p: p.as_posix())
    return results


def _is_pruned(path: Path, prune_root: Path) -> bool:
    if path.name in IGNORED_DIRS:
        return True
    try:
        rel_path = path.relative_to(prune_root).as_posix()
    except ValueError:
        return False
    return rel_path in IGNORED_SUBPATHS


def _log_walk_error(error: OSError) -> None:
    logger.warning("Error reading directory %s: %s", error.filename, error)
