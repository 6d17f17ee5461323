"""Content index: raw text plus statically extracted relative imports per file."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from nextsweep.models import FileRecord
from nextsweep.patterns import IMPORT_PATTERNS, LAZY_IMPORT_PATTERN, SCRIPT_EXTENSION

logger = logging.getLogger(__name__)


def extract_import_targets(text: str) -> frozenset[str]:
    """Return relative import targets found in ``text``.

    Package imports are ignored. Each target is kept both as written and with
    its script extension stripped, since other files may refer to it either way.
    """
    targets: set[str] = set()
    for pattern in IMPORT_PATTERNS:
        for match in pattern.finditer(text):
            target = match.group(1)
            if not target.startswith("."):
                continue
            targets.add(target)
            targets.add(SCRIPT_EXTENSION.sub("", target))
    return frozenset(targets)


def has_lazy_import(text: str) -> bool:
    return LAZY_IMPORT_PATTERN.search(text) is not None


def read_record(path: Path) -> FileRecord:
    content = Path(path).read_text(encoding="utf-8", errors="ignore")
    return FileRecord(
        path=Path(path),
        content=content,
        import_targets=extract_import_targets(content),
        lazy_import=has_lazy_import(content),
    )


def build_index(paths: Iterable[Path]) -> dict[Path, FileRecord]:
    index: dict[Path, FileRecord] = {}
    for path in sorted({Path(p) for p in paths}, key=lambda p: p.as_posix()):
        try:
            index[path] = read_record(path)
        except OSError as exc:
            logger.warning("Error analyzing %s: %s", path, exc)
    return index
