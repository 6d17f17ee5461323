from __future__ import annotations

import json
import logging
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path

from nextsweep.classifier import classify
from nextsweep.index import build_index
from nextsweep.models import Category, Report, UnusedFile, Verdict
from nextsweep.patterns import SOURCE_EXTENSIONS
from nextsweep.report import summarize
from nextsweep.resolver import resolve_all, resolve_assets
from nextsweep.walk import list_files

logger = logging.getLogger(__name__)

SOURCE_DIR = "src"
PUBLIC_DIR = "public"


def analyze(root: Path) -> Report:
    root = Path(root).resolve()
    source_files = [
        path
        for path in list_files(root / SOURCE_DIR, prune_root=root)
        if path.suffix.lower() in SOURCE_EXTENSIONS
    ]
    public_files = list_files(root / PUBLIC_DIR, prune_root=root)
    logger.info(
        "Scanning %d source files and %d public files under %s",
        len(source_files),
        len(public_files),
        root,
    )

    index = build_index(source_files)
    unused_files: list[UnusedFile] = []

    for path, verdict in resolve_all(index, root).items():
        if not verdict.used:
            _append_unused(unused_files, verdict, classify(path, root))

    for verdict in resolve_assets(public_files, index).values():
        if not verdict.used:
            _append_unused(unused_files, verdict, "media")

    return Report(
        root=str(root),
        generated_at=datetime.now(timezone.utc).isoformat(),
        source_files=len(source_files),
        public_files=len(public_files),
        unused_files=unused_files,
        total_size=sum(f.size for f in unused_files),
        by_category=summarize(unused_files),
    )


def write_report(path: Path, report: Report) -> None:
    Path(path).write_text(
        json.dumps(asdict(report), indent=2, sort_keys=True, default=str)
    )


def _append_unused(
    unused_files: list[UnusedFile], verdict: Verdict, category: Category
) -> None:
    # Size comes from a fresh stat, not from indexing; vanished files are dropped.
    try:
        size = verdict.path.stat().st_size
    except OSError as exc:
        logger.warning("Error getting stats for %s: %s", verdict.path, exc)
        return
    unused_files.append(
        UnusedFile(path=verdict.path, size=size, type=category, reason=verdict.reason)
    )
