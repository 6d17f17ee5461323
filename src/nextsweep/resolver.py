"""Decide whether a file is referenced by any other file in the index.

The test is a plain substring scan of every other file's raw text. It is
unsound on purpose: any coincidental occurrence of a file's bare name counts
as a reference, so the tool under-reports unused files rather than over-report.
Every scan is O(n * m) over the index and the full run is quadratic.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path, PurePath

from nextsweep.classifier import anchored_path, is_critical
from nextsweep.models import FileRecord, Verdict
from nextsweep.patterns import (
    API_PATTERNS,
    API_SEGMENT,
    API_SUFFIX,
    KEPT_ASSET_MARKER,
    KEPT_ASSET_NAMES,
    KEPT_ASSET_SUFFIX,
    MEDIA_EXTENSIONS,
)

logger = logging.getLogger(__name__)

Index = Mapping[Path, FileRecord]


def resolve(
    path: Path,
    index: Index,
    root: Path | None = None,
    order: Sequence[Path] | None = None,
) -> Verdict:
    if is_critical(path, root):
        return Verdict(path=path, used=True, reason="critical_file")
    return find_reference(path, index, root, order)


def is_used(path: Path, index: Index, root: Path | None = None) -> bool:
    return resolve(path, index, root).used


def resolve_all(index: Index, root: Path | None = None) -> dict[Path, Verdict]:
    order = _ordered(index)
    verdicts: dict[Path, Verdict] = {}
    for path in order:
        verdict = resolve(path, index, root, order)
        logger.debug("%s: used=%s (%s)", path, verdict.used, verdict.reason)
        verdicts[path] = verdict
    return verdicts


def find_reference(
    path: Path,
    index: Index,
    root: Path | None = None,
    order: Sequence[Path] | None = None,
) -> Verdict:
    """Scan every other indexed file for evidence that ``path`` is referenced.

    Ignores the critical-file exemption; ``resolve`` applies that first.
    ``order`` is the sorted comparison order, computed here when not given.
    """
    name = PurePath(path).name
    stem = PurePath(path).stem
    is_media = PurePath(path).suffix.lower() in MEDIA_EXTENSIONS
    api_path = _api_path(path, root)

    for other in order if order is not None else _ordered(index):
        if other == path:
            continue
        content = index[other].content
        if stem in content:
            return Verdict(path, True, "name_referenced", other)
        if api_path and _calls_api(content, api_path):
            return Verdict(path, True, "api_route_called", other)
        if is_media and name in content:
            return Verdict(path, True, "media_referenced", other)
    return Verdict(path=path, used=False, reason="no_reference")


def is_kept_asset(path: Path) -> bool:
    name = PurePath(path).name
    return (
        name in KEPT_ASSET_NAMES
        or KEPT_ASSET_MARKER in name
        or name.endswith(KEPT_ASSET_SUFFIX)
    )


def resolve_asset(
    path: Path, index: Index, order: Sequence[Path] | None = None
) -> Verdict:
    """Verdict for a public asset, which is never itself part of the index."""
    if is_kept_asset(path):
        return Verdict(path=path, used=True, reason="always_kept_asset")
    name = PurePath(path).name
    for other in order if order is not None else _ordered(index):
        if name in index[other].content:
            return Verdict(path, True, "media_referenced", other)
    return Verdict(path=path, used=False, reason="no_reference")


def resolve_assets(paths: Iterable[Path], index: Index) -> dict[Path, Verdict]:
    order = _ordered(index)
    return {path: resolve_asset(path, index, order) for path in paths}


def _api_path(path: Path, root: Path | None = None) -> str:
    posix = anchored_path(path, root)
    if API_SEGMENT not in posix:
        return ""
    return API_SUFFIX.sub("", posix.split(API_SEGMENT, 1)[1])


def _calls_api(content: str, api_path: str) -> bool:
    return any(
        api_path in match.group(0)
        for pattern in API_PATTERNS
        for match in pattern.finditer(content)
    )


def _ordered(index: Index) -> list[Path]:
    return sorted(index, key=lambda p: PurePath(p).as_posix())
