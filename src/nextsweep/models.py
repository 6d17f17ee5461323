from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

Category = Literal[
    "media",
    "component",
    "util",
    "type",
    "hook",
    "context",
    "style",
    "api",
    "page",
]


@dataclass(frozen=True)
class FileRecord:
    path: Path
    content: str
    import_targets: frozenset[str] = frozenset()
    lazy_import: bool = False


@dataclass(frozen=True)
class Verdict:
    path: Path
    used: bool
    reason: str | None = None  # "critical_file", "name_referenced", ... or "no_reference"
    referenced_by: Path | None = None


@dataclass(frozen=True)
class UnusedFile:
    path: Path
    size: int
    type: Category
    reason: str | None = None


@dataclass(frozen=True)
class CategorySummary:
    category: Category
    count: int
    size: int
    files: list[UnusedFile] = field(default_factory=list)


@dataclass(frozen=True)
class Report:
    root: str
    generated_at: str
    source_files: int
    public_files: int
    unused_files: list[UnusedFile]
    total_size: int
    by_category: list[CategorySummary]
