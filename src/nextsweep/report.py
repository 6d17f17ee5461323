from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterable
from pathlib import Path

from nextsweep.models import Category, CategorySummary, Report, UnusedFile

BYTE_UNITS = ("Bytes", "KB", "MB", "GB")
WIDTH = 80

EMOJI: dict[str, str] = {
    "media": "🖼 ",
    "component": "⚛️ ",
    "util": "🛠 ",
    "type": "📝",
    "hook": "🎣",
    "context": "🔄",
    "style": "🎨",
    "api": "🔌",
    "page": "📄",
}

Painter = Callable[[str, str], str]

_STYLES = {
    "blue": "34",
    "green": "32",
    "yellow": "33",
    "gray": "90",
    "white": "37",
    "bold": "1",
}


def summarize(unused_files: Iterable[UnusedFile]) -> list[CategorySummary]:
    """Group unused files by category, keeping the order categories first appear in."""
    groups: dict[Category, list[UnusedFile]] = {}
    for unused in unused_files:
        groups.setdefault(unused.type, []).append(unused)
    return [
        CategorySummary(
            category=category,
            count=len(files),
            size=sum(f.size for f in files),
            files=files,
        )
        for category, files in groups.items()
    ]


def format_bytes(size: int) -> str:
    if size == 0:
        return "0 Bytes"
    unit = 0
    while unit < len(BYTE_UNITS) - 1 and size >= 1024 ** (unit + 1):
        unit += 1
    value = f"{size / 1024 ** unit:.2f}".rstrip("0").rstrip(".")
    return f"{value} {BYTE_UNITS[unit]}"


def render_report(report: Report, color: bool = False) -> str:
    paint = _painter(color)
    lines = _render_header(paint)
    lines.extend(
        [
            "",
            paint("gray", "Found:"),
            paint("blue", "├─") + paint("white", f" {report.source_files} source files"),
            paint("blue", "└─") + paint("white", f" {report.public_files} public files"),
        ]
    )

    if not report.unused_files:
        lines.append("")
        lines.append(paint("green", "✨ No unused files found!"))
        lines.append("")
        return "\n".join(lines)

    lines.extend(
        [
            "",
            paint("blue", "📊 Summary:"),
            paint("blue", "├─")
            + paint("white", f" Unused files found: {len(report.unused_files)}"),
            paint("blue", "├─")
            + paint("white", f" Types of unused files: {len(report.by_category)}"),
            paint("blue", "└─")
            + paint("white", f" Potential savings: {format_bytes(report.total_size)}"),
        ]
    )

    root = Path(report.root)
    for summary in report.by_category:
        title = f"{EMOJI.get(summary.category, '📁')} {summary.category.upper()} ({summary.count} files)"
        lines.extend(_render_section(title, paint))
        lines.append(paint("gray", f"Total size: {format_bytes(summary.size)}"))
        for position, unused in enumerate(summary.files):
            prefix = "└─" if position == len(summary.files) - 1 else "├─"
            lines.append(
                paint("blue", prefix)
                + paint("yellow", f" {_relative(unused.path, root)}")
                + paint("gray", f" ({format_bytes(unused.size)})")
            )

    lines.extend(
        [
            "",
            paint("yellow", "⚠️  Important Notes:"),
            paint("gray", "├─ Please verify files manually before deleting"),
            paint("gray", "├─ Some files might be used through dynamic imports"),
            paint("gray", "├─ API routes might be called from external sources"),
            paint("gray", "└─ Files might be used in ways not detected by this scan"),
            "",
        ]
    )
    return "\n".join(lines)


def print_report(report: Report, color: bool | None = None) -> None:
    if color is None:
        color = sys.stdout.isatty() and "NO_COLOR" not in os.environ
    print(render_report(report, color=color))


def _render_header(paint: Painter) -> list[str]:
    return [
        "",
        paint("blue", "━" * WIDTH),
        paint("blue", "   ╭─────────────────────────────────────────────────────╮"),
        paint("blue", "   │             Next.js Unused Files Finder             │"),
        paint("blue", "   ╰─────────────────────────────────────────────────────╯"),
    ]


def _render_section(title: str, paint: Painter) -> list[str]:
    inner = WIDTH - 2
    return [
        "",
        paint("blue", "┌" + "─" * inner + "┐"),
        paint("blue", "│") + paint("bold", f" {title}".ljust(inner - 1)) + paint("blue", " │"),
        paint("blue", "└" + "─" * inner + "┘"),
        "",
    ]


def _relative(path: Path, root: Path) -> str:
    try:
        return Path(path).relative_to(root).as_posix()
    except ValueError:
        return Path(path).as_posix()


def _painter(color: bool) -> Painter:
    def paint(style: str, text: str) -> str:
        if not color:
            return text
        return f"\033[{_STYLES[style]}m{text}\033[0m"

    return paint
