from __future__ import annotations

from pathlib import Path, PurePath

from nextsweep.models import Category
from nextsweep.patterns import (
    API_SEGMENT,
    COMPONENT_NAME,
    CONTEXT_NAME,
    CRITICAL_FILES,
    HOOK_NAME,
    MEDIA_EXTENSIONS,
    STYLE_NAME,
    TYPE_NAME,
)


def is_critical(path: Path | str, root: Path | str | None = None) -> bool:
    """Framework entry points that are used by convention rather than by reference."""
    posix = anchored_path(path, root)
    name = PurePath(posix).name
    if name in CRITICAL_FILES:
        return True
    if API_SEGMENT in posix:
        return True
    if PurePath(posix).parent.name == "app" and name.startswith("page."):
        return True
    return False


def classify(path: Path | str, root: Path | str | None = None) -> Category:
    """Map a path to its report category; the first matching rule wins."""
    posix = anchored_path(path, root)
    name = PurePath(posix).name
    extension = PurePath(name).suffix.lower()

    if API_SEGMENT in posix:
        return "api"
    if "/app/" in posix and name.startswith("page."):
        return "page"
    if extension in MEDIA_EXTENSIONS:
        return "media"
    if COMPONENT_NAME.search(name):
        return "component"
    if HOOK_NAME.search(name):
        return "hook"
    if CONTEXT_NAME.search(name):
        return "context"
    if TYPE_NAME.search(name):
        return "type"
    if STYLE_NAME.search(name):
        return "style"
    return "util"


def anchored_path(path: Path | str, root: Path | str | None = None) -> str:
    """POSIX form of ``path`` below ``root`` (when given), with a leading slash.

    Anchoring makes "api/x.ts" and "/repo/src/api/x.ts" match segment rules
    alike, and stripping ``root`` keeps the checkout location out of them.
    """
    if root is not None:
        try:
            path = PurePath(path).relative_to(root)
        except ValueError:
            pass
    return "/" + PurePath(path).as_posix().lstrip("/")
