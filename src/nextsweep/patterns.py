"""Fixed tables shared by the indexer, classifier and resolver.

Everything here is built once at import time and never mutated.
"""

from __future__ import annotations

import re

CRITICAL_FILES = frozenset(
    {
        "layout.tsx",
        "page.tsx",
        "loading.tsx",
        "error.tsx",
        "not-found.tsx",
        "route.ts",
        "middleware.ts",
        "robots.ts",
        "sitemap.ts",
        "manifest.ts",
        "global.d.ts",
        "globals.css",
        "analytics.ts",
        "metadata.ts",
        "schema.js",
    }
)

# Directory names pruned anywhere, and sub-paths pruned relative to the project root.
IGNORED_DIRS = frozenset({"node_modules", ".next", "dist", ".git", ".husky"})
IGNORED_SUBPATHS = frozenset({"public/chunks", "public/static"})

MEDIA_EXTENSIONS = frozenset(
    {
        ".jpg",
        ".jpeg",
        ".png",
        ".gif",
        ".svg",
        ".webp",
        ".ico",
        ".mp4",
        ".webm",
        ".m4s",
        ".mp3",
        ".wav",
        ".ogg",
    }
)
SOURCE_EXTENSIONS = frozenset(
    {".ts", ".tsx", ".js", ".jsx", ".css", ".scss", ".sass", ".less"}
)

API_SEGMENT = "/api/"
API_PATTERNS = (
    re.compile(r"""fetch\(['"`]/api/([^'"`]+)['"`]\)"""),
    re.compile(r"""axios\.[a-z]+\(['"`]/api/([^'"`]+)['"`]\)"""),
    re.compile(r"/api/([a-zA-Z0-9\-_/]+)"),
)
API_SUFFIX = re.compile(r"\.[jt]s$")

IMPORT_PATTERNS = (
    re.compile(r"""import\s+(?:\{[\s\w,]+\}|\w+)\s+from\s+['"]([^'"]+)['"]"""),
    re.compile(r"""import\(['"]([^'"]+)['"]\)"""),
    re.compile(r"""require\(['"]([^'"]+)['"]\)"""),
)
# next/dynamic lazy loads: a presence signal only, the argument is not captured.
LAZY_IMPORT_PATTERN = re.compile(r"""dynamic\([^)]+['"]\)""")
SCRIPT_EXTENSION = re.compile(r"\.(js|jsx|ts|tsx)$")

COMPONENT_NAME = re.compile(r"^[A-Z].*\.(tsx|jsx)$")
HOOK_NAME = re.compile(r"^use[A-Z].*\.(ts|tsx)$")
CONTEXT_NAME = re.compile(r"(Context|Provider)\.(ts|tsx)$")
TYPE_NAME = re.compile(r"\.d\.ts$")
STYLE_NAME = re.compile(r"\.(css|scss|sass|less)$")

# Public assets consumed by crawlers and streaming players, never by source text.
KEPT_ASSET_NAMES = frozenset({"robots.txt", "sitemap.xml"})
KEPT_ASSET_MARKER = "segment_"
KEPT_ASSET_SUFFIX = ".m4s"
