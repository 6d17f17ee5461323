from __future__ import annotations

from pathlib import Path

import pytest

from nextsweep.classifier import classify, is_critical


@pytest.mark.parametrize(
    "path",
    [
        "/repo/src/app/layout.tsx",
        "/repo/src/app/dashboard/page.tsx",
        "/repo/src/app/page.jsx",
        "/repo/src/middleware.ts",
        "/repo/src/app/globals.css",
        "/repo/src/types/global.d.ts",
        "/repo/src/pages/api/hello.js",
        "app/page.tsx",
    ],
)
def test_critical_files(path: str) -> None:
    assert is_critical(path)


@pytest.mark.parametrize(
    "path",
    [
        "/repo/src/components/Button.tsx",
        "/repo/src/features/page.jsx",
        "/repo/src/app/layout.jsx",
        "/repo/src/lib/apiClient.ts",
    ],
)
def test_non_critical_files(path: str) -> None:
    assert not is_critical(path)


@pytest.mark.parametrize(
    ("path", "category"),
    [
        ("/repo/src/app/api/users/route.ts", "api"),
        ("/repo/src/app/api/Avatar.png", "api"),
        ("/repo/src/app/page.tsx", "page"),
        ("/repo/src/app/shop/page.jsx", "page"),
        ("/repo/public/hero.PNG", "media"),
        ("/repo/src/assets/Logo.svg", "media"),
        ("/repo/src/components/Button.tsx", "component"),
        ("/repo/src/components/Card.jsx", "component"),
        ("/repo/src/hooks/useModal.tsx", "hook"),
        ("/repo/src/hooks/useCart.ts", "hook"),
        ("/repo/src/context/themeContext.tsx", "context"),
        ("/repo/src/context/AuthProvider.ts", "context"),
        ("/repo/src/types/models.d.ts", "type"),
        ("/repo/src/styles/home.module.scss", "style"),
        ("/repo/src/components/Card.module.css", "style"),
        ("/repo/src/lib/format.ts", "util"),
        ("/repo/src/lib/usemodal.ts", "util"),
        ("/repo/src/lib/helpers.js", "util"),
    ],
)
def test_classify(path: str, category: str) -> None:
    assert classify(path) == category


def test_capitalized_names_classify_as_component_before_later_rules() -> None:
    assert classify("/repo/src/hooks/UseModal.tsx") == "component"
    assert classify("/repo/src/context/ThemeContext.tsx") == "component"
    assert classify("/repo/src/context/ThemeContext.ts") == "context"


def test_classify_accepts_path_objects() -> None:
    assert classify(Path("src") / "app" / "api" / "cart.ts") == "api"
    assert is_critical(Path("src") / "app" / "api" / "cart.ts")


def test_segment_rules_ignore_directories_above_root() -> None:
    root = Path("/work/api/app/shop")

    assert not is_critical(root / "src" / "lib" / "orphan.ts", root)
    assert classify(root / "src" / "lib" / "orphan.ts", root) == "util"
    assert classify(root / "src" / "app" / "api" / "cart.ts", root) == "api"
    assert is_critical(root / "src" / "app" / "page.tsx", root)


def test_path_outside_root_is_matched_whole() -> None:
    assert classify("/elsewhere/api/cart.ts", Path("/work/shop")) == "api"
