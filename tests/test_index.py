from __future__ import annotations

import logging
import textwrap
from pathlib import Path

import pytest

from nextsweep.index import build_index, extract_import_targets, has_lazy_import


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)


SOURCE = textwrap.dedent(
    """
    import React from "react";
    import Button from "./Button";
    import { format, parse } from '../lib/dates.ts';
    const Chart = import("./Chart.jsx");
    const fs = require("fs");
    const settings = require("./settings.js");
    """
)


def test_extracts_relative_targets_with_and_without_extension() -> None:
    targets = extract_import_targets(SOURCE)

    assert targets == {
        "./Button",
        "../lib/dates.ts",
        "../lib/dates",
        "./Chart.jsx",
        "./Chart",
        "./settings.js",
        "./settings",
    }


def test_package_imports_are_ignored() -> None:
    targets = extract_import_targets('import React from "react";\nconst x = require("lodash");\n')
    assert targets == frozenset()


def test_lazy_import_is_a_presence_signal() -> None:
    assert has_lazy_import('const Map = dynamic(import("./Map"));')
    assert not has_lazy_import("const x = 1;")


def test_build_index_reads_each_file(tmp_path: Path) -> None:
    _write(tmp_path / "src" / "App.tsx", SOURCE)
    _write(tmp_path / "src" / "Button.tsx", "export const Button = () => null;\n")

    index = build_index([tmp_path / "src" / "Button.tsx", tmp_path / "src" / "App.tsx"])

    assert list(index) == [tmp_path / "src" / "App.tsx", tmp_path / "src" / "Button.tsx"]
    record = index[tmp_path / "src" / "App.tsx"]
    assert record.content == SOURCE
    assert "./Button" in record.import_targets
    assert not record.lazy_import


def test_build_index_skips_unreadable_files(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    _write(tmp_path / "src" / "kept.ts", "export {};\n")
    missing = tmp_path / "src" / "vanished.ts"

    with caplog.at_level(logging.WARNING, logger="nextsweep.index"):
        index = build_index([tmp_path / "src" / "kept.ts", missing])

    assert list(index) == [tmp_path / "src" / "kept.ts"]
    assert "vanished.ts" in caplog.text
