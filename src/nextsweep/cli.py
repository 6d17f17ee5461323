from __future__ import annotations

import argparse
import logging
from collections.abc import Iterable
from pathlib import Path

from nextsweep import __version__

logger = logging.getLogger(__name__)


def main(argv: Iterable[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="nextsweep",
        description=(
            "Report files in a Next.js project that nothing appears to reference. "
            "Results are heuristic: review every file before deleting it."
        ),
    )
    parser.add_argument("--path", default=".", help="Project directory (contains src/ and public/)")
    parser.add_argument("--json", dest="json_path", default=None, help="Also write the report as JSON to this file")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log per-file verdicts")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    args = parser.parse_args(list(argv) if argv is not None else None)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    root = Path(args.path).resolve()
    if not root.exists() or not root.is_dir():
        raise SystemExit(f"Path does not exist or is not a directory: {root}")

    from nextsweep.analyzer import analyze, write_report
    from nextsweep.report import print_report

    try:
        report = analyze(root)
        print_report(report, color=False if args.no_color else None)
        if args.json_path:
            write_report(Path(args.json_path), report)
    except Exception:
        logger.exception("Scan of %s failed", root)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
