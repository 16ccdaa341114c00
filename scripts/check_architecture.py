#!/usr/bin/env python3
"""Architecture boundary checks."""

from __future__ import annotations

from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE = ROOT / "src/tv_packager"


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _assert_no_imports(path: Path, banned: list[str]) -> None:
    text = _read(path)
    for token in banned:
        if token in text:
            raise SystemExit(f"Architecture violation in {path}: found '{token}'")


def main() -> None:
    """Run repository architecture boundary checks."""
    for layer in ("application", "infrastructure", "platforms"):
        for path in (PACKAGE / layer).glob("*.py"):
            if path.name == "use_cases.py":
                continue
            _assert_no_imports(
                path,
                [
                    "import typer",
                    "from typer",
                    "import click",
                    "import jinja2",
                    "from jinja2",
                    "import subprocess",
                ],
            )

    for path in (PACKAGE / "infrastructure").glob("*.py"):
        _assert_no_imports(path, ["tv_packager.platforms", "tv_packager.cli"])

    print("Architecture checks passed.")


if __name__ == "__main__":
    main()
