"""Directory tree composition: clean, copy, overlay and entry-file promotion.

Every operation is safe to repeat after a failed run; copies overwrite what a
previous attempt left behind.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Iterator
from pathlib import Path

from tv_packager.errors import ConflictingEntryFileError, MissingSourceError
from tv_packager.types import ScriptMap

logger = logging.getLogger(__name__)

CANONICAL_ENTRY_FILE = "index.html"
OVERLAY_SUBDIR = "www"


def _copy_entry(source: Path, target: Path) -> None:
    if source.is_dir():
        shutil.copytree(source, target, dirs_exist_ok=True)
    else:
        if target.is_dir():
            shutil.rmtree(target)
        shutil.copy2(source, target)


def _visible_entries(directory: Path) -> Iterator[Path]:
    return (entry for entry in sorted(directory.iterdir()) if not entry.name.startswith("."))


def _hidden_entries(directory: Path) -> Iterator[Path]:
    return (entry for entry in sorted(directory.iterdir()) if entry.name.startswith("."))


def _require_dir(path: Path, label: str) -> None:
    if not path.is_dir():
        raise MissingSourceError(f"{label} not found: {path}")


def clean(dest: Path) -> None:
    """Remove ``dest`` recursively; a missing directory is not an error."""
    if dest.is_dir() and not dest.is_symlink():
        shutil.rmtree(dest)
    elif dest.exists() or dest.is_symlink():
        dest.unlink()
    logger.debug("Cleaned %s", dest)


def ensure_dir(dest: Path) -> None:
    """Create each missing segment of ``dest`` from the root down."""
    for segment in reversed((dest, *dest.parents)):
        if not segment.exists():
            segment.mkdir()


def copy_app_source(www_src: Path, dest: Path) -> None:
    """Copy every entry of ``www_src`` into ``dest``, overwriting."""
    _require_dir(www_src, "Application source directory")
    for entry in sorted(www_src.iterdir()):
        _copy_entry(entry, dest / entry.name)
    logger.debug("Copied application sources %s -> %s", www_src, dest)


def promote_entry_file(dest: Path, declared_entry: str) -> None:
    """Rename the declared entry file to ``index.html``.

    Raises
    ------
    ConflictingEntryFileError
        If the declared entry differs from ``index.html`` and ``index.html``
        already exists in ``dest``.
    MissingSourceError
        If the declared entry file is not present in ``dest``.
    """
    if declared_entry == CANONICAL_ENTRY_FILE:
        return
    canonical = dest / CANONICAL_ENTRY_FILE
    if canonical.exists():
        raise ConflictingEntryFileError(
            f"The declared entry file is '{declared_entry}', but another "
            f"'{CANONICAL_ENTRY_FILE}' already exists in the source."
        )
    declared = dest / declared_entry
    if not declared.is_file():
        raise MissingSourceError(f"Declared entry file not found: {declared}")
    declared.rename(canonical)
    logger.debug("Promoted %s to %s", declared_entry, CANONICAL_ENTRY_FILE)


def overlay_platform_files(platform_repos: Path, dest: Path) -> None:
    """Superimpose ``platform_repos/www`` onto ``dest``.

    Hidden entries are copied in their own pass after the visible ones;
    a plain ``*`` glob never matches leading-dot names.
    """
    overlay = platform_repos / OVERLAY_SUBDIR
    _require_dir(overlay, "Platform overlay directory")
    for entry in _visible_entries(overlay):
        _copy_entry(entry, dest / entry.name)
    for entry in _hidden_entries(overlay):
        _copy_entry(entry, dest / entry.name)
    logger.debug("Overlaid platform files %s -> %s", overlay, dest)


def copy_auxiliary_scripts(script_map: ScriptMap, dest: Path) -> None:
    """Copy each ``name -> source`` file to ``dest/name``, overwriting."""
    for name, source in script_map.items():
        source = source.resolve()
        if not source.is_file():
            raise MissingSourceError(f"Script '{name}' not found: {source}")
        target = dest / name
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(source, target)
        logger.debug("Copied script %s -> %s", source, target)
