"""Logic for recursively collecting asset files below a root directory."""

import logging
import os
from collections.abc import Iterable, Sequence
from pathlib import Path, PurePosixPath

from assets_mapper.asset_file import ROOT_DIRECTORY, AssetFile
from assets_mapper.errors import ReadError
from assets_mapper.glob_match import matches_any

logger = logging.getLogger(__name__)


def normalize_exts(exts: Iterable[str]) -> set[str]:
    """Lower-case extensions and drop any leading dot."""
    return {e.strip().lstrip(".").lower() for e in exts if e and e.strip()}


def _list_entries(directory: Path) -> list[os.DirEntry[str]]:
    """List a directory in filesystem order, wrapping OS failures."""
    try:
        with os.scandir(directory) as it:
            return list(it)
    except OSError as exc:
        msg = f"Could not read directory {directory}: {exc.strerror or exc}"
        raise ReadError(msg) from exc


def _make_asset(path: Path, relative_path: str) -> AssetFile:
    rel = PurePosixPath(relative_path)
    parent = str(rel.parent)
    return AssetFile(
        full_path=path,
        relative_path=relative_path,
        filename=rel.name,
        base_name=rel.stem,
        directory=parent if parent else ROOT_DIRECTORY,
    )


def scan_directory(
    root: Path,
    exts: Iterable[str],
    exclude: Sequence[str] | None = None,
    include: Sequence[str] | None = None,
) -> list[AssetFile]:
    """Walk ``root`` depth-first and return the matching asset files.

    Exclude patterns are checked against every file and directory before
    include patterns, and an excluded directory is never entered. Include
    patterns only apply to files. The result is in filesystem order; callers
    that need a stable order must sort it.

    Unreadable directories are logged and skipped.
    """
    allowed = normalize_exts(exts)
    exclude = list(exclude or [])
    include = list(include or [])
    results: list[AssetFile] = []

    def walk(directory: Path, prefix: str) -> None:
        try:
            entries = _list_entries(directory)
        except ReadError as exc:
            logger.warning("%s", exc)
            return

        for entry in entries:
            rel = f"{prefix}{entry.name}"
            if exclude and matches_any(exclude, rel):
                continue
            try:
                # Symlinked directories are not followed to avoid cycles.
                if entry.is_dir(follow_symlinks=False):
                    walk(Path(entry.path), f"{rel}/")
                    continue
                if not entry.is_file():
                    continue
            except OSError as exc:
                logger.warning("Could not stat %s: %s", entry.path, exc)
                continue

            if include and not matches_any(include, rel):
                continue
            ext = PurePosixPath(entry.name).suffix.lstrip(".").lower()
            if ext and ext in allowed:
                results.append(_make_asset(Path(entry.path), rel))

    walk(Path(root), "")
    return results
