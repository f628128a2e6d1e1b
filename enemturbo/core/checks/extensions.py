"""Detect stray files with disallowed extensions under a directory tree."""


import os
import stat
from collections.abc import Iterable
from pathlib import Path

from .report import ScanResult

DEFAULT_DISALLOWED_EXTENSIONS: tuple[str, ...] = (".ts", ".tsx")


def _normalize_extensions(extensions: Iterable[str]) -> tuple[str, ...]:
    normalized = []
    for ext in extensions:
        ext = str(ext or "").strip()
        if not ext:
            continue
        normalized.append(ext if ext.startswith(".") else f".{ext}")
    return tuple(normalized)


def scan_for_extensions(
    root: str | Path,
    extensions: Iterable[str] = DEFAULT_DISALLOWED_EXTENSIONS,
) -> ScanResult:
    """Return the first file under ``root`` whose name ends with a disallowed suffix.

    The walk is depth-first in sorted name order and stops at the first match.
    It keeps its own stack, so tree depth is not bounded by the recursion limit.
    Symbolic links are never followed, and directories are tracked by
    ``(st_dev, st_ino)`` so a tree can't be walked twice.
    """
    root_path = Path(root)
    if not root_path.is_dir():
        return ScanResult.error(f"root directory not found: {root_path}")

    suffixes = _normalize_extensions(extensions)
    if not suffixes:
        return ScanResult.clear()

    visited: set[tuple[int, int]] = set()
    pending: list[os.DirEntry | Path] = [root_path]

    while pending:
        item = pending.pop()
        if isinstance(item, os.DirEntry):
            if item.is_symlink():
                continue
            try:
                mode = item.stat(follow_symlinks=False).st_mode
            except OSError as exc:
                return ScanResult.error(f"cannot stat {item.path}: {exc.strerror or exc}")
            if not stat.S_ISDIR(mode):
                if item.name.endswith(suffixes):
                    return ScanResult.found(Path(item.path))
                continue
            directory = Path(item.path)
        else:
            directory = item

        try:
            info = directory.stat()
        except OSError as exc:
            return ScanResult.error(f"cannot stat {directory}: {exc.strerror or exc}")
        key = (info.st_dev, info.st_ino)
        if key in visited:
            continue
        visited.add(key)

        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda entry: entry.name)
        except OSError as exc:
            return ScanResult.error(f"cannot read {directory}: {exc.strerror or exc}")
        # Reversed so the smallest name is popped first.
        pending.extend(reversed(entries))

    return ScanResult.clear()


__all__ = ["DEFAULT_DISALLOWED_EXTENSIONS", "scan_for_extensions"]
