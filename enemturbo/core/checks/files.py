"""Required/forbidden file checks relative to a project root."""


from collections.abc import Iterable
from pathlib import Path

from .report import FileCheck, FileCheckReport

# Relative to the client root (the ``enemturbo/client`` package directory).
CLIENT_REQUIRED_FILES: tuple[str, ...] = (
    "templates/index.html",
    "main.py",
    "routes.py",
    "static/enemturbo.pdf",
)
DEFAULT_ROOT_SIBLING = "index.tsx"


def _check_paths(root: str | Path, paths: Iterable[str], *, expected: bool) -> FileCheckReport:
    root_path = Path(root)
    report = FileCheckReport()
    for rel in paths:
        present = (root_path / rel).exists()
        report.items.append(FileCheck(path=str(rel), present=present, expected=expected))
    return report


def check_required_files(root: str | Path, paths: Iterable[str] = CLIENT_REQUIRED_FILES) -> FileCheckReport:
    """Check every path exists under ``root``; never stops at the first miss."""
    return _check_paths(root, paths, expected=True)


def check_forbidden_files(root: str | Path, paths: Iterable[str]) -> FileCheckReport:
    """Same as :func:`check_required_files` but each path is expected to be absent."""
    return _check_paths(root, paths, expected=False)


def find_root_sibling(root: str | Path, name: str = DEFAULT_ROOT_SIBLING) -> Path | None:
    candidate = Path(root).resolve().parent / name
    if candidate.exists():
        return candidate
    return None


__all__ = [
    "CLIENT_REQUIRED_FILES",
    "DEFAULT_ROOT_SIBLING",
    "check_forbidden_files",
    "check_required_files",
    "find_root_sibling",
]
