"""Filesystem access for content files.

This module handles the actual file I/O and discovery; parsing lives in
:mod:`folio.domain.frontmatter`.
"""

from __future__ import annotations

from pathlib import Path

from folio.domain.errors import ReadFailureError
from folio.domain.types import CONTENT_EXTENSIONS

# Directories to skip when discovering content files.
_SKIP_DIRS = frozenset({".git", ".hg", "__pycache__", "node_modules"})


def read_file(path: Path) -> str:
    """Read *path* as UTF-8 text.

    Raises:
        ReadFailureError: If the file is missing, unreadable, or not UTF-8.
    """
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Failed to read '{path}'"
        raise ReadFailureError(msg, path=path) from exc


def is_content_file(path: Path) -> bool:
    return path.suffix.lower() in CONTENT_EXTENSIONS


def find_related_assets(directory: Path) -> list[Path]:
    """Non-content files directly inside *directory*, sorted by name."""
    if not directory.is_dir():
        return []
    return sorted(
        entry for entry in directory.iterdir() if entry.is_file() and not is_content_file(entry)
    )


def find_content_files(content_root: Path) -> list[Path]:
    """Discover every markdown file under *content_root*, sorted."""
    if not content_root.is_dir():
        return []

    results: list[Path] = []
    for path in content_root.rglob("*"):
        if not path.is_file() or not is_content_file(path):
            continue
        if any(part in _SKIP_DIRS for part in path.relative_to(content_root).parts):
            continue
        results.append(path)
    return sorted(results)
