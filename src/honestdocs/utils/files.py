"""Utility helpers for working with files."""

from __future__ import annotations

import os
from pathlib import Path, PurePosixPath
from typing import Collection, Iterator


class FilesystemError(OSError):
    """Raised when the docs tree or an output file cannot be accessed."""


def is_excluded(rel_path: str, names: Collection[str]) -> bool:
    """Return True when a directory component of ``rel_path`` is in ``names``."""
    return any(part in names for part in PurePosixPath(rel_path).parts[:-1])


def is_hidden(rel_path: str) -> bool:
    """Return True when any component of ``rel_path`` starts with a dot."""
    return any(part.startswith(".") for part in PurePosixPath(rel_path).parts)


def iter_markdown_paths(root: Path, *, exclude: Collection[str] = ()) -> Iterator[str]:
    """Yield docs-relative POSIX paths of every ``*.md`` file under ``root``.

    Paths come out sorted so repeated runs produce identical bundles.
    Dot-files and anything under dot-directories (``.vitepress/``) are skipped.
    """
    if not root.is_dir():
        raise FilesystemError(f"Docs directory not found: {root}")

    # rglob silently yields nothing for an unreadable root
    try:
        with os.scandir(root):
            pass
    except OSError as exc:
        raise FilesystemError(f"Cannot read {root}: {exc}") from exc

    try:
        found = sorted(
            path.relative_to(root).as_posix()
            for path in root.rglob("*.md")
            if path.is_file()
        )
    except OSError as exc:
        raise FilesystemError(f"Cannot scan {root}: {exc}") from exc

    for rel_path in found:
        if is_hidden(rel_path):
            continue
        if exclude and is_excluded(rel_path, exclude):
            continue
        yield rel_path


def read_markdown(root: Path, rel_path: str) -> str:
    """Read a docs page as UTF-8, keeping its line endings.

    Undecodable bytes become U+FFFD instead of failing the build.
    """
    path = root / rel_path
    try:
        with path.open(encoding="utf-8", errors="replace", newline="") as handle:
            return handle.read()
    except OSError as exc:
        raise FilesystemError(f"Cannot read {path}: {exc}") from exc


def write_text(path: Path, text: str) -> None:
    """Overwrite ``path`` with ``text``, creating parent directories."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8", newline="")
    except OSError as exc:
        raise FilesystemError(f"Cannot write {path}: {exc}") from exc
