"""Recursive source-file enumeration."""

from __future__ import annotations

import fnmatch
from pathlib import Path
from typing import Iterable


def collect_source_files(
    directory: Path,
    extensions: Iterable[str],
    skip_dirs: Iterable[str] = (),
) -> list[Path]:
    """Return every file under ``directory`` with a matching suffix, sorted."""
    extensions = tuple(extensions)
    skip_dirs = list(skip_dirs)
    files: list[Path] = []
    for path in sorted(directory.rglob("*")):
        if path.is_dir():
            continue
        if _should_skip(path.relative_to(directory), skip_dirs):
            continue
        if path.suffix in extensions:
            files.append(path)
    return files


def _should_skip(path: Path, skip_dirs: list[str]) -> bool:
    for part in path.parts[:-1]:
        for pattern in skip_dirs:
            if fnmatch.fnmatch(part, pattern):
                return True
    return False
