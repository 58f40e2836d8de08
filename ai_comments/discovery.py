"""Source file discovery."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, List

from .config import DEFAULT_EXTENSIONS, DEFAULT_SKIP_DIRS

logger = logging.getLogger(__name__)


def collect_source_files(
    root: Path,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    skip_dirs: Iterable[str] = DEFAULT_SKIP_DIRS,
) -> List[Path]:
    """
    Recursively collect files with one of the allowed extensions.

    Directories listed in ``skip_dirs`` and hidden directories (name
    starting with ``.``) are not entered.  Symbolic links are neither
    followed nor collected.  Entries are visited depth-first in name
    order, so the result is stable between runs.

    Args:
        root: Directory to walk
        extensions: Allowed file suffixes, including the leading dot
        skip_dirs: Directory names that are never entered

    Returns:
        Paths of matching files in traversal order
    """
    allowed = set(extensions)
    skipped = set(skip_dirs)
    result: List[Path] = []

    def walk(current: Path) -> None:
        with os.scandir(current) as it:
            entries = sorted(it, key=lambda entry: entry.name)
        for entry in entries:
            full = current / entry.name
            if entry.is_dir(follow_symlinks=False):
                if entry.name in skipped or entry.name.startswith("."):
                    logger.debug("Skipping directory %s", full)
                    continue
                walk(full)
            elif entry.is_file(follow_symlinks=False):
                if full.suffix in allowed:
                    result.append(full)

    walk(Path(root))
    logger.debug("Found %d source file(s) under %s", len(result), root)
    return result


__all__ = ["collect_source_files"]
