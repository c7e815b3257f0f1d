"""Source file discovery for lint runs."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from fsdlint.helpers.glob_helper import matches_any

logger = logging.getLogger(__name__)

# Never descended into
SKIPPED_DIRS = frozenset({"node_modules", ".git", "dist", "build", "coverage", ".next", ".turbo", "__pycache__"})


def is_source_file(path: str | Path, extensions: Iterable[str]) -> bool:
    """True if the file name ends with one of the extensions (".d.ts" included under ".ts")."""
    name = str(path).lower()
    return any(name.endswith(ext.lower()) for ext in extensions)


def discover_source_files(
    root: str | Path,
    extensions: Iterable[str],
    exclude_patterns: Iterable[str] = (),
) -> list[Path]:
    """
    Collect source files under root.

    Args:
        root: A directory to walk, or a single file
        extensions: File extensions to include (".ts", ".tsx", ...)
        exclude_patterns: Glob patterns matched against root-relative POSIX paths

    Returns:
        Sorted list of file paths. A missing root yields an empty list.
    """
    root_path = Path(root)
    extensions = tuple(extensions)
    excludes = tuple(exclude_patterns)

    if root_path.is_file():
        return [root_path] if is_source_file(root_path, extensions) else []
    if not root_path.is_dir():
        logger.warning("[SourceDiscovery] Path does not exist: %s", root_path)
        return []

    found: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root_path):
        dirnames[:] = sorted(d for d in dirnames if d not in SKIPPED_DIRS)
        for filename in filenames:
            if not is_source_file(filename, extensions):
                continue
            file_path = Path(dirpath) / filename
            rel_path = file_path.relative_to(root_path).as_posix()
            if matches_any(rel_path, excludes):
                continue
            found.append(file_path)

    found.sort()
    logger.debug("[SourceDiscovery] %d source file(s) under %s", len(found), root_path)
    return found
