"""Reducer file selection by naming convention."""

from __future__ import annotations

import fnmatch
import logging
import os
from pathlib import Path

from tcalint.exceptions import ConfigError

logger = logging.getLogger(__name__)


def select_files(
    root: Path,
    include_patterns: tuple[str, ...],
    exclude_dirs: tuple[str, ...],
    max_file_mb: int | None = None,
) -> list[Path]:
    """Return files under ``root`` whose name matches an include pattern.

    Any file with a path segment equal to an excluded directory is skipped.
    The result is sorted by POSIX path relative to ``root`` so reports are
    reproducible.  An empty list is a normal outcome; only a missing or
    unreadable root raises :class:`ConfigError`.
    """
    resolved_root = root.resolve()
    if not resolved_root.exists():
        raise ConfigError(f"Scan root does not exist: {resolved_root}")
    if not resolved_root.is_dir():
        raise ConfigError(f"Scan root is not a directory: {resolved_root}")
    if not os.access(resolved_root, os.R_OK | os.X_OK):
        raise ConfigError(f"Scan root is not readable: {resolved_root}")

    excluded = frozenset(exclude_dirs)
    size_limit_bytes = max_file_mb * 1024 * 1024 if max_file_mb is not None else None
    selected: set[Path] = set()

    for directory, dirnames, filenames in os.walk(resolved_root, onerror=_log_walk_error):
        dirnames[:] = [name for name in dirnames if name not in excluded]
        for filename in filenames:
            if not _matches_any(filename, include_patterns):
                continue
            path = Path(directory) / filename
            if not path.is_file():
                continue
            if size_limit_bytes is not None and _exceeds_size(path, size_limit_bytes):
                logger.warning("Skipping %s: larger than %d MB", relative_key(path, resolved_root), max_file_mb)
                continue
            selected.add(path)

    return sorted(selected, key=lambda path: relative_key(path, resolved_root))


def relative_key(path: Path, root: Path) -> str:
    """Return a deterministic POSIX path key relative to *root* when possible."""
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()


def _matches_any(filename: str, patterns: tuple[str, ...]) -> bool:
    return any(fnmatch.fnmatchcase(filename, pattern) for pattern in patterns)


def _exceeds_size(path: Path, limit_bytes: int) -> bool:
    try:
        return path.stat().st_size > limit_bytes
    except OSError:
        return False


def _log_walk_error(exc: OSError) -> None:
    logger.warning("Cannot list directory %s: %s", exc.filename, exc.strerror)
