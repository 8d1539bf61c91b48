"""File-level helpers for reading reducer sources."""

from __future__ import annotations

from pathlib import Path


def read_source_text(path: Path) -> str:
    """Return file text as UTF-8, replacing undecodable bytes.

    Raises ``OSError`` when the file cannot be read at all; callers decide
    whether that is fatal.
    """
    return path.read_text(encoding="utf-8", errors="replace")
