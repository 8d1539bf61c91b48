"""Shared file I/O helpers."""

from .files import read_source_text
from .json_io import render_json, write_json_atomic

__all__ = ["read_source_text", "render_json", "write_json_atomic"]
