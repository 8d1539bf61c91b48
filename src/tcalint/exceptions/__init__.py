"""Shared exception hierarchy for tcalint."""

from __future__ import annotations

from .base import TcalintError
from .config import ConfigError

__all__ = ["ConfigError", "TcalintError"]
