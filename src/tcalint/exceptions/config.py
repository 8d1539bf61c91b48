"""Configuration-related exceptions."""

from __future__ import annotations

from tcalint.exceptions.base import TcalintError


class ConfigError(TcalintError, ValueError):
    """Raised when the scan root or scanner configuration is invalid."""
