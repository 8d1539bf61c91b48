"""Base exception type for tcalint."""

from __future__ import annotations


class TcalintError(Exception):
    """Base class for all errors raised by tcalint."""
