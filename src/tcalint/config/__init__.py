"""Configuration loading, validation, and normalization for tcalint scans."""

from __future__ import annotations

from tcalint.config.loader import load_config
from tcalint.config.model import TcalintConfig
from tcalint.config.validator import validate_config_file

__all__ = ["TcalintConfig", "load_config", "validate_config_file"]
