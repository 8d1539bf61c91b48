"""Config loading and normalization for tcalint scans."""

from __future__ import annotations

import logging
from dataclasses import fields
from pathlib import Path
from typing import Any, TypeVar

import yaml

from tcalint.config.model import TcalintConfig
from tcalint.constants.config import (
    CONFIG_FILENAME,
    DEFAULT_CRITICAL_THRESHOLD,
    DEFAULT_EXCLUDE_DIRS,
    DEFAULT_INCLUDE_GLOBS,
    DEFAULT_MAX_FILE_MB,
    DEFAULT_PASS_THRESHOLD,
)
from tcalint.exceptions import ConfigError
from tcalint.types.config import RuleToggleConfig, ThresholdConfig, WeightConfig

logger = logging.getLogger(__name__)


def load_config(root: Path, config_path: Path | None = None) -> TcalintConfig:
    """Load and validate scanner config from ``tcalint.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return TcalintConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    logger.info("Loaded config from %s", path)

    max_file_mb = _ensure_positive_int(raw.get("max_file_mb", DEFAULT_MAX_FILE_MB), "max_file_mb")
    pass_threshold = _ensure_score(raw.get("pass_threshold", DEFAULT_PASS_THRESHOLD), "pass_threshold")
    critical_threshold = _ensure_score(
        raw.get("critical_threshold", DEFAULT_CRITICAL_THRESHOLD),
        "critical_threshold",
    )
    if critical_threshold > pass_threshold:
        raise ConfigError("critical_threshold must not exceed pass_threshold")

    rules_raw = _ensure_mapping(raw.get("rules", {}), "rules")

    include_globs = tuple(_ensure_string_list(raw.get("include_globs", list(DEFAULT_INCLUDE_GLOBS)), "include_globs"))
    if not include_globs:
        raise ConfigError("include_globs must contain at least one pattern")

    return TcalintConfig(
        include_globs=include_globs,
        exclude_dirs=tuple(_ensure_string_list(raw.get("exclude_dirs", list(DEFAULT_EXCLUDE_DIRS)), "exclude_dirs")),
        max_file_mb=max_file_mb,
        pass_threshold=pass_threshold,
        critical_threshold=critical_threshold,
        thresholds=_build_int_section(ThresholdConfig, raw.get("thresholds", {}), "thresholds", non_negative=True),
        weights=_build_int_section(WeightConfig, raw.get("weights", {}), "weights", non_negative=False),
        rules=RuleToggleConfig(
            disabled=tuple(_ensure_string_list(rules_raw.get("disabled", []), "rules.disabled")),
        ),
    )


T = TypeVar("T")


def _build_int_section(cls: type[T], value: Any, key_name: str, *, non_negative: bool) -> T:
    """Build a dataclass of integer fields from a YAML mapping, keeping defaults for absent keys."""
    raw = _ensure_mapping(value, key_name)
    known = {item.name for item in fields(cls)}  # type: ignore[arg-type]
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ConfigError(f"{key_name} has unknown key(s): {', '.join(unknown)}")

    values: dict[str, int] = {}
    for name, item in raw.items():
        dotted = f"{key_name}.{name}"
        if isinstance(item, bool) or not isinstance(item, int):
            raise ConfigError(f"{dotted} must be an integer")
        if non_negative and item < 0:
            raise ConfigError(f"{dotted} must be zero or greater")
        values[name] = item
    return cls(**values)


def _ensure_mapping(value: Any, key_name: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"{key_name} must be a mapping")
    return value


def _ensure_positive_int(value: Any, key_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigError(f"{key_name} must be a positive integer")
    return value


def _ensure_score(value: Any, key_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 100:
        raise ConfigError(f"{key_name} must be an integer between 0 and 100")
    return value


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return [item.strip() for item in value if item.strip()]
