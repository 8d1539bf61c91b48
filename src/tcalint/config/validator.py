"""Config file validation for tcalint scans."""

from __future__ import annotations

import difflib
from dataclasses import fields
from pathlib import Path
from typing import Any

import yaml

from tcalint.constants.config import CONFIG_FILENAME, DEFAULT_CRITICAL_THRESHOLD, DEFAULT_PASS_THRESHOLD
from tcalint.constants.detectors import RULE_IDS
from tcalint.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    ALLOWED_RULES_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    CFG008,
    CFG010,
    KEY_SUGGESTION_CUTOFF,
    LIST_OF_STRINGS_KEYS,
)
from tcalint.exceptions.validation import ValidationError, sort_errors
from tcalint.types.config import ThresholdConfig, WeightConfig


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a tcalint.yaml file and return all validation errors.

    This is the collect-all entry point used by ``tcalint validate-config``
    and by the scan commands before scanning.  It never raises; all problems
    are returned as :class:`ValidationError` instances.
    """
    errors: list[ValidationError] = []
    root = root.resolve()
    if not root.is_dir():
        errors.append(
            ValidationError(
                code=CFG010,
                path=str(root),
                field="",
                message=f"root directory does not exist: {root}",
            )
        )
        return errors

    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            errors.append(ValidationError(code=CFG001, path=path_str, field="", message=f"config file not found: {path}"))
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (yaml.YAMLError, OSError) as exc:
        errors.append(ValidationError(code=CFG002, path=path_str, field="", message=f"invalid YAML: {exc}"))
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a mapping, got {type(raw).__name__}",
            )
        )
        return errors

    errors.extend(_check_unknown_keys(raw, ALLOWED_CONFIG_KEYS, path_str, prefix=""))

    for key in LIST_OF_STRINGS_KEYS:
        if key in raw and not _is_string_list(raw[key]):
            errors.append(_type_error(path_str, key, "must be a list of strings"))
    if raw.get("include_globs") == []:
        errors.append(_range_error(path_str, "include_globs", "must contain at least one pattern"))

    if "max_file_mb" in raw:
        value = raw["max_file_mb"]
        if not _is_int(value):
            errors.append(_type_error(path_str, "max_file_mb", "must be an integer"))
        elif value <= 0:
            errors.append(_range_error(path_str, "max_file_mb", "must be a positive integer"))

    score_values: dict[str, int] = {}
    for key in ("pass_threshold", "critical_threshold"):
        if key not in raw:
            continue
        value = raw[key]
        if not _is_int(value):
            errors.append(_type_error(path_str, key, "must be an integer"))
        elif not 0 <= value <= 100:
            errors.append(_range_error(path_str, key, "must be between 0 and 100"))
        else:
            score_values[key] = value

    pass_threshold = score_values.get("pass_threshold", DEFAULT_PASS_THRESHOLD)
    critical_threshold = score_values.get("critical_threshold", DEFAULT_CRITICAL_THRESHOLD)
    if critical_threshold > pass_threshold:
        errors.append(
            ValidationError(
                code=CFG007,
                path=path_str,
                field="critical_threshold",
                message=f"critical_threshold ({critical_threshold}) exceeds pass_threshold ({pass_threshold})",
            )
        )

    errors.extend(_check_int_section(raw, "thresholds", ThresholdConfig, path_str, non_negative=True))
    errors.extend(_check_int_section(raw, "weights", WeightConfig, path_str, non_negative=False))
    errors.extend(_check_rules_section(raw, path_str))

    return sort_errors(errors)


def _check_int_section(
    raw: dict[str, Any],
    key: str,
    cls: type,
    path_str: str,
    *,
    non_negative: bool,
) -> list[ValidationError]:
    if key not in raw or raw[key] is None:
        return []
    section = raw[key]
    if not isinstance(section, dict):
        return [_type_error(path_str, key, "must be a mapping")]

    allowed = frozenset(item.name for item in fields(cls))
    errors = _check_unknown_keys(section, allowed, path_str, prefix=f"{key}.")
    for name, value in section.items():
        if name not in allowed:
            continue
        dotted = f"{key}.{name}"
        if not _is_int(value):
            errors.append(_type_error(path_str, dotted, "must be an integer"))
        elif non_negative and value < 0:
            errors.append(_range_error(path_str, dotted, "must be zero or greater"))
    return errors


def _check_rules_section(raw: dict[str, Any], path_str: str) -> list[ValidationError]:
    if "rules" not in raw or raw["rules"] is None:
        return []
    section = raw["rules"]
    if not isinstance(section, dict):
        return [_type_error(path_str, "rules", "must be a mapping")]

    errors = _check_unknown_keys(section, ALLOWED_RULES_KEYS, path_str, prefix="rules.")
    disabled = section.get("disabled")
    if disabled is None:
        return errors
    if not _is_string_list(disabled):
        errors.append(_type_error(path_str, "rules.disabled", "must be a list of strings"))
        return errors
    for rule_id in disabled:
        if rule_id in RULE_IDS:
            continue
        suggestion = _suggest_key(rule_id, frozenset(RULE_IDS))
        errors.append(
            ValidationError(
                code=CFG008,
                path=path_str,
                field="rules.disabled",
                message=f"unknown rule id '{rule_id}'",
                hint=f"did you mean '{suggestion}'?" if suggestion else "",
            )
        )
    return errors


def _check_unknown_keys(
    mapping: dict[str, Any],
    allowed: frozenset[str],
    path_str: str,
    *,
    prefix: str,
) -> list[ValidationError]:
    errors: list[ValidationError] = []
    for key in mapping:
        if key in allowed:
            continue
        suggestion = _suggest_key(str(key), allowed)
        errors.append(
            ValidationError(
                code=CFG004,
                path=path_str,
                field=f"{prefix}{key}",
                message=f"unknown key '{key}'",
                hint=f"did you mean '{suggestion}'?" if suggestion else "",
            )
        )
    return errors


def _suggest_key(key: str, allowed: frozenset[str]) -> str | None:
    """Return the closest allowed key, if any is similar enough."""
    matches = difflib.get_close_matches(key, sorted(allowed), n=1, cutoff=KEY_SUGGESTION_CUTOFF)
    return matches[0] if matches else None


def _type_error(path_str: str, field: str, message: str) -> ValidationError:
    return ValidationError(code=CFG005, path=path_str, field=field, message=message)


def _range_error(path_str: str, field: str, message: str) -> ValidationError:
    return ValidationError(code=CFG006, path=path_str, field=field, message=message)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_string_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)
