"""Detector interfaces for reducer rules."""

from __future__ import annotations

import inspect
import re
from abc import ABC, abstractmethod
from typing import ClassVar

from tcalint.detectors.common import matching_lines
from tcalint.model import Detection

_RULE_ID_PATTERN: re.Pattern[str] = re.compile(r"^[A-Z][A-Z0-9_]+$")


class Detector(ABC):
    """Abstract base class for detector implementations.

    Detectors are pure functions of a file's text.  They must never raise on
    malformed or partial source; a heuristic miscount is acceptable.
    """

    rule_id: ClassVar[str]

    def __init_subclass__(cls, abstract: bool = False, **kwargs: object) -> None:
        """Validate detector subclasses define a valid UPPER_SNAKE_CASE `rule_id`."""
        super().__init_subclass__(**kwargs)
        if abstract or inspect.isabstract(cls):
            return

        rule_id = getattr(cls, "rule_id", None)
        if not isinstance(rule_id, str) or not rule_id.strip():
            raise TypeError(f"{cls.__name__} must define a non-empty class attribute `rule_id`")
        if not _RULE_ID_PATTERN.match(rule_id):
            raise TypeError(f"{cls.__name__}.rule_id must be UPPER_SNAKE_CASE (got {rule_id!r})")

    @abstractmethod
    def detect(self, text: str) -> Detection:
        """Count matches of this detector's construct in ``text``."""


class LinePatternDetector(Detector, abstract=True):
    """Count lines matching a single pattern, like ``grep -c``."""

    pattern: ClassVar[re.Pattern[str]]

    def __init_subclass__(cls, abstract: bool = False, **kwargs: object) -> None:
        super().__init_subclass__(abstract=abstract, **kwargs)
        if not abstract and not isinstance(getattr(cls, "pattern", None), re.Pattern):
            raise TypeError(f"{cls.__name__} must define a compiled class attribute `pattern`")

    def detect(self, text: str) -> Detection:
        lines = matching_lines(text, self.pattern)
        return Detection(count=len(lines), lines=lines)
