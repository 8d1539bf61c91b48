"""Shared text-matching helpers for detector implementations."""

from __future__ import annotations

import re
from collections import Counter


def split_lines(text: str) -> list[str]:
    """Split source text into lines without keeping line terminators."""
    return text.splitlines()


def matching_lines(text: str, pattern: re.Pattern[str]) -> tuple[int, ...]:
    """Return 1-based numbers of lines where ``pattern`` matches."""
    return tuple(index for index, line in enumerate(split_lines(text), start=1) if pattern.search(line))


def occurrences(text: str, pattern: re.Pattern[str]) -> list[tuple[int, str]]:
    """Return ``(line, matched text)`` for every match, several per line allowed."""
    found: list[tuple[int, str]] = []
    for index, line in enumerate(split_lines(text), start=1):
        found.extend((index, match.group(0)) for match in pattern.finditer(line))
    return found


def duplicated_labels(matches: list[tuple[int, str]]) -> tuple[str, ...]:
    """Return labels seen more than once, sorted."""
    counts = Counter(label for _, label in matches)
    return tuple(sorted(label for label, count in counts.items() if count > 1))


def block_lines(
    text: str,
    start: re.Pattern[str],
    end: re.Pattern[str],
) -> list[tuple[int, str]]:
    """Return numbered lines from the first ``start`` match through the next ``end`` match.

    When no ``end`` line follows, the block runs to the end of the text.  An
    empty list means ``start`` never matched.
    """
    lines = split_lines(text)
    for index, line in enumerate(lines):
        if not start.search(line):
            continue
        block: list[tuple[int, str]] = [(index + 1, line)]
        for offset, following in enumerate(lines[index + 1 :], start=index + 2):
            block.append((offset, following))
            if end.search(following):
                break
        return block
    return []
