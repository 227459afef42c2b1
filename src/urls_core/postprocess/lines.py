"""Line-oriented cleanup: one URL per line of plain text."""
from __future__ import annotations

from enum import Enum
from typing import Iterable, List

from ..classifier import host_of


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"
    DOMAIN = "domain"
    LENGTH_ASC = "length-asc"
    LENGTH_DESC = "length-desc"


def _non_empty(lines: Iterable[str]) -> List[str]:
    return [line.strip() for line in lines if line.strip()]


def dedupe_lines(lines: Iterable[str]) -> List[str]:
    """Trim lines, drop blanks and repeated lines, keeping first occurrences."""

    seen = set()
    result: List[str] = []
    for line in _non_empty(lines):
        if line in seen:
            continue
        seen.add(line)
        result.append(line)
    return result


def _domain(line: str) -> str:
    return host_of(line) or line


def sort_lines(lines: Iterable[str], order: SortOrder | str = SortOrder.ASC) -> List[str]:
    order = SortOrder(order)
    items = _non_empty(lines)
    if order is SortOrder.DESC:
        return sorted(items, reverse=True)
    if order is SortOrder.DOMAIN:
        return sorted(items, key=lambda line: (_domain(line), line))
    if order is SortOrder.LENGTH_ASC:
        return sorted(items, key=lambda line: (len(line), line))
    if order is SortOrder.LENGTH_DESC:
        return sorted(items, key=lambda line: (-len(line), line))
    return sorted(items)


__all__ = ["SortOrder", "dedupe_lines", "sort_lines"]
