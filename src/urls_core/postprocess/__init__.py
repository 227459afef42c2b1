"""Post-processing package exports."""
from .lines import SortOrder, dedupe_lines, sort_lines
from .urls import (
    INVALID_HOST,
    SortKey,
    dedupe_urls,
    group_by_host,
    group_by_scheme,
    group_by_type,
    sort_urls,
)

__all__ = [
    "SortOrder",
    "dedupe_lines",
    "sort_lines",
    "INVALID_HOST",
    "SortKey",
    "dedupe_urls",
    "group_by_host",
    "group_by_scheme",
    "group_by_type",
    "sort_urls",
]
