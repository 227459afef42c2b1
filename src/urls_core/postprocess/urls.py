"""Deduplicate, group and sort extracted URL records."""
from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, List, Sequence, Tuple

from ..classifier import extract_components
from ..models import Url

INVALID_HOST = "invalid"


class SortKey(str, Enum):
    VALUE = "value"
    SCHEME = "scheme"
    HOST = "host"
    LENGTH = "length"
    TYPE = "type"


def dedupe_urls(urls: Sequence[Url]) -> List[Url]:
    """Keep the first occurrence of each value, compared trimmed and case-insensitively."""

    seen = set()
    result: List[Url] = []
    for url in urls:
        normalized = url.value.strip().lower()
        if normalized in seen:
            continue
        seen.add(normalized)
        result.append(url)
    return result


def _bucket(urls: Sequence[Url], key: Callable[[Url], str]) -> Dict[str, List[Url]]:
    groups: Dict[str, List[Url]] = {}
    for url in urls:
        groups.setdefault(key(url), []).append(url)
    return groups


def group_by_scheme(urls: Sequence[Url]) -> Dict[str, List[Url]]:
    return _bucket(urls, lambda url: url.scheme.value)


def group_by_type(urls: Sequence[Url]) -> Dict[str, List[Url]]:
    return _bucket(urls, lambda url: url.type or "unknown")


def _host_bucket(url: Url) -> str:
    if not url.scheme.has_authority:
        return url.scheme.value
    components = extract_components(url.value)
    if components is None or not components.host:
        return INVALID_HOST
    return components.host


def group_by_host(urls: Sequence[Url]) -> Dict[str, List[Url]]:
    """Web and FTP URLs by host; everything else by scheme."""

    return _bucket(urls, _host_bucket)


def _host_or_value(url: Url) -> str:
    if url.scheme.has_authority:
        components = extract_components(url.value)
        if components is not None and components.host:
            return components.host
    return url.value


_SORT_KEYS: Dict[SortKey, Callable[[Url], Tuple]] = {
    SortKey.VALUE: lambda url: (url.value,),
    SortKey.SCHEME: lambda url: (url.scheme.value, url.value),
    SortKey.HOST: lambda url: (_host_or_value(url), url.value),
    SortKey.LENGTH: lambda url: (len(url.value), url.value),
    SortKey.TYPE: lambda url: (url.type or "unknown", url.value),
}


def sort_urls(urls: Sequence[Url], key: SortKey | str = SortKey.VALUE) -> List[Url]:
    """Sort by ``key``; ties are always broken by value so re-sorting is a no-op."""

    return sorted(urls, key=_SORT_KEYS[SortKey(key)])


__all__ = [
    "INVALID_HOST",
    "SortKey",
    "dedupe_urls",
    "group_by_scheme",
    "group_by_type",
    "group_by_host",
    "sort_urls",
]
