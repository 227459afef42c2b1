"""Collect URL-like values from parsed data structures.

:func:`walk_strings` is the shared traversal: it descends mappings by key and
sequences by index, building a ``root.section.key[0]`` style path. The
structured scanners use it with the strict classifier; the ``collect_*``
helpers here use a looser notion of "URL-like" that also admits paths and
bare domains, and tag each hit with a coarse type.
"""
from __future__ import annotations

from typing import Any, Dict, Iterator, List, Mapping, Sequence, Tuple

import regex

from .classifier import classify, to_url
from .models import Position, Url

_URL_LIKE_PATTERNS = tuple(
    regex.compile(pattern, flags)
    for pattern, flags in (
        (r"^https?://", regex.IGNORECASE),
        (r"^ftps?://", regex.IGNORECASE),
        (r"^file://", regex.IGNORECASE),
        (r"^mailto:", regex.IGNORECASE),
        (r"^tel:", regex.IGNORECASE),
        (r"^data:", regex.IGNORECASE),
        (r"^/[^/]", 0),
        (r"^\.\.?/", 0),
        (r"^[a-zA-Z0-9][a-zA-Z0-9-]*[a-zA-Z0-9]*\.[a-zA-Z]{2,}", 0),
    )
)

_DOMAIN_RE = regex.compile(r"^[a-zA-Z0-9][a-zA-Z0-9-]*[a-zA-Z0-9]*\.[a-zA-Z]{2,}")

_TYPE_PREFIXES: Tuple[Tuple[str, str], ...] = (
    ("https://", "https"),
    ("http://", "http"),
    ("ftps://", "ftps"),
    ("ftp://", "ftp"),
    ("file://", "file"),
    ("mailto:", "mailto"),
    ("tel:", "tel"),
    ("data:", "data"),
    ("./", "relative-path"),
    ("../", "relative-path"),
    ("/", "absolute-path"),
)


def walk_strings(node: Any, path: str = "root") -> Iterator[Tuple[str, str]]:
    """Yield ``(path, value)`` for every string leaf below ``node``."""

    if isinstance(node, str):
        yield path, node
    elif isinstance(node, Mapping):
        for key, value in node.items():
            if value is not None:
                yield from walk_strings(value, f"{path}.{key}")
    elif isinstance(node, (list, tuple)):
        for index, value in enumerate(node):
            if value is not None:
                yield from walk_strings(value, f"{path}[{index}]")


def is_url_like(value: str) -> bool:
    trimmed = value.strip()
    if not trimmed:
        return False
    return any(pattern.search(trimmed) for pattern in _URL_LIKE_PATTERNS)


def classify_type(value: str) -> str:
    """Return a coarse type tag such as ``https``, ``absolute-path`` or ``domain``."""

    trimmed = value.strip().lower()
    for prefix, tag in _TYPE_PREFIXES:
        if trimmed.startswith(prefix):
            return tag
    if _DOMAIN_RE.match(trimmed):
        return "domain"
    return "unknown"


def _collected(value: str, context: str, position: Position | None = None) -> Url:
    trimmed = value.strip()
    return to_url(trimmed, position=position, context=context, type=classify_type(trimmed))


def collect_urls(obj: Any, context: str = "root") -> List[Url]:
    """Recursively collect URL-like strings from ``obj``."""

    return [_collected(value, path) for path, value in walk_strings(obj, context) if is_url_like(value)]


def collect_urls_from_array(items: Sequence[Any], context: str = "array") -> List[Url]:
    urls: List[Url] = []
    for index, item in enumerate(items):
        if isinstance(item, str) and is_url_like(item):
            urls.append(_collected(item, f"{context}[{index}]", Position(line=index + 1, column=1)))
    return urls


def collect_urls_from_key_value(obj: Mapping[str, Any], context: str = "object") -> List[Url]:
    urls: List[Url] = []
    for key, value in obj.items():
        child = f"{context}.{key}"
        if isinstance(value, str):
            if is_url_like(value):
                urls.append(_collected(value, child))
        elif isinstance(value, (list, tuple)):
            urls.extend(collect_urls_from_array([item for item in value if isinstance(item, str)], child))
        elif isinstance(value, Mapping):
            urls.extend(collect_urls(value, child))
    return urls


def filter_urls_by_type(urls: Sequence[Url], types: Sequence[str]) -> List[Url]:
    wanted = set(types)
    return [url for url in urls if url.type and url.type in wanted]


def scheme_counts(urls: Sequence[Url]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for url in urls:
        key = classify(url.value).value
        counts[key] = counts.get(key, 0) + 1
    return counts


__all__ = [
    "walk_strings",
    "is_url_like",
    "classify_type",
    "collect_urls",
    "collect_urls_from_array",
    "collect_urls_from_key_value",
    "filter_urls_by_type",
    "scheme_counts",
]
