"""Scheme classification and component parsing for candidate URLs."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple
from urllib.parse import SplitResult, urlsplit

from .models import Position, Scheme, Url

# Priority order matters: "https://" must win over "http://".
SCHEME_PREFIXES: Tuple[Tuple[str, Scheme], ...] = (
    ("https://", Scheme.HTTPS),
    ("http://", Scheme.HTTP),
    ("ftp://", Scheme.FTP),
    ("file://", Scheme.FILE),
    ("mailto:", Scheme.MAILTO),
    ("tel:", Scheme.TEL),
)


@dataclass(slots=True, frozen=True)
class UrlComponents:
    scheme: Scheme
    host: Optional[str] = None
    path: Optional[str] = None


def classify(candidate: str) -> Scheme:
    """Return the scheme of ``candidate`` judged by its prefix alone."""

    lowered = candidate[:8].lower()
    for prefix, scheme in SCHEME_PREFIXES:
        if lowered.startswith(prefix):
            return scheme
    return Scheme.UNKNOWN


def _split(candidate: str) -> SplitResult | None:
    try:
        parts = urlsplit(candidate)
        # Accessing the port validates it; urlsplit alone is lenient.
        _ = parts.port
    except ValueError:
        return None
    return parts


def extract_components(candidate: str) -> UrlComponents | None:
    """Parse host and path for schemes with an authority component.

    Returns ``None`` only when the candidate cannot be split as a URL at all.
    """

    parts = _split(candidate)
    if parts is None:
        return None
    scheme = classify(candidate)
    if not scheme.has_authority:
        return UrlComponents(scheme=scheme)
    path = parts.path or "/"
    if parts.query:
        path += "?" + parts.query
    if parts.fragment:
        path += "#" + parts.fragment
    return UrlComponents(scheme=scheme, host=parts.hostname or None, path=path)


def is_valid_url(candidate: str) -> bool:
    """Check that ``candidate`` has a supported scheme and a usable body."""

    scheme = classify(candidate)
    if scheme is Scheme.UNKNOWN:
        return False
    parts = _split(candidate)
    if parts is None:
        return False
    if scheme is Scheme.MAILTO:
        return "@" in parts.path and len(parts.path) > 1
    if scheme in (Scheme.TEL, Scheme.FILE):
        return len(parts.path) > 1
    return bool(parts.hostname)


def host_of(candidate: str) -> str | None:
    components = extract_components(candidate)
    if components is None:
        return None
    return components.host


def to_url(
    value: str,
    *,
    position: Optional[Position] = None,
    context: Optional[str] = None,
    type: Optional[str] = None,
) -> Url:
    """Build a classified :class:`Url` record for ``value``."""

    components = extract_components(value)
    return Url(
        value=value,
        scheme=classify(value),
        type=type,
        host=components.host if components else None,
        path=components.path if components else None,
        position=position,
        context=context,
    )


__all__ = [
    "SCHEME_PREFIXES",
    "UrlComponents",
    "classify",
    "extract_components",
    "is_valid_url",
    "host_of",
    "to_url",
]
