"""Shared URL boundary patterns used by every format scanner."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

import regex

# Characters that end a URL when met in markup, quoted strings or prose.
TERMINATORS = r"""<>"'{}|\\^`\[\];)"""
_BODY = rf"[^\s{TERMINATORS}]+"

WEB_PATTERN = rf"https?://{_BODY}"
FTP_PATTERN = rf"ftp://{_BODY}"
MAILTO_PATTERN = rf"mailto:{_BODY}"
TEL_PATTERN = rf"tel:{_BODY}"
FILE_PATTERN = rf"file://{_BODY}"

# HTML link attributes, one pattern each; passes run in this priority order.
HTML_ATTRIBUTE_NAMES = ("href", "src", "action")
_ATTRIBUTE_VALUE = r"""\s*=\s*["']([^"']+)["']"""
XML_ATTRIBUTE_PATTERN = (
    r"(?:xlink:href|href|src|url|data|xmlns(?::[\w.-]+)?|(?:[\w.-]+:)?schemaLocation"
    r"|repository|scm|issueManagement|website|link|downloadUrl)" + _ATTRIBUTE_VALUE
)

MARKDOWN_LINK_PATTERN = r"\[([^\]]+)\]\(([^)]+)\)"
MARKDOWN_AUTOLINK_PATTERN = r"<([^>]+)>"

# Quoted literals in scripts, including template strings.
STRING_LITERAL_PATTERN = r"""['"`]([^'"`]*?)['"`]"""

CSS_URL_FUNCTION_PATTERN = r"""url\(\s*(?:"([^"]*)"|'([^']*)'|([^)'"\s]+))\s*\)"""
CSS_IMPORT_PATTERN = r"""@import\s+(?:"([^"]*)"|'([^']*)')"""


@dataclass(slots=True, frozen=True)
class BoundaryRule:
    """A compiled scheme boundary rule."""

    name: str
    pattern: regex.Pattern[str]

    def finditer(self, line: str) -> Iterator[regex.Match[str]]:
        return self.pattern.finditer(line)


def _compile(pattern: str) -> regex.Pattern[str]:
    return regex.compile(pattern, regex.IGNORECASE | regex.UNICODE)


BOUNDARY_RULES: Tuple[BoundaryRule, ...] = (
    BoundaryRule("web", _compile(WEB_PATTERN)),
    BoundaryRule("ftp", _compile(FTP_PATTERN)),
    BoundaryRule("mailto", _compile(MAILTO_PATTERN)),
    BoundaryRule("tel", _compile(TEL_PATTERN)),
    BoundaryRule("file", _compile(FILE_PATTERN)),
)

HTML_ATTRIBUTE_RES: Tuple[regex.Pattern[str], ...] = tuple(
    _compile(name + _ATTRIBUTE_VALUE) for name in HTML_ATTRIBUTE_NAMES
)
XML_ATTRIBUTE_RE = _compile(XML_ATTRIBUTE_PATTERN)
MARKDOWN_LINK_RE = regex.compile(MARKDOWN_LINK_PATTERN)
MARKDOWN_AUTOLINK_RE = regex.compile(MARKDOWN_AUTOLINK_PATTERN)
STRING_LITERAL_RE = regex.compile(STRING_LITERAL_PATTERN)
CSS_URL_FUNCTION_RE = _compile(CSS_URL_FUNCTION_PATTERN)
CSS_IMPORT_RE = _compile(CSS_IMPORT_PATTERN)


def rules_for(*names: str) -> Tuple[BoundaryRule, ...]:
    """Return the boundary rules with the given names, in vocabulary order."""

    wanted = set(names)
    unknown = wanted - {rule.name for rule in BOUNDARY_RULES}
    if unknown:
        raise KeyError(f"Unknown boundary rule(s): {', '.join(sorted(unknown))}")
    return tuple(rule for rule in BOUNDARY_RULES if rule.name in wanted)


def iter_boundary_matches(
    line: str, rules: Tuple[BoundaryRule, ...] = BOUNDARY_RULES
) -> Iterator[regex.Match[str]]:
    """Yield plain-text scheme matches, rule by rule, left to right."""

    for rule in rules:
        yield from rule.finditer(line)


def first_group(match: regex.Match[str]) -> str:
    """Return the first participating group of ``match``, or the whole match."""

    for index in range(1, (match.re.groups or 0) + 1):
        value = match.group(index)
        if value is not None:
            return value
    return match.group()


__all__ = [
    "TERMINATORS",
    "BoundaryRule",
    "BOUNDARY_RULES",
    "HTML_ATTRIBUTE_NAMES",
    "HTML_ATTRIBUTE_RES",
    "XML_ATTRIBUTE_RE",
    "MARKDOWN_LINK_RE",
    "MARKDOWN_AUTOLINK_RE",
    "STRING_LITERAL_RE",
    "CSS_URL_FUNCTION_RE",
    "CSS_IMPORT_RE",
    "rules_for",
    "iter_boundary_matches",
    "first_group",
]
