"""Markdown scanner."""
from __future__ import annotations

from ...classifier import is_valid_url
from ...models import FileFormat
from ..patterns import MARKDOWN_AUTOLINK_RE, MARKDOWN_LINK_RE
from ..registry import LineScanner, ScanContext
from ..suppression import MARKDOWN_COMMENTS, LineRegions, in_inline_code


class MarkdownScanner(LineScanner):
    """Links, autolinks and plain URLs outside code and comments.

    Fenced blocks are skipped whole; inline code spans are detected by an odd
    number of backticks before the match. Only scheme-bearing link targets
    are reported: relative targets cannot be resolved without a base URL.
    """

    name = "markdown"
    formats = (FileFormat.MARKDOWN,)
    comments = MARKDOWN_COMMENTS

    def is_suppressed(self, line: str, offset: int, regions: LineRegions) -> bool:
        return regions.is_suppressed(offset) or in_inline_code(line, offset)

    def scan_line(self, line: str, index: int, regions: LineRegions, context: ScanContext) -> None:
        self._link_pass(line, index, regions, context)
        self.validated_pass(MARKDOWN_AUTOLINK_RE, line, index, regions, context)
        self.plain_pass(line, index, regions, context)

    def _link_pass(self, line: str, index: int, regions: LineRegions, context: ScanContext) -> None:
        for match in MARKDOWN_LINK_RE.finditer(line):
            if self.is_suppressed(line, match.start(), regions):
                continue
            target = link_target(match.group(2))
            if target and is_valid_url(target):
                context.add_match(target, line, index, match.start())


def link_target(raw: str) -> str:
    """Strip surrounding whitespace, an optional title and angle brackets."""

    parts = raw.strip().split(maxsplit=1)
    if not parts:
        return ""
    target = parts[0]
    if target.startswith("<") and target.endswith(">"):
        target = target[1:-1]
    return target


__all__ = ["MarkdownScanner", "link_target"]
