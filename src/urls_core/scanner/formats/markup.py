"""Scanners for tag-based markup: HTML and XML."""
from __future__ import annotations

from ...models import FileFormat
from ..patterns import HTML_ATTRIBUTE_RES, XML_ATTRIBUTE_RE
from ..registry import LineScanner, ScanContext
from ..suppression import MARKUP_COMMENTS, LineRegions


class HtmlScanner(LineScanner):
    """Link-bearing attributes first, then plain scheme matches.

    Attribute values must classify as a supported URL, so ``javascript:``,
    ``data:`` and relative references are never reported.
    """

    name = "html"
    formats = (FileFormat.HTML,)
    comments = MARKUP_COMMENTS

    def scan_line(self, line: str, index: int, regions: LineRegions, context: ScanContext) -> None:
        for pattern in HTML_ATTRIBUTE_RES:
            self.validated_pass(pattern, line, index, regions, context)
        self.plain_pass(line, index, regions, context)


class XmlScanner(LineScanner):
    """Maven POMs, feeds, schema documents and other XML dialects."""

    name = "xml"
    formats = (FileFormat.XML,)
    comments = MARKUP_COMMENTS

    def scan_line(self, line: str, index: int, regions: LineRegions, context: ScanContext) -> None:
        self.validated_pass(XML_ATTRIBUTE_RE, line, index, regions, context)
        self.plain_pass(line, index, regions, context)


__all__ = ["HtmlScanner", "XmlScanner"]
