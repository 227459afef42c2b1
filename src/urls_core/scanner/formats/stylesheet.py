"""Stylesheet scanner."""
from __future__ import annotations

from ...models import FileFormat
from ..patterns import CSS_IMPORT_RE, CSS_URL_FUNCTION_RE, rules_for
from ..registry import LineScanner, ScanContext
from ..suppression import CSS_COMMENTS, LineRegions


class StylesheetScanner(LineScanner):
    name = "css"
    formats = (FileFormat.CSS,)
    comments = CSS_COMMENTS
    # Stylesheets only reference fetchable resources.
    boundary_rules = rules_for("web", "ftp", "file")

    def scan_line(self, line: str, index: int, regions: LineRegions, context: ScanContext) -> None:
        self.validated_pass(CSS_URL_FUNCTION_RE, line, index, regions, context)
        self.validated_pass(CSS_IMPORT_RE, line, index, regions, context)
        self.plain_pass(line, index, regions, context)


__all__ = ["StylesheetScanner"]
