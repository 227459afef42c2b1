"""Scanner for JavaScript and TypeScript sources."""
from __future__ import annotations

from ...models import FileFormat
from ..patterns import STRING_LITERAL_RE
from ..registry import LineScanner, ScanContext
from ..suppression import LineRegions


class ScriptScanner(LineScanner):
    """Quoted and template string literals first, then plain scheme matches."""

    name = "script"
    formats = (FileFormat.JAVASCRIPT, FileFormat.TYPESCRIPT)

    def scan_line(self, line: str, index: int, regions: LineRegions, context: ScanContext) -> None:
        self.validated_pass(STRING_LITERAL_RE, line, index, regions, context)
        self.plain_pass(line, index, regions, context)


__all__ = ["ScriptScanner"]
