"""Scanner base classes, scan context and the format registry."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Set, Tuple

import regex
import structlog

from ..classifier import is_valid_url, to_url
from ..errors import UnknownFormatError
from ..models import FileFormat, ParseError, Position, RecoveryAction, Severity, Url
from ..utils.text import split_lines
from .patterns import BOUNDARY_RULES, BoundaryRule, first_group, iter_boundary_matches
from .suppression import NO_COMMENTS, CommentSyntax, LineRegions, fold_regions

logger = structlog.get_logger(__name__)


@dataclass(slots=True)
class ScanContext:
    """Per-call state threaded through one scanner invocation."""

    seen: Set[str] = field(default_factory=set)
    urls: List[Url] = field(default_factory=list)
    errors: List[ParseError] = field(default_factory=list)

    def add(
        self,
        value: str,
        *,
        position: Optional[Position] = None,
        context: Optional[str] = None,
        type: Optional[str] = None,
    ) -> bool:
        """Record ``value`` unless this scan has already emitted it."""

        if not value or value in self.seen:
            return False
        self.seen.add(value)
        self.urls.append(to_url(value, position=position, context=context, type=type))
        return True

    def add_match(self, value: str, line: str, line_index: int, column_index: int) -> bool:
        return self.add(
            value,
            position=Position(line=line_index + 1, column=column_index + 1),
            context=line.strip(),
        )

    def record(
        self,
        message: str,
        *,
        severity: Severity = Severity.WARNING,
        recovery_action: RecoveryAction = RecoveryAction.SKIP,
        position: Optional[Position] = None,
    ) -> ParseError:
        error = ParseError(
            severity=severity,
            message=message,
            recoverable=True,
            recovery_action=recovery_action,
            position=position,
        )
        self.errors.append(error)
        return error


class FormatScanner:
    """Protocol-like base class for format scanners."""

    name: str
    formats: Sequence[FileFormat]

    def scan(self, text: str, context: ScanContext | None = None) -> ScanContext:  # pragma: no cover - protocol
        raise NotImplementedError


class LineScanner(FormatScanner):
    """Walks a document line by line, isolating failures to a single line.

    Subclasses add their structural passes in :meth:`scan_line` and finish with
    :meth:`plain_pass`, so structural hits win the per-scan dedupe.
    """

    name = "plain"
    formats: Sequence[FileFormat] = ()
    comments: CommentSyntax = NO_COMMENTS
    boundary_rules: Tuple[BoundaryRule, ...] = BOUNDARY_RULES

    def scan(self, text: str, context: ScanContext | None = None) -> ScanContext:
        context = context if context is not None else ScanContext()
        lines = split_lines(text)
        for index, (line, regions) in enumerate(zip(lines, fold_regions(lines, self.comments))):
            if regions.whole_line:
                continue
            try:
                self.scan_line(line, index, regions, context)
            except Exception as exc:
                logger.warning("scanner.line_skipped", scanner=self.name, line=index + 1, error=str(exc))
                context.record(
                    f"Skipped line {index + 1} while scanning {self.name} content: {exc}",
                    position=Position(line=index + 1, column=1),
                )
        return context

    def scan_line(self, line: str, index: int, regions: LineRegions, context: ScanContext) -> None:
        self.plain_pass(line, index, regions, context)

    def is_suppressed(self, line: str, offset: int, regions: LineRegions) -> bool:
        return regions.is_suppressed(offset)

    def plain_pass(self, line: str, index: int, regions: LineRegions, context: ScanContext) -> None:
        for match in iter_boundary_matches(line, self.boundary_rules):
            if self.is_suppressed(line, match.start(), regions):
                continue
            context.add_match(match.group(), line, index, match.start())

    def validated_pass(
        self,
        pattern: regex.Pattern[str],
        line: str,
        index: int,
        regions: LineRegions,
        context: ScanContext,
    ) -> None:
        """Accept captured targets of ``pattern`` that the classifier validates.

        Tokens are positioned at the start of the whole match (the attribute
        name, the opening quote or bracket), not at the captured value.
        """

        for match in pattern.finditer(line):
            if self.is_suppressed(line, match.start(), regions):
                continue
            value = first_group(match)
            if value and is_valid_url(value):
                context.add_match(value, line, index, match.start())


class ScannerRegistry:
    """Runtime registry mapping format tags to scanners."""

    def __init__(self) -> None:
        self._scanners: Dict[FileFormat, FormatScanner] = {}

    def register(self, scanner: FormatScanner, override: bool = False) -> None:
        for file_format in scanner.formats:
            if not override and file_format in self._scanners:
                raise ValueError(f"Scanner already registered for format: {file_format.value}")
        for file_format in scanner.formats:
            self._scanners[file_format] = scanner

    def unregister(self, file_format: FileFormat | str) -> None:
        self._scanners.pop(_coerce(file_format), None)

    def get(self, file_format: FileFormat | str) -> FormatScanner:
        try:
            return self._scanners[_coerce(file_format)]
        except (KeyError, ValueError) as exc:
            raise UnknownFormatError(f"No scanner registered for format: {file_format}") from exc

    def all(self) -> Mapping[FileFormat, FormatScanner]:
        return dict(self._scanners)

    def iter_formats(self) -> Iterator[FileFormat]:
        yield from self._scanners

    def clear(self) -> None:
        self._scanners.clear()


def _coerce(file_format: FileFormat | str) -> FileFormat:
    if isinstance(file_format, FileFormat):
        return file_format
    return FileFormat(file_format)


__all__ = [
    "ScanContext",
    "FormatScanner",
    "LineScanner",
    "ScannerRegistry",
]
