"""Extraction dispatcher and output governance."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Protocol

import structlog

from ..errors import UnknownFormatError
from ..logging import scan_scope
from ..models import ExtractionResult, FileFormat, ParseError, RecoveryAction, Severity, Url
from .formats import load_builtin_scanners
from .registry import FormatScanner, ScannerRegistry

logger = structlog.get_logger(__name__)

MAX_CONTENT_SIZE = 10_000_000
MAX_URL_COUNT = 50_000

_FORMAT_ALIASES = {"yml": FileFormat.YAML}


class Cancellation(Protocol):
    """Anything exposing ``is_set()``, e.g. :class:`threading.Event`."""

    def is_set(self) -> bool: ...


class CancellationToken:
    __slots__ = ("_requested",)

    def __init__(self) -> None:
        self._requested = False

    def cancel(self) -> None:
        self._requested = True

    def is_set(self) -> bool:
        return self._requested


@dataclass(slots=True)
class ExtractorConfig:
    max_content_size: int = MAX_CONTENT_SIZE
    max_url_count: int = MAX_URL_COUNT


def resolve_format(format_tag: str) -> FileFormat:
    """Map a host format identifier onto a known format, or ``unknown``."""

    tag = format_tag.strip().lower()
    if tag in _FORMAT_ALIASES:
        return _FORMAT_ALIASES[tag]
    try:
        return FileFormat(tag)
    except ValueError:
        return FileFormat.UNKNOWN


class Extractor:
    """Select a scanner for a format tag and bound its input and output.

    Cancellation is consulted before the size check and again right before
    the scanner starts; a scan that has started always runs to completion.
    """

    def __init__(self, registry: ScannerRegistry | None = None, config: ExtractorConfig | None = None) -> None:
        self.registry = registry or ScannerRegistry()
        if not self.registry.all():
            load_builtin_scanners(self.registry)
        self.config = config or ExtractorConfig()

    def extract(
        self,
        content: str,
        format_tag: str,
        cancellation: Optional[Cancellation] = None,
    ) -> ExtractionResult:
        if _cancelled(cancellation):
            return ExtractionResult(success=False, file_type=FileFormat.UNKNOWN)

        if len(content) > self.config.max_content_size:
            logger.warning("extract.too_large", size=len(content), limit=self.config.max_content_size)
            return _failed(
                FileFormat.UNKNOWN,
                f"Content too large ({len(content)} characters), "
                f"maximum size is {self.config.max_content_size} characters",
                RecoveryAction.TRUNCATE,
            )

        file_format = resolve_format(format_tag)
        if _cancelled(cancellation):
            return ExtractionResult(success=False, file_type=file_format)

        try:
            scanner = self._scanner_for(file_format)
            with scan_scope(file_format.value, scanner.name):
                context = scanner.scan(content)
        except Exception as exc:
            logger.exception("extract.scanner_failed", format=file_format.value)
            return _failed(
                file_format,
                f"Failed to extract URLs from {file_format.value} content: {exc}",
                RecoveryAction.SKIP,
            )

        urls: List[Url] = context.urls
        errors: List[ParseError] = list(context.errors)
        # Truncation alone does not make the call unsuccessful.
        success = not errors
        limit = self.config.max_url_count
        if len(urls) > limit:
            logger.warning("extract.truncated", count=len(urls), limit=limit)
            errors.append(
                ParseError(
                    severity=Severity.WARNING,
                    message=f"URL count ({len(urls)}) exceeds limit ({limit}), truncated results",
                    recoverable=True,
                    recovery_action=RecoveryAction.TRUNCATE,
                )
            )
            urls = urls[:limit]
        return ExtractionResult(success=success, urls=tuple(urls), errors=tuple(errors), file_type=file_format)

    def _scanner_for(self, file_format: FileFormat) -> FormatScanner:
        try:
            return self.registry.get(file_format)
        except UnknownFormatError:
            # Markdown's link and plain-text passes are the most permissive.
            return self.registry.get(FileFormat.MARKDOWN)


_default: Extractor | None = None


def default_extractor() -> Extractor:
    """Return the shared extractor over the built-in scanners, creating it on first use."""

    global _default
    if _default is None:
        _default = Extractor()
    return _default


def extract_urls(
    content: str,
    format_tag: str,
    cancellation: Optional[Cancellation] = None,
    *,
    extractor: Extractor | None = None,
) -> ExtractionResult:
    runner = extractor or default_extractor()
    return runner.extract(content, format_tag, cancellation)


def _cancelled(cancellation: Optional[Cancellation]) -> bool:
    return cancellation is not None and bool(cancellation.is_set())


def _failed(file_format: FileFormat, message: str, action: RecoveryAction) -> ExtractionResult:
    error = ParseError(
        severity=Severity.WARNING,
        message=message,
        recoverable=True,
        recovery_action=action,
    )
    return ExtractionResult(success=False, errors=(error,), file_type=file_format)


__all__ = [
    "MAX_CONTENT_SIZE",
    "MAX_URL_COUNT",
    "Cancellation",
    "CancellationToken",
    "ExtractorConfig",
    "Extractor",
    "default_extractor",
    "extract_urls",
    "resolve_format",
]
