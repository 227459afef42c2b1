"""Scanner package exports."""
from .engine import (
    MAX_CONTENT_SIZE,
    MAX_URL_COUNT,
    CancellationToken,
    Extractor,
    ExtractorConfig,
    default_extractor,
    extract_urls,
    resolve_format,
)
from .formats import load_builtin_scanners
from .registry import FormatScanner, LineScanner, ScanContext, ScannerRegistry

__all__ = [
    "MAX_CONTENT_SIZE",
    "MAX_URL_COUNT",
    "CancellationToken",
    "Extractor",
    "ExtractorConfig",
    "default_extractor",
    "extract_urls",
    "resolve_format",
    "load_builtin_scanners",
    "FormatScanner",
    "LineScanner",
    "ScanContext",
    "ScannerRegistry",
]
