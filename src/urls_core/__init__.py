"""URLs Core: extract, classify and tidy URLs found in text documents."""
from .classifier import classify, extract_components, is_valid_url
from .models import (
    ExtractionResult,
    FileFormat,
    ParseError,
    Position,
    RecoveryAction,
    Scheme,
    Severity,
    Url,
)
from .scanner import CancellationToken, Extractor, ExtractorConfig, extract_urls
from .version import __version__

__all__ = [
    "__version__",
    "classify",
    "extract_components",
    "is_valid_url",
    "ExtractionResult",
    "FileFormat",
    "ParseError",
    "Position",
    "RecoveryAction",
    "Scheme",
    "Severity",
    "Url",
    "CancellationToken",
    "Extractor",
    "ExtractorConfig",
    "extract_urls",
]
