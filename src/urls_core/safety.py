"""Pre-flight checks callers run before handing a document to the engine."""
from __future__ import annotations

from dataclasses import dataclass

from .config import SafetyConfig


@dataclass(slots=True, frozen=True)
class SafetyResult:
    proceed: bool
    message: str = ""


def check_safety(content: str, config: SafetyConfig) -> SafetyResult:
    if not config.enabled:
        return SafetyResult(proceed=True)
    size = len(content)
    if size > config.file_size_warn_bytes:
        return SafetyResult(
            proceed=False,
            message=f"File size ({size} bytes) exceeds safety threshold ({config.file_size_warn_bytes} bytes)",
        )
    return SafetyResult(proceed=True)


def check_output_size(line_count: int, config: SafetyConfig) -> SafetyResult:
    if not config.enabled or line_count <= config.large_output_lines_threshold:
        return SafetyResult(proceed=True)
    return SafetyResult(
        proceed=False,
        message=(
            f"Output has {line_count} lines, above the large output threshold "
            f"({config.large_output_lines_threshold} lines)"
        ),
    )


def check_document_count(count: int, config: SafetyConfig) -> SafetyResult:
    if not config.enabled or count <= config.many_documents_threshold:
        return SafetyResult(proceed=True)
    return SafetyResult(
        proceed=False,
        message=f"{count} documents requested, above the threshold of {config.many_documents_threshold}",
    )


__all__ = ["SafetyResult", "check_safety", "check_output_size", "check_document_count"]
