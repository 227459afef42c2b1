"""Shared domain models used across URLs Core."""
from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class Scheme(str, Enum):
    HTTP = "http"
    HTTPS = "https"
    FTP = "ftp"
    FILE = "file"
    MAILTO = "mailto"
    TEL = "tel"
    UNKNOWN = "unknown"

    @property
    def has_authority(self) -> bool:
        return self in (Scheme.HTTP, Scheme.HTTPS, Scheme.FTP)


class FileFormat(str, Enum):
    MARKDOWN = "markdown"
    HTML = "html"
    CSS = "css"
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    JSON = "json"
    YAML = "yaml"
    YML = "yml"
    PROPERTIES = "properties"
    TOML = "toml"
    INI = "ini"
    XML = "xml"
    UNKNOWN = "unknown"


class Severity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class RecoveryAction(str, Enum):
    RETRY = "retry"
    FALLBACK = "fallback"
    USER_ACTION = "user-action"
    SKIP = "skip"
    ABORT = "abort"
    TRUNCATE = "truncate"


@dataclass(slots=True, frozen=True)
class Position:
    line: int
    column: int


@dataclass(slots=True, frozen=True)
class Url:
    value: str
    scheme: Scheme
    type: Optional[str] = None
    host: Optional[str] = None
    path: Optional[str] = None
    position: Optional[Position] = None
    context: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Url value must not be empty")


@dataclass(slots=True, frozen=True)
class ParseError:
    """A problem met while extracting, surfaced to the host rather than raised."""

    severity: Severity
    message: str
    recoverable: bool
    recovery_action: RecoveryAction
    timestamp: float = field(default_factory=time.time)
    position: Optional[Position] = None
    category: str = "parsing"


@dataclass(slots=True, frozen=True)
class ExtractionResult:
    success: bool
    urls: Tuple[Url, ...] = ()
    errors: Tuple[ParseError, ...] = ()
    file_type: FileFormat = FileFormat.UNKNOWN

    @property
    def values(self) -> Tuple[str, ...]:
        return tuple(url.value for url in self.urls)
