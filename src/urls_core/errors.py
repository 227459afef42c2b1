"""Exceptions raised by URLs Core.

Problems met while scanning a document are not raised; they are recorded as
:class:`~urls_core.models.ParseError` entries on the extraction result. The
exceptions below cover programming and configuration mistakes only.
"""
from __future__ import annotations


class UrlsCoreError(Exception):
    """Base exception for URLs Core"""


class UnknownFormatError(UrlsCoreError, KeyError):
    """Raised when no scanner is registered for a format"""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "Unknown format"


class ConfigError(UrlsCoreError, ValueError):
    """Raised when a configuration file cannot be validated"""


__all__ = ["UrlsCoreError", "UnknownFormatError", "ConfigError"]
