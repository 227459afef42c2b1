"""Built-in format scanners."""
from __future__ import annotations

from ..registry import ScannerRegistry
from .markdown import MarkdownScanner
from .markup import HtmlScanner, XmlScanner
from .script import ScriptScanner
from .structured import IniScanner, TomlScanner
from .stylesheet import StylesheetScanner
from .text import JsonScanner, PropertiesScanner, YamlScanner

BUILTIN_SCANNERS = (
    MarkdownScanner,
    HtmlScanner,
    StylesheetScanner,
    ScriptScanner,
    JsonScanner,
    YamlScanner,
    PropertiesScanner,
    TomlScanner,
    IniScanner,
    XmlScanner,
)


def load_builtin_scanners(registry: ScannerRegistry) -> ScannerRegistry:
    for scanner_cls in BUILTIN_SCANNERS:
        registry.register(scanner_cls())
    return registry


__all__ = [
    "BUILTIN_SCANNERS",
    "load_builtin_scanners",
    "MarkdownScanner",
    "HtmlScanner",
    "XmlScanner",
    "StylesheetScanner",
    "ScriptScanner",
    "JsonScanner",
    "YamlScanner",
    "PropertiesScanner",
    "TomlScanner",
    "IniScanner",
]
