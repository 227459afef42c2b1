"""Scanners for TOML and INI documents.

Both parse the document into a value tree first and walk it, so every token
carries the dotted key path it was found under. When the parser rejects the
document, the parse outcome is a :class:`Fallback` and the raw text is scanned
line by line instead.
"""
from __future__ import annotations

import configparser
import tomllib
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union

import structlog

from ...classifier import is_valid_url
from ...collect import walk_strings
from ...models import FileFormat, Position, RecoveryAction, Severity
from ...utils.text import line_and_column
from ..patterns import iter_boundary_matches
from ..registry import FormatScanner, LineScanner, ScanContext
from ..suppression import CommentSyntax, HASH_LINE_COMMENTS

logger = structlog.get_logger(__name__)

_TOP_SECTION = "__urls_core_top__"
_NO_DEFAULT_SECTION = "__urls_core_default__"


@dataclass(slots=True, frozen=True)
class ParsedTree:
    tree: Any


@dataclass(slots=True, frozen=True)
class Fallback:
    text: str
    reason: str


ParseOutcome = Union[ParsedTree, Fallback]


class _FallbackScanner(LineScanner):
    def __init__(self, name: str, comments: CommentSyntax) -> None:
        self.name = name
        self.comments = comments


class _ValueLocator:
    """Find where walked values sit in the source text.

    The cursor moves forward as values are found, so repeated literals map to
    successive occurrences when the walk follows document order. Occurrences
    on comment lines never count.
    """

    __slots__ = ("_text", "_cursor", "_comment_prefixes")

    def __init__(self, text: str, comment_prefixes: Tuple[str, ...] = ()) -> None:
        self._text = text
        self._cursor = 0
        self._comment_prefixes = comment_prefixes

    def locate(self, value: str) -> Optional[Position]:
        index = self._find(value, self._cursor)
        if index == -1:
            index = self._find(value, 0)
            if index == -1:
                return None
        else:
            self._cursor = index + len(value)
        line, column = line_and_column(self._text, index)
        return Position(line=line, column=column)

    def _find(self, value: str, start: int) -> int:
        index = self._text.find(value, start)
        while index != -1 and self._on_comment_line(index):
            index = self._text.find(value, index + len(value))
        return index

    def _on_comment_line(self, index: int) -> bool:
        if not self._comment_prefixes:
            return False
        line_start = self._text.rfind("\n", 0, index) + 1
        return self._text[line_start:index].lstrip().startswith(self._comment_prefixes)


class StructuredScanner(FormatScanner):
    name = "structured"
    label = "Structured"
    comments: CommentSyntax = HASH_LINE_COMMENTS

    def parse(self, text: str) -> ParseOutcome:  # pragma: no cover - protocol
        raise NotImplementedError

    def scan(self, text: str, context: ScanContext | None = None) -> ScanContext:
        context = context if context is not None else ScanContext()
        outcome = self.parse(text)
        if isinstance(outcome, Fallback):
            logger.warning("scanner.fallback", scanner=self.name, reason=outcome.reason)
            context.record(
                f"{self.label} parsing failed, falling back to line scanning: {outcome.reason}",
                recovery_action=RecoveryAction.FALLBACK,
                severity=Severity.WARNING,
            )
            return _FallbackScanner(self.name, self.comments).scan(outcome.text, context)

        locator = _ValueLocator(text, self.comments.line_prefixes)
        for path, leaf in walk_strings(outcome.tree):
            try:
                self._collect_leaf(leaf, path, locator, context)
            except Exception as exc:
                logger.warning("scanner.value_skipped", scanner=self.name, path=path, error=str(exc))
                context.record(f"Skipped value at {path} while scanning {self.name} content: {exc}")
        return context

    def _collect_leaf(self, leaf: str, path: str, locator: _ValueLocator, context: ScanContext) -> None:
        candidate = leaf.strip()
        if candidate and not any(char.isspace() for char in candidate) and is_valid_url(candidate):
            if candidate not in context.seen:
                context.add(candidate, position=locator.locate(candidate), context=path)
            return
        for match in iter_boundary_matches(leaf):
            value = match.group()
            if value not in context.seen:
                context.add(value, position=locator.locate(value), context=path)


class TomlScanner(StructuredScanner):
    """``Cargo.toml``, ``pyproject.toml`` and friends."""

    name = "toml"
    label = "TOML"
    formats = (FileFormat.TOML,)

    def parse(self, text: str) -> ParseOutcome:
        try:
            return ParsedTree(tomllib.loads(text))
        except tomllib.TOMLDecodeError as exc:
            return Fallback(text=text, reason=str(exc))


class IniScanner(StructuredScanner):
    """INI files, including keys that precede the first section header."""

    name = "ini"
    label = "INI"
    formats = (FileFormat.INI,)
    comments = CommentSyntax(line_prefixes=(";", "#"))

    def parse(self, text: str) -> ParseOutcome:
        parser = configparser.ConfigParser(
            interpolation=None,
            allow_no_value=True,
            inline_comment_prefixes=(";", "#"),
            default_section=_NO_DEFAULT_SECTION,
        )
        parser.optionxform = str  # type: ignore[assignment, method-assign]
        try:
            parser.read_string(f"[{_TOP_SECTION}]\n{text}")
        except configparser.Error as exc:
            return Fallback(text=text, reason=str(exc).replace(f"[{_TOP_SECTION}]\n", ""))
        tree: Dict[str, Any] = {}
        for section in parser.sections():
            values = {key: value for key, value in parser.items(section, raw=True)}
            if section == _TOP_SECTION:
                tree.update(values)
            else:
                tree[section] = values
        return ParsedTree(tree)


__all__ = ["ParsedTree", "Fallback", "ParseOutcome", "StructuredScanner", "TomlScanner", "IniScanner"]
