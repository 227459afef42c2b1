"""Suppressed-region tracking for scanners.

Comments and fenced code never yield tokens. Region state is a small state
machine folded across the document's lines: each call to :func:`advance`
takes the state left by the previous line and returns the suppressed spans of
the current line together with the state handed to the next one.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional, Tuple

FENCE_MARKER = "```"


class RegionState(str, Enum):
    NORMAL = "normal"
    IN_BLOCK_COMMENT = "in-block-comment"
    IN_FENCED_CODE = "in-fenced-code"


@dataclass(slots=True, frozen=True)
class CommentSyntax:
    block_open: Optional[str] = None
    block_close: Optional[str] = None
    line_prefixes: Tuple[str, ...] = ()
    fences: bool = False


NO_COMMENTS = CommentSyntax()
MARKUP_COMMENTS = CommentSyntax(block_open="<!--", block_close="-->")
MARKDOWN_COMMENTS = CommentSyntax(block_open="<!--", block_close="-->", fences=True)
CSS_COMMENTS = CommentSyntax(block_open="/*", block_close="*/")
HASH_LINE_COMMENTS = CommentSyntax(line_prefixes=("#",))
PROPERTIES_COMMENTS = CommentSyntax(line_prefixes=("#", "!"))


@dataclass(slots=True, frozen=True)
class LineRegions:
    """Suppressed spans of one line plus the state carried to the next."""

    spans: Tuple[Tuple[int, int], ...]
    state: RegionState
    whole_line: bool = False

    def is_suppressed(self, index: int) -> bool:
        if self.whole_line:
            return True
        return any(start <= index < end for start, end in self.spans)


def is_fence(line: str) -> bool:
    return line.strip().startswith(FENCE_MARKER)


def in_inline_code(line: str, index: int) -> bool:
    """True when an odd number of backticks precede ``index``."""

    return line.count("`", 0, index) % 2 == 1


def advance(line: str, state: RegionState, syntax: CommentSyntax) -> LineRegions:
    if syntax.fences:
        if state is RegionState.IN_FENCED_CODE:
            next_state = RegionState.NORMAL if is_fence(line) else state
            return LineRegions(spans=(), state=next_state, whole_line=True)
        if state is RegionState.NORMAL and is_fence(line):
            return LineRegions(spans=(), state=RegionState.IN_FENCED_CODE, whole_line=True)

    if state is RegionState.NORMAL and syntax.line_prefixes:
        if line.lstrip().startswith(syntax.line_prefixes):
            return LineRegions(spans=(), state=state, whole_line=True)

    if syntax.block_open and syntax.block_close:
        return _block_comment_regions(line, state, syntax.block_open, syntax.block_close)
    return LineRegions(spans=(), state=state)


def _block_comment_regions(line: str, state: RegionState, opener: str, closer: str) -> LineRegions:
    spans = []
    cursor = 0
    while cursor <= len(line):
        if state is RegionState.IN_BLOCK_COMMENT:
            end = line.find(closer, cursor)
            if end == -1:
                spans.append((cursor, len(line)))
                break
            spans.append((cursor, end + len(closer)))
            cursor = end + len(closer)
            state = RegionState.NORMAL
            continue
        start = line.find(opener, cursor)
        if start == -1:
            break
        end = line.find(closer, start + len(opener))
        if end == -1:
            spans.append((start, len(line)))
            state = RegionState.IN_BLOCK_COMMENT
            break
        spans.append((start, end + len(closer)))
        cursor = end + len(closer)
    return LineRegions(spans=tuple(spans), state=state)


def fold_regions(lines: Iterable[str], syntax: CommentSyntax) -> Iterator[LineRegions]:
    """Yield the :class:`LineRegions` of every line in order."""

    state = RegionState.NORMAL
    for line in lines:
        regions = advance(line, state, syntax)
        state = regions.state
        yield regions


__all__ = [
    "RegionState",
    "CommentSyntax",
    "LineRegions",
    "NO_COMMENTS",
    "MARKUP_COMMENTS",
    "MARKDOWN_COMMENTS",
    "CSS_COMMENTS",
    "HASH_LINE_COMMENTS",
    "PROPERTIES_COMMENTS",
    "advance",
    "fold_regions",
    "in_inline_code",
    "is_fence",
]
