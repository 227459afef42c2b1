"""Text helpers shared across modules."""
from __future__ import annotations

from typing import List

def to_text(data: str | bytes) -> str:
    if isinstance(data, bytes):
        return data.decode("utf-8", errors="replace")
    return data

def split_lines(text: str) -> List[str]:
    """Split on newlines only; carriage returns stay with their line."""
    return text.split("\n")

def line_and_column(text: str, offset: int) -> tuple[int, int]:
    """Convert a zero-based character offset into a 1-based line and column."""
    line = text.count("\n", 0, offset) + 1
    line_start = text.rfind("\n", 0, offset) + 1
    return line, offset - line_start + 1


__all__ = ["to_text", "split_lines", "line_and_column"]
