"""Utility exports."""
from .text import line_and_column, split_lines, to_text

__all__ = ["line_and_column", "split_lines", "to_text"]
