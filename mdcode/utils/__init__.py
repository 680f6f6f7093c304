# mdcode/utils/__init__.py
from .text import apply_prefix, line_at, line_starts, normalize_newlines, split_lines

__all__ = [
    "apply_prefix",
    "line_at",
    "line_starts",
    "normalize_newlines",
    "split_lines",
]
