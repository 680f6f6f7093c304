from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Tuple

from ..utils.text import apply_prefix
from .fence import FenceSpan


def as_string(value: Any) -> str:
    """
    Render a metadata value the way Go's fmt.Sprint would.

    Strings pass through, booleans become "true"/"false", integral floats
    lose their fractional part ("1.0" -> "1") and None becomes "<nil>".
    """
    if isinstance(value, str):
        return value
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    return str(value)


class Meta(dict):
    """Key/value metadata parsed from the tail of a fence info string."""

    def get_str(self, key: str) -> str:
        """Return the value for `key` as a string, or "" when it is missing."""
        if key not in self:
            return ""
        return as_string(self[key])


@dataclass
class Block:
    """One fenced code block. Only `code` is meant to be changed by callers."""

    lang: str = ""
    meta: Meta = field(default_factory=Meta)
    code: str = ""
    start_line: int = 0
    end_line: int = 0


@dataclass
class Change:
    """An edited block together with the span it was read from."""

    span: FenceSpan
    block: Block

    def bounds(self) -> Tuple[int, int]:
        return self.span.body_start, self.span.body_end

    def replacement(self) -> str:
        code = apply_prefix(self.block.code, self.span.prefix, self.span.line_prefixes, self.span.code)
        if code and self.span.lead:
            return self.span.lead + code
        return code
