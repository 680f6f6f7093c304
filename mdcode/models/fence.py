from dataclasses import dataclass, field
from typing import List


@dataclass
class FenceSpan:
    """A fenced code block located in the source text, before metadata parsing."""
    kind: str          # "fence" or "script" (fence disguised in an HTML comment)
    info: str          # raw info string after the opening fence marker
    start_line: int    # 1-based line of the opening fence
    end_line: int      # 1-based line of the closing fence (last body line if unclosed)
    body_start: int    # absolute index of the first body char
    body_end: int      # absolute index AFTER the last body char
    code: str          # body with any container prefix removed
    prefix: str = ""   # container prefix for body lines added by an edit
    line_prefixes: List[str] = field(default_factory=list)  # prefix each original body line lost
    lead: str = ""     # line break owed before the body when the opener ends the document
