# mdcode/rewrite.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence, Tuple

from ._logging import resolve_logger
from .errors.rewrite import RewriteError


class Splice(Protocol):
    def bounds(self) -> Tuple[int, int]: ...

    def replacement(self) -> str: ...


@dataclass
class Edit:
    """Replace source[start:end] with `text`."""

    start: int
    end: int
    text: str

    def bounds(self) -> Tuple[int, int]:
        return self.start, self.end

    def replacement(self) -> str:
        return self.text


def apply_changes(source: str, changes: Sequence[Splice], *, logger=None, log: bool = False) -> str:
    """
    Rebuild `source` with every change spliced in, in a single pass.

    `changes` must be in document order and must not overlap. Text between
    and around the changes is copied verbatim, so edits may grow or shrink
    their spans freely.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__)

    size = len(source)
    parts = []
    cursor = 0
    for change in changes:
        start, stop = change.bounds()
        if start < cursor or stop < start or stop > len(source):
            raise RewriteError(
                f"edit [{start}, {stop}) is out of order or out of bounds (cursor={cursor}, size={len(source)})"
            )
        text = change.replacement()
        size += len(text) - (stop - start)
        parts.append(source[cursor:start])
        parts.append(text)
        cursor = stop
    parts.append(source[cursor:])

    log.debug("applied %d edit(s): %d -> %d chars", len(changes), len(source), size)
    return "".join(parts)
