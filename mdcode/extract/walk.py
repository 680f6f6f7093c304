# mdcode/extract/walk.py
from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from .._logging import resolve_logger
from ..errors.extract import MetaParseError
from ..models.blocks import Block, Change
from ..models.fence import FenceSpan
from ..rewrite import apply_changes
from .fences import find_fences
from .meta import parse_info

# Called once per block; may replace block.code. Raising aborts the walk.
Walker = Callable[[Block], None]


def extract_block(span: FenceSpan) -> Block:
    """Build a Block from a located span, parsing its info string."""
    try:
        lang, meta = parse_info(span.info)
    except MetaParseError as e:
        raise MetaParseError(f"line {span.start_line}: {e}", e.text) from e
    return Block(
        lang=lang,
        meta=meta,
        code=span.code,
        start_line=span.start_line,
        end_line=span.end_line,
    )


def walk(
    source: str, walker: Walker, *, logger=None, log: bool = False
) -> Tuple[bool, Optional[str]]:
    """
    Call `walker` for every fenced code block in `source`, in document order.

    Returns (True, new_document) when the walker changed at least one block's
    code, otherwise (False, None). Any exception from metadata parsing or from
    the walker propagates unchanged and no rewrite is produced.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__)

    changes: List[Change] = []
    for span in find_fences(source, logger=log):
        block = extract_block(span)
        code = block.code

        walker(block)

        if block.code != code:
            log.debug("block at lines %d-%d modified", block.start_line, block.end_line)
            changes.append(Change(span=span, block=block))

    if not changes:
        return False, None

    return True, apply_changes(source, changes, logger=log)


def unfence(source: str, *, logger=None, log: bool = False) -> List[Block]:
    """Return every fenced code block in `source` without modifying it."""
    blocks: List[Block] = []
    walk(source, blocks.append, logger=logger, log=log)
    return blocks
