# mdcode/extract/fences.py

from __future__ import annotations

import os
import re
from functools import lru_cache
from typing import List, Optional, Tuple

from markdown_it import MarkdownIt
from markdown_it.token import Token

from .._logging import resolve_logger
from ..models.fence import FenceSpan
from ..utils.text import line_starts, normalize_newlines, split_lines

# First line of an HTML block hiding a fenced block from Markdown renderers:
#   <!-- <script type="text/markdown">
_SCRIPT_OPEN_RE = re.compile(r"""^\s*(<!--)?\s*<script\s*type=["']text/markdown["']\s*>\s*$""")
_INNER_FENCE_RE = re.compile(r"^\s*```")
_WRAPPER_CLOSE_RE = re.compile(r"-->|</script\s*>", re.IGNORECASE)


@lru_cache(maxsize=1)
def _markdown_parser() -> MarkdownIt:
    # The commonmark preset keeps raw HTML blocks, which the script pre-pass needs.
    return MarkdownIt("commonmark")


def _offset(starts: List[int], line: int) -> int:
    return starts[min(line, len(starts) - 1)]


def _strip_container(raw: str, content: str) -> Tuple[str, str, List[str]]:
    """
    Compare the raw body text with the parser's de-indented content.

    Top-level fences come back unchanged (raw text, no prefix) so CRLF endings
    survive. Fences inside lists, blockquotes or indented openers yield the
    parser content, the prefix shared by their text lines, and the prefix
    each body line actually lost.
    """
    if normalize_newlines(raw) == content:
        return raw, "", []

    content_lines = split_lines(content)
    lost: List[Optional[str]] = []
    for raw_line, content_line in zip(split_lines(normalize_newlines(raw)), content_lines):
        if raw_line.endswith(content_line):
            lost.append(raw_line[: len(raw_line) - len(content_line)])
        else:
            lost.append(None)

    # Blank lines may have lost trailing prefix spaces, so text lines decide.
    text_prefixes = [p for p, line in zip(lost, content_lines) if p is not None and line.strip()]
    if text_prefixes:
        prefix = os.path.commonprefix(text_prefixes)
    else:
        prefix = next((p for p in lost if p is not None), "")
    return content, prefix, [prefix if p is None else p for p in lost]


def _fence_span(token: Token, source: str, starts: List[int], log) -> FenceSpan:
    first, last = token.map
    body_first = first + 1
    body_last = body_first + len(split_lines(token.content))
    if last <= body_last:
        log.warning("fence opened on line %d is never closed", first + 1)
    body_start = _offset(starts, body_first)
    body_end = _offset(starts, body_last)
    code, prefix, line_prefixes = _strip_container(source[body_start:body_end], token.content)
    # An opener on the last line with no line break leaves nowhere to put a body.
    lead = "\n" if body_start == len(source) and not source.endswith(("\n", "\r")) else ""
    start_line = first + 1
    return FenceSpan(
        kind="fence",
        info=token.info,
        start_line=start_line,
        # map[1] is exclusive and 0-based: it is the 1-based closing fence line,
        # or the last body line when the fence runs to the end of its container.
        end_line=max(last, start_line + 1),
        body_start=body_start,
        body_end=body_end,
        code=code,
        prefix=prefix,
        line_prefixes=line_prefixes,
        lead=lead,
    )


def _script_span(token: Token, source: str, starts: List[int], log) -> Optional[FenceSpan]:
    first, _ = token.map
    lines = split_lines(token.content)
    if lines and _WRAPPER_CLOSE_RE.search(lines[-1]) and not _INNER_FENCE_RE.match(lines[-1]):
        lines = lines[:-1]

    # opener, inner opening fence, inner closing fence
    if len(lines) < 3 or not _SCRIPT_OPEN_RE.match(lines[0].rstrip("\r\n")):
        return None

    m = _INNER_FENCE_RE.match(lines[1])
    if not m:
        log.debug("script block on line %d has no inner fence", first + 1)
        return None
    if not _INNER_FENCE_RE.match(lines[-1]):
        log.warning("script block on line %d has no closing inner fence; ignored", first + 1)
        return None

    body_first = first + 2
    body_last = first + len(lines) - 1
    body_start = _offset(starts, body_first)
    body_end = _offset(starts, body_last)
    code, prefix, line_prefixes = _strip_container(source[body_start:body_end], "".join(lines[2:-1]))
    return FenceSpan(
        kind="script",
        info=lines[1][m.end():].rstrip("\r\n"),
        start_line=first + 2,
        end_line=first + len(lines),
        body_start=body_start,
        body_end=body_end,
        code=code,
        prefix=prefix,
        line_prefixes=line_prefixes,
    )


def find_fences(source: str, *, logger=None, log: bool = False) -> List[FenceSpan]:
    """
    Locate every fenced code block in a Markdown document, in document order.

    This is the pre-pass that turns the parser's token stream into plain spans.
    Besides ordinary ``` / ~~~ fences it unwraps blocks hidden inside an HTML
    comment so renderers skip them:

        <!-- <script type="text/markdown">
        ```sh
        echo hidden
        ```
        </script> -->

    Fences nested in lists and blockquotes are reported too; see FenceSpan.prefix.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__)
    tokens = _markdown_parser().parse(source)
    starts = line_starts(source)

    spans: List[FenceSpan] = []
    for token in tokens:
        if token.map is None:
            continue
        if token.type == "fence":
            span = _fence_span(token, source, starts, log)
        elif token.type == "html_block":
            span = _script_span(token, source, starts, log)
        else:
            continue
        if span is None:
            continue
        log.debug(
            "found %s block at lines %d-%d (info=%r)",
            span.kind, span.start_line, span.end_line, span.info,
        )
        spans.append(span)
    return spans
