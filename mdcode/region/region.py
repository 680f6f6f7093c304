# mdcode/region/region.py
from __future__ import annotations

import logging
from typing import Iterator, NamedTuple, Optional, Tuple

from .._logging import resolve_logger
from ..errors.region import MissingEndRegionError
from ..rewrite import Edit, apply_changes
from ..utils.text import line_at
from .markers import ANONYMOUS_END_RE, ANY_BEGIN_RE, ANY_END_RE, named_markers


class Region(NamedTuple):
    """Body of a region: source[begin:end], between its two marker lines."""

    name: str
    begin: int
    end: int


def find_region(source: str, name: str) -> Optional[Region]:
    """
    Locate the first region called `name`.

    The body ends at the first `#endregion <name>` after the opening marker,
    or failing that at the first anonymous `#endregion`. Returns None when
    either marker is missing. An empty name never names a region.
    """
    if not name:
        return None

    begin_re, end_re = named_markers(name)
    begin = begin_re.search(source)
    if not begin:
        return None

    end = end_re.search(source, begin.end()) or ANONYMOUS_END_RE.search(source, begin.end())
    if not end:
        return None

    return Region(name, begin.end(), end.start())


def find_regions(source: str) -> Iterator[Region]:
    """
    Yield every region in document order, scanning left to right.

    Each `#region <name>` marker is closed by the next `#endregion`, named or
    not; scanning resumes after that closing marker. Raises
    MissingEndRegionError for a `#region` with no `#endregion` after it.
    """
    pos = 0
    while pos < len(source):
        begin = ANY_BEGIN_RE.search(source, pos)
        if not begin:
            return
        end = ANY_END_RE.search(source, begin.end())
        if not end:
            raise MissingEndRegionError(begin.group("name"), line_at(source, begin.start()))
        yield Region(begin.group("name"), begin.end(), end.start())
        pos = end.end()


def read_region(source: str, name: str, *, logger=None, log: bool = False) -> Tuple[Optional[str], bool]:
    """Return (body, True) for the named region, or (None, False) if absent."""
    log = resolve_logger(logger=logger, enabled=log, name=__name__)
    region = find_region(source, name)
    if region is None:
        log.debug("region '%s' not found", name)
        return None, False
    return source[region.begin:region.end], True


def replace_region(
    source: str, name: str, value: str, *, logger=None, log: bool = False
) -> Tuple[str, bool]:
    """
    Swap the body of the named region for `value`, keeping both marker lines.

    Returns (new_source, True), or (source, False) unchanged when the region
    or its terminator is missing.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__)
    region = find_region(source, name)
    if region is None:
        log.debug("region '%s' not found; nothing replaced", name)
        return source, False
    return apply_changes(source, [Edit(region.begin, region.end, value)], logger=log), True


def outline(source: str, *, logger=None, log: bool = False) -> Tuple[str, bool]:
    """
    Strip the body of every region, keeping the #region/#endregion lines.

    Returns (new_source, found_any). Unlike the targeted lookups, an
    unterminated region is fatal here: MissingEndRegionError is raised and
    nothing is returned.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__)
    regions = list(find_regions(source))
    if not regions:
        return source, False

    if log.isEnabledFor(logging.DEBUG):
        log.debug("outlining %d region(s): %s", len(regions), ", ".join(r.name for r in regions))
    edits = [Edit(r.begin, r.end, "") for r in regions]
    return apply_changes(source, edits, logger=log), True
