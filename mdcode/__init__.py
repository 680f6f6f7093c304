from .errors import (
    ExtractError,
    MetaParseError,
    MissingEndRegionError,
    RegionError,
    RewriteError,
)
from .extract import extract_block, find_fences, parse_info, parse_meta, unfence, walk
from .models import Block, Change, FenceSpan, Meta, as_string
from .region import Region, find_region, find_regions, outline, read_region, replace_region
from .rewrite import Edit, apply_changes

__all__ = [
    "walk",
    "unfence",
    "find_fences",
    "extract_block",
    "parse_info",
    "parse_meta",
    "apply_changes",
    "Edit",
    "read_region",
    "replace_region",
    "outline",
    "find_region",
    "find_regions",
    "Region",
    "Block",
    "Change",
    "FenceSpan",
    "Meta",
    "as_string",
    "ExtractError",
    "MetaParseError",
    "RegionError",
    "MissingEndRegionError",
    "RewriteError",
]
