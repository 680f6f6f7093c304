from .fences import find_fences
from .meta import parse_info, parse_meta
from .walk import Walker, extract_block, unfence, walk

__all__ = [
    "find_fences",
    "parse_info",
    "parse_meta",
    "extract_block",
    "unfence",
    "walk",
    "Walker",
]
