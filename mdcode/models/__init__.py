from .blocks import Block, Change, Meta, as_string
from .fence import FenceSpan

__all__ = ["Block", "Change", "FenceSpan", "Meta", "as_string"]
