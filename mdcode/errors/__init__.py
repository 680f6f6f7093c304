from .extract import ExtractError, MetaParseError
from .region import MissingEndRegionError, RegionError
from .rewrite import RewriteError

__all__ = ["ExtractError", "MetaParseError", "RegionError", "MissingEndRegionError", "RewriteError"]
