from .region import Region, find_region, find_regions, outline, read_region, replace_region

__all__ = ["Region", "find_region", "find_regions", "outline", "read_region", "replace_region"]
