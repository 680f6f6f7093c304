class RegionError(Exception):
    """Base class for #region / #endregion failures."""


class MissingEndRegionError(RegionError):
    """A #region marker has no #endregion anywhere after it."""

    def __init__(self, name: str, line: int):
        super().__init__(f"missing #endregion for region '{name}' opened on line {line}")
        self.name = name
        self.line = line
