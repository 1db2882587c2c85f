class DimensionMismatchError(ValueError):
    """A vector or matrix does not have the shape a layer requires."""


class UnsupportedVariantError(NotImplementedError):
    """A declared variant has no implementation yet."""
