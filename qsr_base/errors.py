"""
Error taxonomy for the spatial reasoning system.

All errors are local and synchronous: they are raised to the immediate
caller and never retried internally.
"""


class SRSError(Exception):
    """Base class for spatial reasoning errors."""


class DuplicateIdError(SRSError):
    """A shape with the given id is already stored."""

    def __init__(self, shape_id: int):
        self.shape_id = shape_id
        super().__init__(f"Shape id {shape_id} already exists")


class UnknownShapeError(SRSError):
    """A query or removal referenced an id that is not stored."""

    def __init__(self, shape_id: int):
        self.shape_id = shape_id
        super().__init__(f"No shape with id {shape_id}")


class DegenerateInputError(SRSError, ValueError):
    """Geometry rejected at construction (bad radius, too few vertices, ...)."""
