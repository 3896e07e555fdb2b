"""Errors raised by the vector index."""

from typing import Optional


class DimensionMismatch(ValueError):
    """A vector's length disagrees with the index dimensionality."""

    def __init__(self, expected: Optional[int], actual: int, message: Optional[str] = None):
        self.expected = expected
        self.actual = actual
        if message is None:
            message = f"Expected a vector of length {expected}, got length {actual}"
        super().__init__(message)
