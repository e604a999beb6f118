"""Exceptions raised by reviewvec."""

__all__ = [
    "ReviewVecError",
    "NotFoundError",
    "DimensionMismatchError",
]


class ReviewVecError(Exception):
    """Base class for reviewvec errors."""


class NotFoundError(ReviewVecError, KeyError):
    """
    A token has no entry in the vocabulary model.

    Raised for tokens below the minimum corpus frequency or never seen at all.
    Subclasses KeyError so callers used to gensim's lookups keep working.
    """

    def __init__(self, token):
        self.token = token
        super().__init__(token)

    def __str__(self):
        return f"Word '{self.token}' is not in the vocabulary."


class DimensionMismatchError(ReviewVecError, ValueError):
    """Two vectors of unequal length were combined."""

    def __init__(self, left_size, right_size):
        self.left_size = left_size
        self.right_size = right_size
        super().__init__(
            f"Vector dimensions do not match: {left_size} != {right_size}"
        )
