"""Shared model wrapper, vector arithmetic and exceptions."""

from .errors import ReviewVecError, NotFoundError, DimensionMismatchError
from .vector_math import subtract, euclidean_distance
from .w2v_model import VocabularyModel, Synonym, validate_k

__all__ = [
    "ReviewVecError",
    "NotFoundError",
    "DimensionMismatchError",
    "subtract",
    "euclidean_distance",
    "VocabularyModel",
    "Synonym",
    "validate_k",
]
