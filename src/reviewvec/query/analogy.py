"""
Word analogies in embedding space.

Two operations are provided. ``analogy`` scores how well "x is to y as z is
to a" holds by comparing pair difference vectors; smaller is better.
``complete_analogy`` solves "x is to y as z is to ?" with the usual
offset arithmetic and a nearest-neighbour lookup.
"""
from __future__ import annotations

import logging
from typing import List

import numpy as np

from reviewvec.common.vector_math import euclidean_distance, subtract
from reviewvec.common.w2v_model import Synonym, VocabularyModel, validate_k
from .synonyms import tokenize_phrase

logger = logging.getLogger(__name__)

__all__ = [
    "AnalogyEngine",
    "analogy",
    "complete_analogy",
]


class AnalogyEngine:
    """Analogy scoring and completion against one model."""

    def __init__(self, model: VocabularyModel):
        self.model = model

    def resolve(self, phrase: str) -> np.ndarray:
        """Phrase to vector using the first-token rule."""
        return self.model.embed(tokenize_phrase(phrase))

    def score(self, x: str, is_to_y: str, like_z: str, is_to_a: str) -> float:
        """
        Distance between the (x, y) and (z, a) pair offsets.

        Computes ``left = v(x) - v(is_to_y)`` and
        ``right = v(is_to_a) - v(like_z)`` and returns their Euclidean
        distance. Note that the second pair is subtracted the other way
        round from the first.

        Returns:
            Raw non-negative distance, unnormalized.

        Raises:
            NotFoundError: If any phrase is out of vocabulary.
        """
        vx = self.resolve(x)
        vy = self.resolve(is_to_y)
        vz = self.resolve(like_z)
        va = self.resolve(is_to_a)

        left = subtract(vx, vy)
        right = subtract(va, vz)
        distance = euclidean_distance(left, right)
        logger.debug(f"Analogy {x}:{is_to_y} :: {like_z}:{is_to_a} -> {distance:.4f}")
        return distance

    def complete(self, x: str, is_to_y: str, like_z: str, k: int = 10) -> List[Synonym]:
        """
        Candidates for "x is to y as z is to ?".

        Ranks tokens by similarity to ``v(is_to_y) - v(x) + v(like_z)``,
        leaving out the tokens the three phrases resolve to.

        Raises:
            ValueError: If k is not an integer >= 1.
            NotFoundError: If any phrase is out of vocabulary.
        """
        validate_k(k)
        phrases = (x, is_to_y, like_z)
        vx, vy, vz = (self.resolve(p) for p in phrases)
        target = subtract(vy, vx) + vz

        excluded = {tokenize_phrase(p)[0] for p in phrases}
        # ask for enough extra neighbours to survive the exclusion
        hits = self.model.nearest_tokens(target, k + len(excluded))
        result = [hit for hit in hits if hit.token.lower() not in excluded]
        return result[:k]


def analogy(model: VocabularyModel, x: str, is_to_y: str, like_z: str, is_to_a: str) -> float:
    """Shorthand for ``AnalogyEngine(model).score(...)``."""
    return AnalogyEngine(model).score(x, is_to_y, like_z, is_to_a)


def complete_analogy(
    model: VocabularyModel, x: str, is_to_y: str, like_z: str, k: int = 10
) -> List[Synonym]:
    """Shorthand for ``AnalogyEngine(model).complete(...)``."""
    return AnalogyEngine(model).complete(x, is_to_y, like_z, k)
