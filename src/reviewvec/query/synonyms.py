"""Synonym lookup for free-text phrases."""
from __future__ import annotations

import logging
from typing import List, Tuple

from reviewvec.common.w2v_model import Synonym, VocabularyModel, validate_k

logger = logging.getLogger(__name__)

__all__ = [
    "tokenize_phrase",
    "QueryComposer",
    "find_synonyms",
]


def tokenize_phrase(phrase: str) -> Tuple[str, ...]:
    """
    Lowercase and whitespace-split a query phrase.

    Lighter than corpus normalization: punctuation and markup are left alone.

    Example:
        >>> tokenize_phrase("  Pride and Prejudice ")
        ('pride', 'and', 'prejudice')
    """
    return tuple(phrase.lower().split())


class QueryComposer:
    """
    Turns a phrase into a nearest-neighbour query against one model.

    The phrase resolves to the embedding of its first token; neighbours that
    already appear in the phrase are dropped from the result.
    """

    def __init__(self, model: VocabularyModel):
        self.model = model

    def query(self, phrase: str, k: int = 10) -> List[Synonym]:
        """
        Find up to k tokens similar to a phrase.

        Args:
            phrase: Free-text query, e.g. "Movie"
            k: Number of neighbours requested from the model

        Returns:
            Synonyms in descending similarity. May hold fewer than k entries
            once phrase tokens are filtered out; never padded.

        Raises:
            ValueError: If k is not an integer >= 1.
            NotFoundError: If the phrase's first token is out of vocabulary.
        """
        validate_k(k)
        tokens = tokenize_phrase(phrase)
        vector = self.model.embed(tokens)

        excluded = set(tokens)
        neighbours = self.model.nearest_tokens(vector, k)
        result = [hit for hit in neighbours if hit.token.lower() not in excluded]

        logger.debug(
            f"Query {phrase!r}: {len(neighbours)} neighbours, {len(result)} after filtering"
        )
        return result


def find_synonyms(model: VocabularyModel, phrase: str, k: int = 10) -> List[Synonym]:
    """Shorthand for ``QueryComposer(model).query(phrase, k)``."""
    return QueryComposer(model).query(phrase, k)
