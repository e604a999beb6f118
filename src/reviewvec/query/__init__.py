"""Synonym and analogy queries over a trained VocabularyModel."""

from .synonyms import QueryComposer, find_synonyms, tokenize_phrase
from .analogy import AnalogyEngine, analogy, complete_analogy

__all__ = [
    "QueryComposer",
    "find_synonyms",
    "tokenize_phrase",
    "AnalogyEngine",
    "analogy",
    "complete_analogy",
]
