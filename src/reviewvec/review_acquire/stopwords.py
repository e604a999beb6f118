"""Stopword filtering for normalized review sentences."""
from __future__ import annotations

from typing import FrozenSet, Iterable, Optional
import re

from spacy.lang.en.stop_words import STOP_WORDS

from .tokenizer import Document

__all__ = [
    "MARKUP_RESIDUE",
    "DEFAULT_STOPWORDS",
    "build_stopwords",
    "is_markup_fragment",
    "remove_stopwords",
]

# Fragments left behind by HTML line breaks and links in scraped reviews
MARKUP_RESIDUE = frozenset({"br", "href", "www", "http", "https", "com", "nbsp"})

# Pieces of a kept anchor tag: <a, href=, //www, com/title, >this</a>
_MARKUP_FRAGMENT_RE = re.compile(r"[<>=/]")


def build_stopwords(
    extra: Optional[Iterable[str]] = None,
    include_default: bool = True,
) -> FrozenSet[str]:
    """
    Build a lowercase stopword set.

    Args:
        extra: Additional words to treat as stopwords
        include_default: Start from spaCy's English list plus MARKUP_RESIDUE

    Returns:
        Frozen set of lowercase stopwords
    """
    words = set()
    if include_default:
        words.update(w.lower() for w in STOP_WORDS)
        words.update(MARKUP_RESIDUE)
    if extra:
        words.update(w.lower() for w in extra)
    return frozenset(words)


DEFAULT_STOPWORDS = build_stopwords()


def is_markup_fragment(token: str) -> bool:
    """True for tokens carrying tag or URL characters (<, >, =, /)."""
    return _MARKUP_FRAGMENT_RE.search(token) is not None


def remove_stopwords(
    document: Document,
    stopwords: Optional[FrozenSet[str]] = None,
    drop_markup: bool = True,
) -> Document:
    """
    Drop stopwords from a Document, preserving token order.

    With drop_markup, tokens split out of kept anchor tags (see
    is_markup_fragment) are dropped too.

    Example:
        >>> remove_stopwords(("the", "film", "was", "sparkling"))
        ('film', 'sparkling')
    """
    if stopwords is None:
        stopwords = DEFAULT_STOPWORDS
    return tuple(
        token for token in document
        if token not in stopwords and not (drop_markup and is_markup_fragment(token))
    )
