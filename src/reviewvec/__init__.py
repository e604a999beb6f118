"""
Movie-review word embedding toolkit.

This package trains a gensim Word2Vec model over a newline-delimited
movie-review corpus and answers synonym and analogy queries against it.

Main components:
    - review_acquire: Read, normalize and stopword-filter the corpus, then train
    - common: The VocabularyModel wrapper, vector arithmetic and errors
    - query: Synonym lookups and analogy scoring
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
