import copy
import os
import logging
from typing import Iterable, List, NamedTuple, Optional, Sequence

import numpy as np
import pandas as pd
from gensim.models import KeyedVectors, Word2Vec

from .errors import DimensionMismatchError, NotFoundError

logger = logging.getLogger(__name__)

__all__ = [
    "Synonym",
    "VocabularyModel",
    "validate_k",
]


def validate_k(k):
    """Reject anything but a non-bool integer k >= 1 with ValueError."""
    if isinstance(k, bool) or not isinstance(k, int) or k < 1:
        raise ValueError(f"k must be an integer >= 1, got {k!r}")


class Synonym(NamedTuple):
    """One nearest-neighbour hit: a token and its similarity to the query."""
    token: str
    similarity: float


class VocabularyModel:
    """
    A read-only token-to-embedding mapping backed by gensim KeyedVectors.

    Built once, either by training Word2Vec on a document collection or by
    loading a saved .kv file, and never modified afterwards. Lookups hand back
    copies, so callers are free to do arithmetic on what they receive.
    """

    def __init__(self, keyed_vectors):
        """
        Wrap an existing KeyedVectors instance.

        A writeable vector matrix is copied before being frozen, so the
        caller's KeyedVectors stays writeable and later edits to it do not
        reach this model. mmap'd matrices are already read-only and are shared.

        Args:
            keyed_vectors (KeyedVectors): Trained word vectors.

        Raises:
            TypeError: If keyed_vectors is not a KeyedVectors instance.
            ValueError: If the vocabulary is empty.
        """
        if not isinstance(keyed_vectors, KeyedVectors):
            raise TypeError("keyed_vectors must be a gensim KeyedVectors instance.")
        if len(keyed_vectors.index_to_key) == 0:
            raise ValueError("The vocabulary model has no tokens.")

        keyed_vectors = copy.copy(keyed_vectors)
        if keyed_vectors.vectors.flags.writeable:
            keyed_vectors.vectors = np.array(keyed_vectors.vectors, copy=True)
            keyed_vectors.vectors.flags.writeable = False
            keyed_vectors.norms = None

        self.model = keyed_vectors
        self.vocab = frozenset(keyed_vectors.index_to_key)
        self.vector_size = keyed_vectors.vector_size

    @classmethod
    def train(
        cls,
        documents: Iterable[Sequence[str]],
        vector_size: int = 200,
        min_count: int = 10,
        window: int = 5,
        epochs: int = 5,
        workers: int = 1,
        seed: int = 42,
    ):
        """
        Train a Word2Vec model on tokenized documents.

        Args:
            documents: Token sequences, one per sentence.
            vector_size (int): Embedding dimensionality.
            min_count (int): Tokens seen fewer times than this are dropped.
            window (int): Context window size.
            epochs (int): Passes over the corpus.
            workers (int): gensim worker threads. With 1 worker and a fixed seed, repeat
                runs match only within one process unless PYTHONHASHSEED is
                also fixed.
            seed (int): Random seed for the training library.

        Returns:
            VocabularyModel: The trained, read-only model.

        Raises:
            ValueError: If no token reaches min_count.
        """
        sentences = [list(doc) for doc in documents if len(doc) > 0]
        logger.info(
            f"Training Word2Vec on {len(sentences)} documents "
            f"(vector_size={vector_size}, min_count={min_count})"
        )

        w2v = Word2Vec(
            vector_size=vector_size,
            min_count=min_count,
            window=window,
            epochs=epochs,
            workers=workers,
            seed=seed,
        )
        w2v.build_vocab(sentences)

        if len(w2v.wv.index_to_key) == 0:
            raise ValueError(
                f"No token occurs at least min_count={min_count} times in the corpus."
            )

        w2v.train(sentences, total_examples=w2v.corpus_count, epochs=w2v.epochs)
        logger.info(f"Vocabulary size: {len(w2v.wv.index_to_key)}")
        return cls(w2v.wv)

    @classmethod
    def load(cls, model_path):
        """
        Load a model saved as a .kv file.

        Args:
            model_path (str): Path to the .kv file.

        Raises:
            FileNotFoundError: If the provided model_path does not exist.
            ValueError: If the file is not a .kv file.
        """
        model_path = str(model_path)
        if not os.path.exists(model_path):
            raise FileNotFoundError(f"Model file not found: {model_path}")
        if not model_path.endswith(".kv"):
            raise ValueError("The model file must be a .kv file.")

        logger.debug(f"Loading vocabulary model from {model_path}")
        return cls(KeyedVectors.load(model_path, mmap="r"))

    def save(self, output_path):
        """
        Save the model in gensim's KeyedVectors format.

        Args:
            output_path (str): Destination path, must end in .kv.

        Raises:
            ValueError: If output_path does not end in .kv.
        """
        output_path = str(output_path)
        if not output_path.endswith(".kv"):
            raise ValueError("The output file must be a .kv file.")

        parent = os.path.dirname(output_path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        self.model.save(output_path)
        logger.info(f"Saved vocabulary model to {output_path}")

    def __contains__(self, token):
        return token in self.vocab

    def __len__(self):
        return len(self.vocab)

    def vector(self, token) -> np.ndarray:
        """
        Return a copy of the embedding for a single token.

        Raises:
            NotFoundError: If the token is out of vocabulary.
        """
        if token not in self.vocab:
            raise NotFoundError(token)
        return np.array(self.model[token], copy=True)

    def embed(self, tokens: Sequence[str]) -> np.ndarray:
        """
        Reduce a token sequence to one embedding.

        Only the first token is used; the rest of the sequence is ignored.
        Multi-word phrases therefore resolve to their first word's vector.

        Raises:
            NotFoundError: If the sequence is empty or its first token is
                out of vocabulary.
        """
        if len(tokens) == 0:
            raise NotFoundError("")
        return self.vector(tokens[0])

    def nearest_tokens(self, token_or_vector, k: int) -> List[Synonym]:
        """
        Retrieve the k most similar tokens by cosine similarity.

        A token query leaves the token itself out of the result; a vector
        query returns whatever lies closest, including an exact match.

        Args:
            token_or_vector (str or array-like): Query token or embedding.
            k (int): Maximum number of neighbours. Larger than the vocabulary
                simply returns every candidate.

        Returns:
            list of Synonym, in descending similarity.

        Raises:
            ValueError: If k is not an integer >= 1.
            NotFoundError: If a token query is out of vocabulary.
            DimensionMismatchError: If a vector query has the wrong length.
        """
        validate_k(k)

        if isinstance(token_or_vector, str):
            if token_or_vector not in self.vocab:
                raise NotFoundError(token_or_vector)
            hits = self.model.most_similar(token_or_vector, topn=k)
        else:
            query = np.asarray(token_or_vector, dtype=np.float32)
            if query.shape != (self.vector_size,):
                raise DimensionMismatchError(query.size, self.vector_size)
            hits = self.model.similar_by_vector(query, topn=k)

        return [Synonym(word, float(score)) for word, score in hits]

    def similarity(self, word1, word2):
        """
        Cosine similarity between two in-vocabulary words.

        Raises:
            NotFoundError: If either word is out of vocabulary.
        """
        for word in (word1, word2):
            if word not in self.vocab:
                raise NotFoundError(word)
        return float(self.model.similarity(word1, word2))

    def to_frame(self, words: Optional[Iterable[str]] = None) -> pd.DataFrame:
        """
        Tabulate the model as a DataFrame with 'word' and 'vector' columns.

        Args:
            words (iterable of str, optional): Restrict to these words, in
                order. Unknown words are skipped. Defaults to the whole
                vocabulary in frequency order.
        """
        if words is None:
            words = self.model.index_to_key
        else:
            words = [w for w in words if w in self.vocab]

        return pd.DataFrame({
            "word": list(words),
            "vector": [self.vector(w) for w in words],
        })
