"""
Review corpus acquisition pipeline.

This module reads a newline-delimited review corpus, cleans it into
sentence Documents, removes stopwords and trains a Word2Vec model.

Main entry points:
    train_review_model() - Full pipeline from corpus file to trained model
    normalize() - Raw text to sentence Documents

Key components:
    - core: Main pipeline orchestration
    - reader: Corpus file reading
    - tokenizer: Markup/punctuation cleanup and sentence tokenization
    - stopwords: Stopword filtering
    - config: Corpus and training configuration
"""

from .core import train_review_model, prepare_documents, load_documents
from .config import (
    CorpusConfig,
    TrainingConfig,
    AcquisitionConfig,
    build_model_path,
)
from .tokenizer import Document, normalize, normalize_documents
from .stopwords import build_stopwords, remove_stopwords

__all__ = [
    "train_review_model",
    "prepare_documents",
    "load_documents",
    "CorpusConfig",
    "TrainingConfig",
    "AcquisitionConfig",
    "build_model_path",
    "Document",
    "normalize",
    "normalize_documents",
    "build_stopwords",
    "remove_stopwords",
]
