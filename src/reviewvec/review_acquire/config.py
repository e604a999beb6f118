"""Configuration and data structures for review acquisition and training."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, Optional

from .stopwords import DEFAULT_STOPWORDS
from .tokenizer import DEFAULT_ALLOWED_TAG


@dataclass
class CorpusConfig:
    """Configuration for a review corpus.

    Attributes:
        path: Newline-delimited corpus file, one review per line
        allowed_tag: Regex for markup tags kept during cleanup (None strips all)
        remove_stopwords: Whether to drop stopwords before training
        stopwords: Stopword set used when remove_stopwords is True
    """
    path: Path
    allowed_tag: Optional[str] = DEFAULT_ALLOWED_TAG
    remove_stopwords: bool = True
    stopwords: FrozenSet[str] = field(default=DEFAULT_STOPWORDS, repr=False)

    def __post_init__(self):
        self.path = Path(self.path)


@dataclass
class TrainingConfig:
    """Word2Vec hyperparameters.

    Attributes:
        vector_size: Embedding dimensionality
        min_count: Minimum corpus frequency for a token to get a vector
        window: Context window size
        epochs: Training passes over the corpus
        workers: gensim worker threads (1 with a fixed seed repeats runs
            within a process; across processes PYTHONHASHSEED must be fixed too)
        seed: Random seed
    """
    vector_size: int = 200
    min_count: int = 10
    window: int = 5
    epochs: int = 5
    workers: int = 1
    seed: int = 42

    def __post_init__(self):
        for name in ("vector_size", "min_count", "window", "epochs", "workers"):
            value = getattr(self, name)
            if value < 1:
                raise ValueError(f"{name} must be at least 1, got {value}")


@dataclass
class AcquisitionConfig:
    """Configuration for a full read-normalize-train run.

    Attributes:
        corpus: Corpus configuration
        model_path: Where to save the trained .kv model (None skips saving)
        training: Word2Vec hyperparameters
    """
    corpus: CorpusConfig
    model_path: Optional[Path] = None
    training: TrainingConfig = field(default_factory=TrainingConfig)

    def __post_init__(self):
        if self.model_path is not None:
            self.model_path = Path(self.model_path)
            if self.model_path.suffix != ".kv":
                raise ValueError(f"model_path must end in .kv, got {self.model_path}")


def build_model_path(model_dir: str | Path, corpus_path: str | Path, vector_size: int) -> Path:
    """Build a model path from a directory, the corpus name and the vector size.

    Example:
        >>> build_model_path("/models", "/data/imdb_reviews.txt", 200)
        PosixPath('/models/imdb_reviews_v200.kv')
    """
    return Path(model_dir) / f"{Path(corpus_path).stem}_v{vector_size}.kv"
