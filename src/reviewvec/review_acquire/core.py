"""Main entry point for the review acquisition and training pipeline."""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, Iterator, List

from tqdm import tqdm

from reviewvec.common.w2v_model import VocabularyModel
from .config import AcquisitionConfig, CorpusConfig
from .reader import count_documents, read_corpus
from .stopwords import remove_stopwords
from .tokenizer import Document, normalize

logger = logging.getLogger(__name__)

__all__ = [
    "prepare_documents",
    "load_documents",
    "train_review_model",
]


def prepare_documents(
    reviews: Iterable[str],
    corpus: CorpusConfig,
) -> Iterator[Document]:
    """
    Normalize raw reviews and optionally drop stopwords.

    Sentences left empty after cleanup are not yielded.

    Args:
        reviews: Raw review texts
        corpus: Corpus configuration (markup policy and stopwords)

    Yields:
        Documents ready for training
    """
    for review in reviews:
        for document in normalize(review, keep_empty=False, allowed_tag=corpus.allowed_tag):
            if corpus.remove_stopwords:
                document = remove_stopwords(document, corpus.stopwords)
            if document:
                yield document


def load_documents(corpus: CorpusConfig, verbose: bool = True) -> List[Document]:
    """Read and prepare every document of a corpus file."""
    reviews = read_corpus(corpus.path)
    total = count_documents(corpus.path) if verbose else None
    reviews = tqdm(reviews, total=total, desc="Normalizing reviews", unit=" reviews",
                   disable=not verbose)
    documents = list(prepare_documents(reviews, corpus))
    logger.info(f"Prepared {len(documents)} sentences from {corpus.path}")
    return documents


def train_review_model(config: AcquisitionConfig, verbose: bool = True) -> VocabularyModel:
    """
    Main pipeline: read a review corpus, clean it and train Word2Vec.

    Orchestrates the complete workflow:
    1. Reads one review per line from the corpus file
    2. Normalizes each review into sentence Documents
    3. Removes stopwords (unless disabled)
    4. Trains a Word2Vec model with gensim
    5. Saves the model as .kv if a model path is configured

    Args:
        config: Acquisition configuration
        verbose: Print banners and show progress bars

    Returns:
        The trained VocabularyModel

    Raises:
        FileNotFoundError: If the corpus file does not exist
        ValueError: If the corpus yields no trainable vocabulary
    """
    logger.info("Starting review acquisition pipeline")
    start_time = datetime.now()

    training = config.training
    if verbose:
        from reviewvec.display import print_training_header
        print_training_header(
            start_time=start_time,
            corpus_path=config.corpus.path,
            model_path=config.model_path,
            training=training,
            remove_stopwords=config.corpus.remove_stopwords,
        )

    documents = load_documents(config.corpus, verbose=verbose)
    if not documents:
        raise ValueError(f"No usable sentences found in {config.corpus.path}")

    model = VocabularyModel.train(
        documents,
        vector_size=training.vector_size,
        min_count=training.min_count,
        window=training.window,
        epochs=training.epochs,
        workers=training.workers,
        seed=training.seed,
    )

    if config.model_path is not None:
        model.save(config.model_path)

    if verbose:
        from reviewvec.display import print_completion_banner
        print_completion_banner(
            model_path=config.model_path,
            num_documents=len(documents),
            vocab_size=len(model),
            runtime=datetime.now() - start_time,
        )

    return model
