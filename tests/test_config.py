from pathlib import Path

import pytest

from reviewvec.review_acquire.config import (
    AcquisitionConfig,
    CorpusConfig,
    TrainingConfig,
    build_model_path,
)


def test_training_defaults():
    config = TrainingConfig()
    assert config.vector_size == 200
    assert config.min_count == 10


@pytest.mark.parametrize("field", ["vector_size", "min_count", "window", "epochs", "workers"])
def test_training_rejects_non_positive(field):
    with pytest.raises(ValueError):
        TrainingConfig(**{field: 0})


def test_corpus_path_coerced():
    assert isinstance(CorpusConfig(path="reviews.txt").path, Path)


def test_model_path_requires_kv():
    with pytest.raises(ValueError):
        AcquisitionConfig(corpus=CorpusConfig(path="r.txt"), model_path="model.bin")


def test_build_model_path():
    assert build_model_path("/models", "/data/imdb_reviews.txt", 200) == Path("/models/imdb_reviews_v200.kv")
