import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest
from gensim.models import KeyedVectors

from reviewvec.common.w2v_model import VocabularyModel


TOY_VECTORS = {
    "movie": [1.0, 0.0, 0.0, 0.0],
    "film": [0.95, 0.1, 0.0, 0.0],
    "flick": [0.9, 0.2, 0.0, 0.0],
    "cinema": [0.7, 0.3, 0.1, 0.0],
    "king": [0.0, 1.0, 1.0, 0.0],
    "man": [0.0, 0.0, 1.0, 0.0],
    "queen": [0.0, 1.0, 0.0, 1.0],
    "woman": [0.0, 0.0, 0.0, 1.0],
}


@pytest.fixture
def toy_model():
    kv = KeyedVectors(vector_size=4)
    kv.add_vectors(list(TOY_VECTORS), np.array(list(TOY_VECTORS.values()), dtype=np.float32))
    return VocabularyModel(kv)


REVIEWS = [
    "The movie was great. The film was great!",
    "A great movie; a great film: a great flick.",
    "Jennifer Ehle was sparkling in Pride and Prejudice.",
    "The king and the queen<br /><br />watched the movie.",
    "The man and the woman watched the film.",
]


@pytest.fixture
def corpus_file(tmp_path):
    path = tmp_path / "reviews.txt"
    path.write_text("\n".join(REVIEWS * 20) + "\n", encoding="utf-8")
    return path
