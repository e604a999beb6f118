import pytest

from reviewvec.review_acquire.config import AcquisitionConfig, CorpusConfig, TrainingConfig
from reviewvec.review_acquire.core import load_documents, prepare_documents, train_review_model


def small_training():
    return TrainingConfig(vector_size=8, min_count=2, epochs=2)


def test_prepare_documents_removes_stopwords(tmp_path):
    corpus = CorpusConfig(path=tmp_path / "unused.txt")
    docs = list(prepare_documents(["The king and the queen<br />watched the movie."], corpus))
    assert docs == [("king", "queen", "watched", "movie")]


def test_prepare_documents_keeps_stopwords_when_disabled(tmp_path):
    corpus = CorpusConfig(path=tmp_path / "unused.txt", remove_stopwords=False)
    docs = list(prepare_documents(["The movie was great. The film was great!"], corpus))
    assert docs == [("the", "movie", "was", "great"), ("the", "film", "was", "great")]


def test_load_documents(corpus_file):
    docs = load_documents(CorpusConfig(path=corpus_file), verbose=False)
    assert ("jennifer", "ehle", "sparkling", "pride", "prejudice") in docs
    assert all(docs)


def test_train_review_model_saves(corpus_file, tmp_path):
    model_path = tmp_path / "out" / "reviews.kv"
    config = AcquisitionConfig(
        corpus=CorpusConfig(path=corpus_file),
        model_path=model_path,
        training=small_training(),
    )
    model = train_review_model(config, verbose=False)
    assert model_path.exists()
    assert "movie" in model
    assert "the" not in model
    assert model.vector_size == 8


def test_train_review_model_prints_banners(corpus_file, capsys):
    config = AcquisitionConfig(corpus=CorpusConfig(path=corpus_file), training=small_training())
    train_review_model(config, verbose=True)
    out = capsys.readouterr().out
    assert "WORD2VEC REVIEW MODEL TRAINING" in out
    assert "Training Complete" in out


def test_train_review_model_no_usable_sentences(tmp_path):
    path = tmp_path / "stop.txt"
    path.write_text("The. A. And.\n", encoding="utf-8")
    config = AcquisitionConfig(corpus=CorpusConfig(path=path), training=small_training())
    with pytest.raises(ValueError):
        train_review_model(config, verbose=False)


def test_train_review_model_missing_corpus(tmp_path):
    config = AcquisitionConfig(corpus=CorpusConfig(path=tmp_path / "nope.txt"))
    with pytest.raises(FileNotFoundError):
        train_review_model(config, verbose=False)


def test_load_documents_progress_bar_has_total(corpus_file, capsys):
    load_documents(CorpusConfig(path=corpus_file), verbose=True)
    assert "100/100" in capsys.readouterr().err
