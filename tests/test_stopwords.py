from reviewvec.review_acquire.stopwords import (
    DEFAULT_STOPWORDS,
    build_stopwords,
    remove_stopwords,
)


def test_removes_default_stopwords():
    assert remove_stopwords(("the", "film", "was", "sparkling")) == ("film", "sparkling")


def test_markup_residue_is_removed():
    assert "br" in DEFAULT_STOPWORDS
    assert remove_stopwords(("br", "great")) == ("great",)


def test_custom_stopwords():
    stopwords = build_stopwords(extra=["Film"], include_default=False)
    assert stopwords == frozenset({"film"})
    assert remove_stopwords(("the", "film"), stopwords) == ("the",)


def test_preserves_order():
    assert remove_stopwords(("zebra", "the", "apple", "a", "mango")) == ("zebra", "apple", "mango")


def test_anchor_tag_fragments_are_removed():
    from reviewvec.review_acquire.tokenizer import normalize

    documents = normalize('See <a href="http://www.imdb.com/title">this</a> film.')
    tokens = [t for doc in documents for t in remove_stopwords(doc)]
    assert "film" in tokens
    assert not [t for t in tokens if set(t) & set("<>=/")]


def test_markup_fragments_kept_when_disabled():
    assert remove_stopwords(("href=", "film"), drop_markup=False) == ("href=", "film")
