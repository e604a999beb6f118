from reviewvec.review_acquire.tokenizer import (
    clean_text,
    normalize,
    normalize_documents,
    strip_markup,
    tokenize_sentence,
)


def test_reference_sentence():
    documents = normalize("jennifer ehle was sparkling in pride and prejudice.")
    assert documents[0] == (
        "jennifer", "ehle", "was", "sparkling", "in", "pride", "and", "prejudice",
    )


def test_empty_segments_kept_by_default():
    assert normalize("Great film.") == [("great", "film"), ()]


def test_empty_segments_dropped_on_request():
    assert normalize("Great film.", keep_empty=False) == [("great", "film")]


def test_lowercases():
    assert normalize("GREAT Film", keep_empty=False) == [("great", "film")]


def test_splits_on_sentence_punctuation():
    documents = normalize("one two? three! four; five: six. seven", keep_empty=False)
    assert documents == [
        ("one", "two"), ("three",), ("four",), ("five",), ("six",), ("seven",),
    ]


def test_strips_line_break_tags():
    assert normalize("great<br /><br />fun", keep_empty=False) == [("great", "fun")]


def test_keeps_anchor_tags():
    text = strip_markup('see <a href=x>here</a> and <b>there</b>')
    assert "<a href=x>" in text
    assert "</a>" in text
    assert "<b>" not in text
    assert "</b>" not in text


def test_strip_all_tags_when_no_allow_pattern():
    assert "<a" not in strip_markup("<a href=x>link</a>", allowed_tag=None)


def test_removes_smart_quotes_and_punctuation():
    documents = normalize('He said “wow,” (twice) ‘really’', keep_empty=False)
    assert documents == [("he", "said", "wow", "twice", "really")]


def test_removes_escape_sequences():
    assert clean_text("great\\nfilm").split() == ["great", "film"]


def test_tokenize_sentence_trims():
    assert tokenize_sentence("  pride and   prejudice ") == ("pride", "and", "prejudice")


def test_malformed_input_degrades_gracefully():
    assert normalize("", keep_empty=False) == []
    assert normalize("<br /> . ,", keep_empty=False) == []
    assert normalize("...", keep_empty=False) == []


def test_documents_are_tuples():
    for document in normalize("A film. Another one."):
        assert isinstance(document, tuple)


def test_normalize_documents_flattens_and_drops_empty():
    docs = list(normalize_documents(["One film.", "Two films. Three!"]))
    assert docs == [("one", "film"), ("two", "films"), ("three",)]
