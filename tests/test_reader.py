import pytest

from reviewvec.review_acquire.reader import count_documents, read_corpus


def test_reads_one_document_per_line(tmp_path):
    path = tmp_path / "c.txt"
    path.write_text("first review\n\n   \nsecond review\r\n", encoding="utf-8")
    assert list(read_corpus(path)) == ["first review", "second review"]
    assert count_documents(path) == 2


def test_replaces_undecodable_bytes(tmp_path):
    path = tmp_path / "c.txt"
    path.write_bytes(b"caf\xff review\n")
    assert list(read_corpus(path)) == ["caf\ufffd review"]


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        list(read_corpus(tmp_path / "missing.txt"))


def test_directory_rejected(tmp_path):
    with pytest.raises(ValueError):
        list(read_corpus(tmp_path))
