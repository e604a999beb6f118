"""Reading newline-delimited review corpora."""
from __future__ import annotations

from pathlib import Path
from typing import Iterator, Union
import logging

logger = logging.getLogger(__name__)

__all__ = [
    "count_documents",
    "read_corpus",
]


def _check_corpus_path(corpus_path: Union[str, Path]) -> Path:
    corpus_path = Path(corpus_path)
    if not corpus_path.exists():
        raise FileNotFoundError(f"Corpus file not found: {corpus_path}")
    if corpus_path.is_dir():
        raise ValueError(f"Corpus path is a directory, expected a file: {corpus_path}")
    return corpus_path


def read_corpus(corpus_path: Union[str, Path]) -> Iterator[str]:
    """
    Yield raw review documents, one per non-blank line.

    Lines are decoded as UTF-8; undecodable bytes are replaced rather than
    aborting the read.

    Args:
        corpus_path: Path to the corpus file

    Yields:
        Raw document text without the trailing newline

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the path is a directory

    Example:
        >>> for review in read_corpus("reviews.txt"):
        ...     print(review[:40])
    """
    corpus_path = _check_corpus_path(corpus_path)
    logger.debug(f"Reading {corpus_path.name}")

    skipped = 0
    with open(corpus_path, "r", encoding="utf-8", errors="replace") as f:
        for line in f:
            line = line.rstrip("\r\n")
            if not line.strip():
                skipped += 1
                continue
            yield line

    if skipped:
        logger.debug(f"Skipped {skipped} blank lines in {corpus_path.name}")


def count_documents(corpus_path: Union[str, Path]) -> int:
    """Count non-blank lines, used to size progress bars."""
    return sum(1 for _ in read_corpus(corpus_path))
