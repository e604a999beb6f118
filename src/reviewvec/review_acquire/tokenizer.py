"""Sentence tokenization and cleanup for raw review text."""
from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Pattern, Tuple, Union
import re

__all__ = [
    "Document",
    "DEFAULT_ALLOWED_TAG",
    "strip_markup",
    "clean_text",
    "tokenize_sentence",
    "normalize",
    "normalize_documents",
]

Document = Tuple[str, ...]

# Anchor tags survive markup stripping; everything else (<br />, <i>, ...) goes.
DEFAULT_ALLOWED_TAG = r"</?a(\s[^>]*)?/?>"

_TAG_RE = re.compile(r"<[^<>]*>")
_ESCAPE_RE = re.compile(r"\\.", re.DOTALL)
_PUNCTUATION_RE = re.compile(r"[\"“”‘’«»`,()\[\]{}*_~|#]")
_SENTENCE_END_RE = re.compile(r"[.?!;:]")


def strip_markup(
    text: str,
    allowed_tag: Union[str, Pattern, None] = DEFAULT_ALLOWED_TAG,
) -> str:
    """
    Replace markup tags with a space, keeping tags that match allowed_tag.

    Args:
        text: Raw text
        allowed_tag: Regex a whole tag must match to be kept. None strips
            every tag.

    Returns:
        Text with disallowed tags removed

    Example:
        >>> strip_markup("great<br /><br />fun")
        'great  fun'
    """
    if allowed_tag is None:
        return _TAG_RE.sub(" ", text)

    if isinstance(allowed_tag, str):
        allowed_tag = re.compile(allowed_tag, re.IGNORECASE)

    def _replace(match):
        tag = match.group(0)
        return tag if allowed_tag.fullmatch(tag) else " "

    return _TAG_RE.sub(_replace, text)


def clean_text(
    text: str,
    allowed_tag: Union[str, Pattern, None] = DEFAULT_ALLOWED_TAG,
) -> str:
    """
    Strip markup, escape sequences and punctuation, then lowercase.

    Sentence-ending punctuation is left in place for the sentence split.

    Example:
        >>> clean_text('He said “Wow,” twice\\\\n')
        'he said  wow   twice '
    """
    text = strip_markup(text, allowed_tag)
    text = _ESCAPE_RE.sub(" ", text)
    text = _PUNCTUATION_RE.sub(" ", text)
    return text.lower()


def tokenize_sentence(sentence: str) -> Document:
    """
    Trim a sentence segment and split it on whitespace.

    Example:
        >>> tokenize_sentence("  pride and prejudice ")
        ('pride', 'and', 'prejudice')
    """
    return tuple(sentence.strip().split())


def normalize(
    raw: str,
    keep_empty: bool = True,
    allowed_tag: Union[str, Pattern, None] = DEFAULT_ALLOWED_TAG,
) -> List[Document]:
    """
    Turn raw review text into one Document per sentence segment.

    This is the main entry point for tokenization. Segments are split on
    ``. ? ! ; :`` after cleanup, so a trailing full stop leaves an empty
    final segment.

    Args:
        raw: Raw text, possibly with markup and punctuation
        keep_empty: Keep segments that contain no tokens
        allowed_tag: Regex for tags to keep (see strip_markup)

    Returns:
        List of Documents (tuples of lowercase tokens)

    Example:
        >>> normalize("Jennifer Ehle was sparkling in Pride and Prejudice.")
        [('jennifer', 'ehle', 'was', 'sparkling', 'in', 'pride', 'and', 'prejudice'), ()]
    """
    if not raw:
        return [()] if keep_empty else []

    cleaned = clean_text(raw, allowed_tag)
    documents = [tokenize_sentence(segment) for segment in _SENTENCE_END_RE.split(cleaned)]

    if not keep_empty:
        documents = [doc for doc in documents if doc]
    return documents


def normalize_documents(
    lines: Iterable[str],
    keep_empty: bool = False,
    allowed_tag: Union[str, Pattern, None] = DEFAULT_ALLOWED_TAG,
) -> Iterator[Document]:
    """
    Normalize many raw documents, yielding sentence Documents in order.

    Unlike normalize(), empty segments are dropped by default since they
    carry nothing for training.
    """
    for line in lines:
        yield from normalize(line, keep_empty=keep_empty, allowed_tag=allowed_tag)
