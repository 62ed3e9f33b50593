"""Text normalization and tokenization."""

import re
from typing import List, Iterable

from .lexicon import STOP_WORDS

_URL_RE = re.compile(r"https?://\S+")
_CROSS_REF_RE = re.compile(r"\b[ru]/[\w-]+")
_APOSTROPHE_RE = re.compile(r"['’]")
_PUNCT_RE = re.compile(r"[^\w\s]|_")
_SPACE_RE = re.compile(r"\s+")
_NUMERIC_RE = re.compile(r"\d+")


def normalize(text: str) -> str:
    """Lower-case and strip URLs, r/ and u/ references and punctuation."""
    text = text.lower()
    text = _URL_RE.sub("", text)
    text = _CROSS_REF_RE.sub("", text)
    text = _APOSTROPHE_RE.sub("", text)  # can't -> cant
    text = _PUNCT_RE.sub(" ", text)
    return _SPACE_RE.sub(" ", text).strip()


def tokenize(text: str) -> List[str]:
    """Split normalized text into words, dropping purely numeric tokens."""
    return [
        token for token in normalize(text).split(" ")
        if token and not _NUMERIC_RE.fullmatch(token)
    ]


def remove_stop_words(tokens: Iterable[str], min_length: int = 3) -> List[str]:
    """Drop stop words and short tokens. Order and duplicates are kept."""
    return [
        token for token in tokens
        if token not in STOP_WORDS and len(token) >= min_length
    ]
