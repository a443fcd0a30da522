"""Text normalization for accent- and case-insensitive keyword matching."""

import re
import unicodedata

_COMBINING_MARKS = re.compile(r"[\u0300-\u036f]")


def normalize(text: str) -> str:
    """Lower-case ``text`` and strip diacritics ("Educación" -> "educacion").

    Idempotent: normalize(normalize(s)) == normalize(s).
    """
    decomposed = unicodedata.normalize("NFD", text.lower())
    return _COMBINING_MARKS.sub("", decomposed)


def count_words(text: str) -> int:
    """Number of whitespace-delimited tokens in ``text``."""
    return len(text.split())
