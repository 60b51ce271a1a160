"""Pair Normalization — turns two raw element labels into a stable lookup key.

Invariants:
    - normalize_pair(a, b) == normalize_pair(b, a) for all a, b
    - Output words are stripped and lower-cased
    - low <= high by plain string comparison
    - Lower-casing can lengthen a word ("İ" -> "i̇"), so MAX_WORD_LENGTH is
      checked on the normalized form
"""

from app.core.domain_types import WordPair

MAX_WORD_LENGTH = 100


def normalize_word(word: str) -> str:
    return word.strip().lower()


def normalize_pair(first: str, second: str) -> WordPair:
    """Lower-case both words and order them ascending."""
    a, b = normalize_word(first), normalize_word(second)
    if a <= b:
        return WordPair(a, b)
    return WordPair(b, a)
