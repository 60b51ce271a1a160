"""Model Output Parsing — turns free text from the model into a CraftResult.

Invariants:
    - Never raises for malformed model output; returns None instead
    - Only the first line is considered; it must contain a comma
    - Label: brackets removed, trailing punctuation stripped, max 3 words,
      2–50 characters, not purely numeric
    - Emoji: at most 4 UTF-16 code units and matching the Unicode emoji
      property class (heuristic "not ASCII alphanumeric" when the regex
      engine lacks emoji properties)

Design Decisions:
    - `regex` over stdlib `re`: only `regex` understands \\p{Emoji} and friends
    - Length measured in UTF-16 units to match what browsers count for the
      same glyph (ADR: client renders the emoji as a JS string)
"""

import logging
import re

import regex

from app.core.domain_types import CraftResult

logger = logging.getLogger(__name__)

MAX_EMOJI_UNITS = 4
MIN_LABEL_LENGTH = 2
MAX_LABEL_LENGTH = 50
MAX_LABEL_WORDS = 3
SEPARATOR = ","

_BRACKETS = re.compile(r"[()\[\]{}]")
_TRAILING_PUNCTUATION = re.compile(r"[.!?;:—–-]+$")
_NUMERIC = re.compile(r"^[0-9]+$")
_ASCII_ALNUM = re.compile(r"^[a-zA-Z0-9]+$")

try:
    _EMOJI_CLASS = regex.compile(
        r"^[\p{Emoji}\p{Emoji_Modifier}\p{Emoji_Component}"
        r"\p{Emoji_Modifier_Base}\p{Emoji_Presentation}]+$"
    )
except regex.error as e:
    logger.warning(f"Emoji property class unavailable, using heuristic: {e}")
    _EMOJI_CLASS = None


def utf16_length(text: str) -> int:
    """Length of text in UTF-16 code units (astral characters count twice)."""
    return len(text.encode("utf-16-le")) // 2


def is_valid_emoji(token: str) -> bool:
    if not token or utf16_length(token) > MAX_EMOJI_UNITS:
        return False
    if _EMOJI_CLASS is None:
        return not _ASCII_ALNUM.match(token)
    return _EMOJI_CLASS.match(token) is not None


def clean_label(label: str) -> str:
    """Strip brackets and trailing punctuation, keep at most three words."""
    label = _BRACKETS.sub("", label)
    label = _TRAILING_PUNCTUATION.sub("", label)
    return " ".join(label.split()[:MAX_LABEL_WORDS]).strip()


def is_valid_label(label: str) -> bool:
    return (
        MIN_LABEL_LENGTH <= len(label) <= MAX_LABEL_LENGTH
        and not _NUMERIC.match(label)
    )


def parse_model_output(output: str) -> CraftResult | None:
    """Parse 'emoji,label' from the first line of raw model output.

    Returns None when the line has no separator or either token fails
    validation. The label keeps its original casing; callers lower-case it
    before storage.
    """
    first_line = output.split("\n", 1)[0].strip()
    if SEPARATOR not in first_line:
        return None

    parts = [part.strip() for part in first_line.split(SEPARATOR)]
    emoji, label = parts[0], clean_label(parts[1])

    if not is_valid_emoji(emoji) or not is_valid_label(label):
        return None
    return CraftResult(emoji=emoji, text=label)
