"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - WordPair is always lower-cased and ordered (low <= high)
    - ElementRecord is immutable once built (frozen dataclass)
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NamedTuple for WordPair: unpacks like the (low, high) tuple it is
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple


# ─── Value Types ─────────────────────────────────────────────────

class WordPair(NamedTuple):
    """Normalized pair of element identifiers, ordered ascending."""
    low: str
    high: str


@dataclass(frozen=True)
class CraftResult:
    """An (emoji, label) pair produced by the model or a fallback table."""
    emoji: str
    text: str


@dataclass(frozen=True)
class ElementRecord:
    """A persisted combination: ordered word pair -> (emoji, text)."""
    word1: str
    word2: str
    emoji: str
    text: str


# ─── Enums ───────────────────────────────────────────────────────

class Category(str, Enum):
    """Vocabulary categories of the Impressionism domain."""
    ARTIST = "artist"
    DEALER = "dealer"
    TECHNIQUE = "technique"
    MOTIF = "motif"
    INSTITUTION = "institution"
    CONCEPT = "concept"


class CombinationOutcome(str, Enum):
    """Terminal states of one combine request."""
    PAIR_CACHE_HIT = "pair_cache_hit"
    TEXT_CACHE_HIT = "text_cache_hit"
    CREATED = "created"
    CREATED_WITH_FALLBACK = "created_with_fallback"

    @property
    def discovered(self) -> bool:
        return self in (
            CombinationOutcome.CREATED,
            CombinationOutcome.CREATED_WITH_FALLBACK,
        )


class AttemptStatus(str, Enum):
    """Per-attempt result of the generation retry loop."""
    PARSED = "parsed"
    TRANSPORT_ERROR = "transport_error"
    NO_TEXT = "no_text"
    UNPARSABLE = "unparsable"
