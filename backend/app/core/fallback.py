"""Fallback Elements — static defaults used when the model produces nothing usable.

Invariants:
    - select_fallback always returns a CraftResult (never None)
    - Key is "{category1}_{category2}" with "unknown" for unclassified words,
      in the order of the normalized pair
    - Any key without an entry resolves to DEFAULT_FALLBACK
"""

from types import MappingProxyType

from app.core.domain_types import CraftResult, WordPair
from app.core.vocabulary import get_word_category


UNKNOWN_CATEGORY = "unknown"

DEFAULT_FALLBACK = CraftResult(emoji="🎨", text="Impressionismus")

FALLBACK_COMBINATIONS: MappingProxyType[str, CraftResult] = MappingProxyType({
    "artist_artist": CraftResult(emoji="👥", text="Künstlergruppe"),
    "artist_technique": CraftResult(emoji="🖌️", text="Pinselstrich"),
    "artist_motif": CraftResult(emoji="🌄", text="Landschaftsmalerei"),
    "technique_motif": CraftResult(emoji="✨", text="Lichtstimmung"),
    "institution_artist": CraftResult(emoji="🏛️", text="Salon de Paris"),
})


def fallback_key(pair: WordPair) -> str:
    parts = []
    for word in pair:
        category = get_word_category(word)
        parts.append(category.value if category else UNKNOWN_CATEGORY)
    return "_".join(parts)


def select_fallback(pair: WordPair) -> CraftResult:
    """Category-keyed default element for a pair, or the global default."""
    return FALLBACK_COMBINATIONS.get(fallback_key(pair), DEFAULT_FALLBACK)
