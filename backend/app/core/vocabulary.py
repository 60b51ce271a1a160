"""Impressionism Vocabulary — static term tables and category lookup.

Invariants:
    - VOCABULARY is immutable (MappingProxyType of tuples), built once at import
    - Lookups are case-insensitive; a term belongs to at most one category
    - get_word_category returns None for unknown words (never raises)
    - STARTING_ELEMENTS is what every fresh board shows before any combination

Design Decisions:
    - Lower-cased index precomputed at import: lookup is a dict hit, not a scan
"""

from types import MappingProxyType

from app.core.domain_types import Category, CraftResult


VOCABULARY: MappingProxyType[Category, tuple[str, ...]] = MappingProxyType({
    Category.ARTIST: (
        "Monet", "Renoir", "Morisot", "Manet", "Degas", "Caillebotte",
        "Sisley", "Pissarro", "Cassatt", "Bazille", "Cézanne", "Signac",
        "Seurat", "Vlaminck", "Guillaumin",
    ),
    Category.DEALER: (
        "Durand-Ruel", "Wildenstein", "Vollard", "Tanguy", "Bernheim",
        "Chocquet", "Ephrussi", "Hoschedé",
    ),
    Category.TECHNIQUE: (
        "Pleinairmalerei", "Pinselstrich", "Lichtstimmung", "Lichtreflex",
        "Komplementärfarben", "Farbauftrag", "Farbtheorie", "Tonalismus",
    ),
    Category.MOTIF: (
        "Landschaftsmalerei", "Naturmotiv", "Wasserlandschaft",
        "Seerosenteich", "Boulevard", "Pariser Leben", "Ballett",
        "Theaterszene", "Bahnhof", "Flusslandschaft",
    ),
    Category.INSTITUTION: (
        "Salon de Paris", "Café Guerbois", "Nouvelle Athènes",
        "Salon des Refusés", "Impressionisten-Ausstellung",
    ),
    Category.CONCEPT: (
        "Impressionismus", "Kunstkritik", "Ausstellung", "Schenkung",
        "Kunstmarkt", "Moderne", "Kunstjournalismus", "Künstlergruppe",
        "Sammlung", "Provenienz",
    ),
})

_TERM_INDEX: MappingProxyType[str, Category] = MappingProxyType({
    term.lower(): category
    for category, terms in VOCABULARY.items()
    for term in terms
})


def get_word_category(word: str) -> Category | None:
    """Category of a vocabulary term, or None if the word is not in the tables."""
    return _TERM_INDEX.get(word.strip().lower())


def is_known_term(text: str) -> bool:
    return text.strip().lower() in _TERM_INDEX


STARTING_ELEMENTS: tuple[CraftResult, ...] = (
    CraftResult(emoji="🎨", text="Monet"),
    CraftResult(emoji="🌊", text="Wasser"),
    CraftResult(emoji="☀️", text="Licht"),
    CraftResult(emoji="🖌️", text="Pinselstrich"),
)
