"""Combination Prompt — builds the one-shot instruction sent to the text model.

Invariants:
    - Output grammar demanded of the model is exactly one line: EMOJI,Begriff
    - Hint lookup is a single dict access on (category1, category2); any pair
      without an entry (including unknown words) gets DEFAULT_HINT
    - Prompt text is German; the element labels are embedded verbatim

Design Decisions:
    - Hints keyed by ordered category pair: "artist + technique" and
      "technique + artist" ask different questions of the model
    - FEW_SHOT_EXAMPLES is a tuple constant, joined once at import
"""

from types import MappingProxyType

from app.core.domain_types import Category, WordPair
from app.core.vocabulary import get_word_category


DEFAULT_HINT = (
    "Hinweis: Kombiniere beide Begriffe zu einem authentischen "
    "Impressionismus-Konzept."
)

COMBINATION_HINTS: MappingProxyType[tuple[Category, Category], str] = MappingProxyType({
    (Category.ARTIST, Category.ARTIST): (
        "Hinweis: Beide Künstler arbeiteten zeitgleich. Nenne eine gemeinsame "
        "Technik, einen Ausstellungsort oder eine Kunstbewegung."
    ),
    (Category.ARTIST, Category.TECHNIQUE): (
        "Hinweis: Nenne eine charakteristische Malweise oder ein visuelles "
        "Merkmal dieses Künstlers."
    ),
    (Category.TECHNIQUE, Category.ARTIST): (
        "Hinweis: Nenne einen Künstler, der diese Technik perfektioniert hat "
        "oder einen innovativen Ort."
    ),
    (Category.ARTIST, Category.MOTIF): (
        "Hinweis: Nenne ein Werk, einen Ort oder eine Kunstsammlung, die "
        "dieser Künstler liebte."
    ),
    (Category.MOTIF, Category.ARTIST): (
        "Hinweis: Nenne einen bekannten Künstler, der dieses Motiv häufig malte."
    ),
    (Category.DEALER, Category.ARTIST): (
        "Hinweis: Nenne eine Ausstellung oder einen wichtigen Kunstmoment "
        "zwischen diesem Händler und Künstler."
    ),
    (Category.ARTIST, Category.DEALER): (
        "Hinweis: Nenne einen Kunsthändler, der diesen Künstler förderte oder "
        "bekannt machte."
    ),
    (Category.INSTITUTION, Category.ARTIST): (
        "Hinweis: Nenne einen Künstler, der dort ausgestellt hat oder eine "
        "Reaktion auf die Institution."
    ),
    (Category.ARTIST, Category.INSTITUTION): (
        "Hinweis: Nenne einen Ausstellungsort oder ein Café, das dieser "
        "Künstler besuchte."
    ),
})

FEW_SHOT_EXAMPLES: tuple[tuple[str, str], ...] = (
    ("🎨", "Monet"),
    ("👩‍🎨", "Morisot"),
    ("🖼️", "Pleinairmalerei"),
    ("✨", "Lichtstimmung"),
    ("🌄", "Landschaftsmalerei"),
    ("💬", "Kunstkritik"),
    ("🏛️", "Salon de Paris"),
    ("🧑‍💼", "Durand-Ruel"),
    ("🏺", "Wildenstein"),
    ("🖌️", "Pinselstrich"),
    ("🌿", "Naturmotiv"),
    ("👤", "Caillebotte"),
    ("🗞️", "Kunstjournalismus"),
    ("☕", "Café Guerbois"),
    ("🌊", "Wasserlandschaft"),
)

_EXAMPLES_BLOCK = "\n".join(f"{emoji},{label}" for emoji, label in FEW_SHOT_EXAMPLES)

_RULES_BLOCK = """Regeln:
- Nur EINE Zeile ausgeben
- Format: [emoji],[deutscher Begriff]
- Keine Erklärungen, Sätze oder Kommas im Begriff
- Nur authentische Begriffe aus der echten Kunstgeschichte
- Nicht die Eingabewörter wiederholen"""


def get_combination_hint(word1: str, word2: str) -> str:
    """Hint sentence for the category pair of two words, or DEFAULT_HINT."""
    cat1 = get_word_category(word1)
    cat2 = get_word_category(word2)
    if cat1 is None or cat2 is None:
        return DEFAULT_HINT
    return COMBINATION_HINTS.get((cat1, cat2), DEFAULT_HINT)


def build_combination_prompt(pair: WordPair) -> str:
    """Full generation prompt for a normalized pair."""
    hint = get_combination_hint(pair.low, pair.high)
    return (
        "Du kombinierst zwei Begriffe aus dem Impressionismus (1870–1910) und "
        "gibst EXAKT ein Ergebnis im Format: EMOJI,Begriff\n\n"
        f"{_RULES_BLOCK}\n\n"
        f"Beispiele:\n{_EXAMPLES_BLOCK}\n\n"
        f"{hint}\n\n"
        f"Kombiniere: '{pair.low}' + '{pair.high}'\n"
        "Ausgabe (NUR EMOJI,Begriff):"
    )
