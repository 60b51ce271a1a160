"""Model Output Parsing — verifies acceptance and rejection rules for 'emoji,label'.

Tests:
    - Valid lines parse to CraftResult, label casing preserved
    - Only the first line counts
    - Label cleanup: brackets, trailing punctuation, three-word cap
    - Rejections: no separator, short/long/numeric labels, long or ASCII emoji
    - Heuristic emoji check when the property class is unavailable
"""

import pytest

from app.core.domain_types import CraftResult
from app.core import parse_output
from app.core.parse_output import (
    clean_label, is_valid_emoji, parse_model_output, utf16_length,
)


def test_parses_simple_line():
    assert parse_model_output("🌊,Wasserlandschaft") == CraftResult(
        emoji="🌊", text="Wasserlandschaft",
    )


def test_trims_whitespace_around_tokens():
    assert parse_model_output("  ✨ ,  Lichtstimmung  ") == CraftResult(
        emoji="✨", text="Lichtstimmung",
    )


def test_only_first_line_is_used():
    result = parse_model_output("🏛️,Salon de Paris\n🎨,Monet")
    assert result == CraftResult(emoji="🏛️", text="Salon de Paris")


def test_extra_fields_after_label_ignored():
    assert parse_model_output("🎨,Monet,Renoir").text == "Monet"


def test_label_cleanup_removes_brackets_and_trailing_punctuation():
    assert clean_label("(Lichtstimmung)!") == "Lichtstimmung"
    assert clean_label("[Pinselstrich] —") == "Pinselstrich"


def test_label_collapsed_to_three_words():
    result = parse_model_output("🌄,Landschaft am Fluss bei Argenteuil")
    assert result.text == "Landschaft am Fluss"


def test_rejects_line_without_separator():
    assert parse_model_output("Das ist ein schönes Konzept über Kunst.") is None


def test_rejects_empty_output():
    assert parse_model_output("") is None


@pytest.mark.parametrize("line", [
    "🎨,X",
    "🎨," + "a" * 51,
    "🎨,1874",
    "🎨,",
])
def test_rejects_invalid_labels(line):
    assert parse_model_output(line) is None


def test_accepts_label_length_bounds():
    assert parse_model_output("🎨,Ab") is not None
    assert parse_model_output("🎨," + "a" * 50) is not None


def test_rejects_emoji_longer_than_four_units():
    # Three astral emoji = 6 UTF-16 units
    assert parse_model_output("🎨🌊✨🌄,Lichtstimmung") is None
    assert parse_model_output("🎨🌊🌄,Lichtstimmung") is None


def test_rejects_word_as_emoji():
    assert parse_model_output("Kunst,Lichtstimmung") is None
    assert not is_valid_emoji("ab")


def test_variation_selector_emoji_accepted():
    assert is_valid_emoji("🖌️")
    assert is_valid_emoji("☕")


def test_utf16_length_counts_astral_twice():
    assert utf16_length("☕") == 1
    assert utf16_length("🌊") == 2
    assert utf16_length("🖌️") == 3


def test_heuristic_emoji_check_without_property_class(monkeypatch):
    monkeypatch.setattr(parse_output, "_EMOJI_CLASS", None)
    assert is_valid_emoji("🌊")
    assert is_valid_emoji("a-b")
    assert not is_valid_emoji("ab")
    assert not is_valid_emoji("Kunst")
    assert not is_valid_emoji("🎨🌊🌄")
    assert parse_model_output("🌊,Wasserlandschaft") == CraftResult(
        emoji="🌊", text="Wasserlandschaft",
    )
