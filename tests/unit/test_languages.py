"""Tests for language reference data."""

from fontlang.config.alphabets import ALPHABETS
from fontlang.config.languages import LANGUAGES, get_language, language_names
from fontlang.config.unicode_ranges import UNICODE_RANGES


def test_language_count():
    """Test we ship all 21 languages."""
    assert len(LANGUAGES) == 21


def test_language_order_follows_alphabet_table():
    """Test report order is the alphabet table order."""
    names = language_names()
    assert names == list(ALPHABETS)
    assert names[0] == "English"
    assert names[-1] == "Khmer"


def test_tables_cover_same_languages():
    """Test alphabet and range tables agree on languages."""
    assert set(ALPHABETS) == set(UNICODE_RANGES)


def test_every_language_has_data():
    """Test every shipped language has an alphabet and ranges."""
    for language in LANGUAGES:
        assert language.alphabet, language.name
        assert language.ranges, language.name
        assert language.is_known


def test_ranges_are_ordered_pairs():
    """Test every range has start <= end."""
    for language in LANGUAGES:
        for start, end in language.ranges:
            assert start <= end, language.name


def test_alphabets_have_no_repeats_in_latin_scripts():
    """Test European alphabets list each letter once."""
    for name in ("English", "Russian", "German", "French", "Vietnamese", "Turkish"):
        alphabet = get_language(name).alphabet
        assert len(set(alphabet)) == len(alphabet), name


def test_range_size():
    """Test range sizes include both endpoints."""
    assert get_language("English").range_size == 128
    assert get_language("Russian").range_size == 256
    assert get_language("Japanese").range_size == 96 + 96 + 20992


def test_iter_range_codepoints():
    """Test range iteration is inclusive and in table order."""
    codepoints = list(get_language("Korean").iter_range_codepoints())
    assert codepoints[0] == 0xAC00
    assert 0xD7AF in codepoints
    assert codepoints[-1] == 0x11FF
    assert len(codepoints) == get_language("Korean").range_size


def test_shared_latin_alphabets():
    """Test Indonesian and Malay use the English alphabet."""
    english = get_language("English").alphabet
    assert get_language("Indonesian").alphabet == english
    assert get_language("Malay").alphabet == english


def test_unknown_language_is_empty():
    """Test unknown names give an empty record instead of an error."""
    language = get_language("Klingon")
    assert language.name == "Klingon"
    assert language.alphabet == ""
    assert language.ranges == ()
    assert language.range_size == 0
    assert not language.is_known
