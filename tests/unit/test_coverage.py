"""Tests for coverage analysis."""

from fontlang.config.languages import LANGUAGES, Language
from fontlang.core.coverage import (
    LanguageCoverage,
    SupportLevel,
    alphabet_support,
    analyze_coverage,
    range_support,
    support_percentage,
)
from fontlang.core.lookup import zero_is_missing


def test_support_percentage_rounds_to_one_decimal():
    """Test percentages are rounded to one decimal place."""
    assert support_percentage(1, 3) == 33.3
    assert support_percentage(2, 3) == 66.7
    assert support_percentage(3, 3) == 100.0


def test_support_percentage_rounds_half_up():
    """Test exact ties round up like toFixed(1)."""
    assert support_percentage(1, 16) == 6.3
    assert support_percentage(3, 16) == 18.8


def test_support_percentage_zero_total():
    """Test an empty character set gives 0% instead of NaN."""
    assert support_percentage(0, 0) == 0.0


def test_alphabet_half_supported():
    """Test alphabet 'AB' with only A mapped gives 50%."""
    language = Language("Test", alphabet="AB")
    lookup = zero_is_missing(lambda codepoint: 5 if codepoint == ord("A") else 0)
    assert alphabet_support(lookup, language) == 50.0


def test_range_fully_supported():
    """Test range A-C fully mapped gives 100%."""
    language = Language("Test", ranges=((0x41, 0x43),))
    lookup = zero_is_missing(lambda codepoint: codepoint - 0x40)
    assert range_support(lookup, language) == 100.0


def test_range_counts_endpoints():
    """Test both range endpoints are counted."""
    language = Language("Test", ranges=((0x41, 0x44),))
    lookup = zero_is_missing(lambda codepoint: 1 if codepoint in (0x41, 0x44) else 0)
    assert range_support(lookup, language) == 50.0


def test_ranges_are_summed():
    """Test support is computed over all ranges together."""
    language = Language("Test", ranges=((0x41, 0x42), (0x61, 0x62)))
    lookup = zero_is_missing(lambda codepoint: 1 if codepoint >= 0x61 else 0)
    assert range_support(lookup, language) == 50.0


def test_full_font_gives_full_support():
    """Test a font mapping every code point is 100% for every language."""
    results = analyze_coverage(lambda codepoint: 1)
    assert list(results) == [language.name for language in LANGUAGES]
    for coverage in results.values():
        assert coverage.alphabet_support == 100.0
        assert coverage.range_support == 100.0


def test_empty_font_gives_no_support():
    """Test a font mapping nothing is 0% for every language."""
    results = analyze_coverage(lambda codepoint: None)
    for coverage in results.values():
        assert coverage.alphabet_support == 0.0
        assert coverage.range_support == 0.0


def test_percentages_within_bounds():
    """Test partial support stays within [0, 100]."""
    results = analyze_coverage(lambda codepoint: 1 if codepoint % 2 else None)
    for coverage in results.values():
        assert 0.0 <= coverage.alphabet_support <= 100.0
        assert 0.0 <= coverage.range_support <= 100.0


def test_missing_data_is_localized():
    """Test a language without data does not affect the others."""
    languages = [
        Language("Empty"),
        Language("Test", alphabet="A", ranges=((0x41, 0x41),)),
    ]
    results = analyze_coverage(lambda codepoint: 1, languages)
    assert results["Empty"] == LanguageCoverage(0.0, 0.0)
    assert results["Test"] == LanguageCoverage(100.0, 100.0)


def test_support_levels():
    """Test support level thresholds."""
    assert SupportLevel.for_percentage(100.0) == SupportLevel.FULL
    assert SupportLevel.for_percentage(99.9) == SupportLevel.PARTIAL
    assert SupportLevel.for_percentage(80.0) == SupportLevel.PARTIAL
    assert SupportLevel.for_percentage(79.9) == SupportLevel.POOR
    assert SupportLevel.for_percentage(0.0) == SupportLevel.POOR


def test_coverage_levels():
    """Test LanguageCoverage exposes levels per metric."""
    coverage = LanguageCoverage(alphabet_support=100.0, range_support=50.0)
    assert coverage.alphabet_level == SupportLevel.FULL
    assert coverage.range_level == SupportLevel.POOR
