"""
Per-language coverage analysis.

Measures how much of each language's alphabet and Unicode ranges a font
can render.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from fontlang.config.languages import LANGUAGES, Language
from fontlang.core.lookup import GlyphLookup, lookup_char
from fontlang.utils.logging import logger

# Support thresholds (percent)
FULL_SUPPORT = 100.0
PARTIAL_SUPPORT = 80.0


class SupportLevel(Enum):
    """Coarse support classification for presentation."""

    FULL = "full"
    PARTIAL = "partial"
    POOR = "poor"

    @classmethod
    def for_percentage(cls, percentage: float) -> "SupportLevel":
        if percentage >= FULL_SUPPORT:
            return cls.FULL
        if percentage >= PARTIAL_SUPPORT:
            return cls.PARTIAL
        return cls.POOR


@dataclass(frozen=True)
class LanguageCoverage:
    """Coverage of one language, each value a percentage in [0, 100]."""

    alphabet_support: float
    range_support: float

    @property
    def alphabet_level(self) -> SupportLevel:
        return SupportLevel.for_percentage(self.alphabet_support)

    @property
    def range_level(self) -> SupportLevel:
        return SupportLevel.for_percentage(self.range_support)


def support_percentage(supported: int, total: int) -> float:
    """
    Percentage of supported characters, rounded half-up to one decimal.

    A zero total gives 0.0.
    """
    if total <= 0:
        return 0.0
    value = Decimal(supported * 100) / Decimal(total)
    return float(value.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def alphabet_support(lookup: GlyphLookup, language: Language) -> float:
    """Percentage of the language's alphabet characters the font maps."""
    supported = sum(
        1 for char in language.alphabet if lookup_char(lookup, char) is not None
    )
    return support_percentage(supported, len(language.alphabet))


def range_support(lookup: GlyphLookup, language: Language) -> float:
    """Percentage of code points across the language's ranges the font maps."""
    supported = sum(
        1
        for codepoint in language.iter_range_codepoints()
        if lookup(codepoint) is not None
    )
    return support_percentage(supported, language.range_size)


def analyze_language(lookup: GlyphLookup, language: Language) -> LanguageCoverage:
    """Compute both coverage metrics for one language."""
    if not language.alphabet:
        logger.debug(f"{language.name}: no alphabet data, alphabet support is 0%")
    if not language.ranges:
        logger.debug(f"{language.name}: no range data, range support is 0%")

    return LanguageCoverage(
        alphabet_support=alphabet_support(lookup, language),
        range_support=range_support(lookup, language),
    )


def analyze_coverage(
    lookup: GlyphLookup,
    languages: Iterable[Language] = LANGUAGES,
) -> dict[str, LanguageCoverage]:
    """
    Analyze coverage for every language.

    Args:
        lookup: Code point to glyph index lookup for the font
        languages: Languages to analyze, in report order

    Returns:
        Mapping of language name to coverage, in the order given
    """
    results: dict[str, LanguageCoverage] = {}
    for language in languages:
        results[language.name] = analyze_language(lookup, language)
    return results
