"""
Language reference records.

Joins the alphabet and Unicode range tables into one ordered sequence. The
alphabet table drives the order and the list of languages reported.
"""

from dataclasses import dataclass, field

from fontlang.config.alphabets import ALPHABETS
from fontlang.config.unicode_ranges import UNICODE_RANGES


@dataclass(frozen=True)
class Language:
    """A language's character inventory."""

    name: str
    alphabet: str = ""
    ranges: tuple[tuple[int, int], ...] = field(default_factory=tuple)

    @property
    def range_size(self) -> int:
        """Number of code points across all ranges, endpoints included."""
        return sum(end - start + 1 for start, end in self.ranges)

    @property
    def is_known(self) -> bool:
        """True when either table has data for this language."""
        return bool(self.alphabet or self.ranges)

    def iter_range_codepoints(self):
        """Yield every code point of every range, in table order."""
        for start, end in self.ranges:
            yield from range(start, end + 1)


def _build_language(name: str) -> Language:
    return Language(
        name=name,
        alphabet=ALPHABETS.get(name, ""),
        ranges=tuple(UNICODE_RANGES.get(name, ())),
    )


LANGUAGES: tuple[Language, ...] = tuple(_build_language(name) for name in ALPHABETS)


def language_names() -> list[str]:
    """Names of all reported languages, in report order."""
    return [language.name for language in LANGUAGES]


def get_language(name: str) -> Language:
    """
    Look up a language by name.

    Unknown names give an empty record rather than an error; callers treat
    it as zero coverage and an empty glyph contribution.
    """
    for language in LANGUAGES:
        if language.name == name:
            return language
    return _build_language(name)
