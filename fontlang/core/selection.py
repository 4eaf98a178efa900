"""
Glyph selection for single-language subsets.
"""

from fontlang.config.languages import Language, get_language
from fontlang.config.unicode_ranges import BASIC_LATIN_SEED
from fontlang.core.lookup import GlyphLookup, lookup_char
from fontlang.utils.logging import logger

NOTDEF_GLYPH = 0


def select_glyphs(lookup: GlyphLookup, language: Language | str) -> frozenset[int]:
    """
    Collect the glyph indices needed to set text in one language.

    The set is .notdef, every mapped printable Basic Latin glyph, then every
    mapped glyph from the language's ranges and alphabet. Unmapped code
    points contribute nothing. An unknown language still gets .notdef and
    Basic Latin.

    Args:
        lookup: Code point to glyph index lookup for the font
        language: Language record or name

    Returns:
        Deduplicated glyph indices, always containing 0
    """
    if isinstance(language, str):
        language = get_language(language)
    if not language.is_known:
        logger.warning(f"No reference data for '{language.name}', Basic Latin only")

    glyphs = {NOTDEF_GLYPH}

    start, end = BASIC_LATIN_SEED
    for codepoint in range(start, end + 1):
        gid = lookup(codepoint)
        if gid is not None:
            glyphs.add(gid)

    for codepoint in language.iter_range_codepoints():
        gid = lookup(codepoint)
        if gid is not None:
            glyphs.add(gid)

    for char in language.alphabet:
        gid = lookup_char(lookup, char)
        if gid is not None:
            glyphs.add(gid)

    logger.debug(f"{language.name}: selected {len(glyphs)} glyphs")
    return frozenset(glyphs)
