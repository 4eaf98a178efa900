"""
Code point to glyph index lookups.

A lookup maps a Unicode code point to the index of the glyph that renders it,
or None when the font has no mapping. Index 0 (.notdef) is never reported as
a match.
"""

from collections.abc import Callable

from fontTools.ttLib import TTFont

GlyphLookup = Callable[[int], int | None]


def font_lookup(font: TTFont) -> GlyphLookup:
    """
    Build a lookup from a font's best Unicode cmap.

    The cmap and glyph order are resolved once so the per-code point
    cost is two dict hits.

    Args:
        font: Parsed font

    Returns:
        Lookup function for the font
    """
    cmap = font.getBestCmap() or {}
    glyph_ids = {name: gid for gid, name in enumerate(font.getGlyphOrder())}

    def lookup(codepoint: int) -> int | None:
        glyph_name = cmap.get(codepoint)
        if glyph_name is None:
            return None
        gid = glyph_ids.get(glyph_name)
        if not gid:
            return None
        return gid

    return lookup


def zero_is_missing(func: Callable[[int], int]) -> GlyphLookup:
    """
    Adapt a lookup that uses glyph 0 to mean "no mapping".

    Args:
        func: Function returning a glyph index, 0 when unmapped

    Returns:
        Lookup returning None instead of 0
    """

    def lookup(codepoint: int) -> int | None:
        gid = func(codepoint)
        return gid or None

    return lookup


def lookup_char(lookup: GlyphLookup, char: str) -> int | None:
    """Look up a single character."""
    return lookup(ord(char))
