"""
Font metrics inspection utilities.
"""

from dataclasses import dataclass

from fontTools.ttLib import TTFont

from fontlang.core.naming import read_font_names

# Letters sampled for the average width
WIDTH_SAMPLE = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"


@dataclass(frozen=True)
class FontInfo:
    """Summary of a loaded font."""

    full_name: str
    units_per_em: int
    ascender: int
    descender: int
    glyph_count: int
    condensation: float


def average_character_width(font: TTFont, sample: str = WIDTH_SAMPLE) -> float:
    """
    Average advance width of the sample characters.

    Characters without a mapping are measured with the .notdef advance,
    the glyph a renderer falls back to.

    Args:
        font: TTFont instance
        sample: Characters to measure

    Returns:
        Average advance width in font units
    """
    if not sample:
        return 0.0

    cmap = font.getBestCmap() or {}
    hmtx = font["hmtx"]
    notdef = font.getGlyphOrder()[0]

    total = 0
    for char in sample:
        glyph_name = cmap.get(ord(char), notdef)
        width, _lsb = hmtx[glyph_name]
        total += width
    return total / len(sample)


def condensation_factor(font: TTFont) -> float:
    """Average letter width relative to the em, rounded to two decimals."""
    units_per_em = font["head"].unitsPerEm
    return round(average_character_width(font) / units_per_em, 2)


def font_info(font: TTFont) -> FontInfo:
    """Collect name and metric summary for a font."""
    names = read_font_names(font)
    return FontInfo(
        full_name=names.full_name,
        units_per_em=font["head"].unitsPerEm,
        ascender=font["hhea"].ascent,
        descender=font["hhea"].descent,
        glyph_count=len(font.getGlyphOrder()),
        condensation=condensation_factor(font),
    )
