"""
Single-language subset font construction.

Builds a new font holding .notdef plus a chosen set of glyphs from a source
font, keeping its metrics and naming it after the language.
"""

import re
from collections.abc import Iterable
from io import BytesIO

from fontTools.subset import Options, Subsetter
from fontTools.ttLib import TTFont

from fontlang.config.paths import EXPORT_SUFFIX
from fontlang.core.font_io import font_to_bytes, source_bytes
from fontlang.core.naming import read_font_names, update_name_table
from fontlang.errors import FontConstructionError, NoFontLoadedError
from fontlang.utils.logging import logger

# Characters that would split the filename into path components
_FILENAME_UNSAFE = re.compile(r"[\\/\x00]")


def subset_options() -> Options:
    """
    Subsetter options for glyph-id driven subsets.

    Layout closure is off so GSUB alternates of selected glyphs are not
    pulled in; component glyphs of composites are always kept.
    """
    options = Options()
    options.layout_closure = False
    options.layout_features = ["*"]
    options.notdef_glyph = True
    options.notdef_outline = True
    options.recommended_glyphs = False
    options.glyph_names = True
    options.name_IDs = ["*"]
    options.name_legacy = True
    options.name_languages = ["*"]
    return options


def retained_glyph_ids(font: TTFont, glyphs: Iterable[int]) -> list[int]:
    """
    Glyph ids to keep: .notdef first, then the rest in ascending order.

    Ids the source font does not have are skipped.
    """
    glyph_count = len(font.getGlyphOrder())
    retained = [0]
    for gid in sorted(set(glyphs)):
        if gid == 0:
            continue
        if 0 < gid < glyph_count:
            retained.append(gid)
        else:
            logger.debug(f"Glyph {gid} not in source font ({glyph_count} glyphs)")
    return retained


def export_filename(full_name: str, language: str) -> str:
    """
    Suggested filename for a language subset.

    Path separators in the font or language name become underscores.
    """
    name = f"{full_name}-{language}{EXPORT_SUFFIX}"
    return _FILENAME_UNSAFE.sub("_", name)


def build_subset_font(
    font: TTFont | None,
    glyphs: Iterable[int],
    language: str,
) -> bytes:
    """
    Build a subset font from selected glyph ids.

    The source font is not modified. The result is an uncompressed sfnt even
    when the source was WOFF.

    Args:
        font: Source font, None when no font is loaded
        glyphs: Glyph ids to keep
        language: Language name appended to the family name

    Returns:
        Serialized subset font

    Raises:
        NoFontLoadedError: If font is None
        FontConstructionError: If subsetting or serialization fails
    """
    if font is None:
        raise NoFontLoadedError("build a subset font")

    gids = retained_glyph_ids(font, glyphs)
    naming = read_font_names(font).naming.for_language(language)
    logger.info(f"Building {naming.full_name} with {len(gids)} glyphs")

    try:
        working = TTFont(BytesIO(source_bytes(font)))
        subsetter = Subsetter(options=subset_options())
        subsetter.populate(gids=gids)
        subsetter.subset(working)

        update_name_table(working, naming)
        working.flavor = None
        data = font_to_bytes(working)
    except Exception as e:
        raise FontConstructionError(
            f"Failed to build subset for {language}: {e}"
        ) from e

    logger.info(f"Built {naming.postscript_name}: {len(data)} bytes")
    return data
