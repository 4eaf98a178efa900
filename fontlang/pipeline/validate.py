"""
Subset font validation.

Re-parses an exported subset and checks it against its source font.
"""

from collections.abc import Iterable
from io import BytesIO

from fontTools.ttLib import TTFont

from fontlang.core.subsetter import retained_glyph_ids
from fontlang.utils.logging import logger

# (table tag, attribute) pairs that must match the source exactly
PRESERVED_METRICS = (
    ("head", "unitsPerEm"),
    ("hhea", "ascent"),
    ("hhea", "descent"),
)


def validate_subset(data: bytes, source: TTFont, glyphs: Iterable[int]) -> list[str]:
    """
    Validate a subset font. Returns list of failures.

    Glyphs added beyond the selection (components of composite glyphs) are
    logged, not failed.

    Args:
        data: Serialized subset font
        source: Font the subset was built from
        glyphs: Glyph ids the subset was built with
    """
    try:
        subset = TTFont(BytesIO(data))
        subset_order = subset.getGlyphOrder()
    except Exception as e:
        return [f"Subset does not parse: {e}"]

    failures = []
    source_order = source.getGlyphOrder()
    expected = [source_order[gid] for gid in retained_glyph_ids(source, glyphs)]

    if not subset_order or subset_order[0] != source_order[0]:
        failures.append(
            f"First glyph: expected '{source_order[0]}', "
            f"got '{subset_order[0] if subset_order else None}'"
        )

    present = set(subset_order)
    missing = [name for name in expected if name not in present]
    if missing:
        failures.append(f"Missing {len(missing)} selected glyphs: {missing[:10]}")

    extra = present.difference(expected)
    if extra:
        logger.info(f"Subset carries {len(extra)} glyphs beyond the selection")

    for tag, attribute in PRESERVED_METRICS:
        expected_value = getattr(source[tag], attribute)
        actual_value = getattr(subset[tag], attribute)
        if actual_value != expected_value:
            failures.append(
                f"{tag}.{attribute}: expected {expected_value}, got {actual_value}"
            )

    subset.close()
    return failures
