"""
Name table reading and renaming utilities.
"""

import re
from dataclasses import dataclass

from fontTools.ttLib import TTFont

from fontlang.utils.logging import logger

# PostScript names allow a restricted ASCII set and at most 63 characters
POSTSCRIPT_MAX_LENGTH = 63
_POSTSCRIPT_STRIP = re.compile(r"[^A-Za-z0-9]")


@dataclass
class FontNaming:
    """Font naming configuration."""

    family: str  # e.g., "Noto Sans Thai"
    style: str  # e.g., "Regular", "Bold"

    @property
    def full_name(self) -> str:
        """Full font name with family and style."""
        return f"{self.family} {self.style}"

    @property
    def postscript_name(self) -> str:
        """PostScript name (ASCII alphanumerics, hyphen before the style)."""
        family = _POSTSCRIPT_STRIP.sub("", self.family)
        style = _POSTSCRIPT_STRIP.sub("", self.style)
        return f"{family}-{style}"[:POSTSCRIPT_MAX_LENGTH]

    @property
    def unique_id(self) -> str:
        """Unique font identifier."""
        return f"fontlang;{self.postscript_name}"

    def for_language(self, language: str) -> "FontNaming":
        """Naming for a single-language subset of this font."""
        return FontNaming(f"{self.family} {language}", self.style)


@dataclass(frozen=True)
class FontNames:
    """Names as found in a font."""

    family: str
    style: str
    full_name: str

    @property
    def naming(self) -> FontNaming:
        return FontNaming(self.family, self.style)


def read_font_names(font: TTFont) -> FontNames:
    """
    Read family, style and full name from the name table.

    The full name is name ID 4 as stored. Missing entries fall back to the
    PostScript name or "Untitled" for the family and "Regular" for the style.
    """
    name_table = font["name"]
    family = name_table.getBestFamilyName() or name_table.getDebugName(6) or "Untitled"
    style = name_table.getBestSubFamilyName() or "Regular"
    full_name = (
        name_table.getDebugName(4)
        or name_table.getBestFullName()
        or f"{family} {style}"
    )
    return FontNames(family=family, style=style, full_name=full_name)


def encode_name(record, text: str) -> bool:
    """
    Store text in a name record using the record's own encoding.

    Returns False, leaving the record untouched, when the encoding cannot
    represent the text (e.g. Cyrillic in a Mac Roman record).
    """
    encoding = record.getEncoding()
    if encoding is None:
        return False
    try:
        record.string = text.encode(encoding)
    except (LookupError, UnicodeEncodeError):
        return False
    return True


def update_name_table(font: TTFont, naming: FontNaming) -> int:
    """
    Rewrite family-derived name records.

    The subfamily records (IDs 2 and 17) are left as they are. Records whose
    encoding cannot hold the new name keep their old value.

    Args:
        font: TTFont instance to modify
        naming: Naming configuration

    Returns:
        Number of records left unchanged because of their encoding
    """
    values = {
        1: naming.family,  # Font Family name
        3: naming.unique_id,  # Unique identifier
        4: naming.full_name,  # Full font name
        6: naming.postscript_name,  # PostScript name
        16: naming.family,  # Typographic Family
    }

    skipped = 0
    for record in font["name"].names:
        text = values.get(record.nameID)
        if text is None:
            continue
        try:
            record.toUnicode()
        except UnicodeDecodeError:
            continue

        if not encode_name(record, text):
            logger.debug(
                f"Name ID {record.nameID} (platform {record.platformID}) "
                f"cannot encode '{text}', kept as is"
            )
            skipped += 1
    return skipped
