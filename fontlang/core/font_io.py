"""
Font I/O utilities for loading and serializing font files.
"""

from io import BytesIO
from pathlib import Path

from fontTools.ttLib import TTFont

from fontlang.config.paths import FONT_SUFFIXES
from fontlang.errors import UnsupportedFontFormatError

# Tables every analyzed font must provide
REQUIRED_TABLES = ("cmap", "head", "hhea", "hmtx", "maxp", "name")


def check_font_suffix(path: Path) -> None:
    """Reject files that are not .ttf or .woff by name."""
    if path.suffix.lower() not in FONT_SUFFIXES:
        raise UnsupportedFontFormatError(
            f"{path.name}: expected one of {', '.join(FONT_SUFFIXES)}"
        )


def parse_font(data: bytes, name: str = "<memory>") -> TTFont:
    """
    Parse font bytes into a fully decompiled TTFont.

    Args:
        data: Raw .ttf or .woff contents
        name: Label used in error messages

    Returns:
        TTFont instance

    Raises:
        UnsupportedFontFormatError: If fontTools cannot read the data or a
            required table is missing
    """
    try:
        font = TTFont(BytesIO(data))
        font.ensureDecompiled()
    except Exception as e:
        raise UnsupportedFontFormatError(f"{name}: cannot parse font: {e}") from e

    missing = [tag for tag in REQUIRED_TABLES if tag not in font]
    if missing:
        font.close()
        raise UnsupportedFontFormatError(
            f"{name}: missing required tables: {', '.join(missing)}"
        )
    return font


def load_font(path: Path) -> TTFont:
    """
    Load a .ttf or .woff font from disk.

    Args:
        path: Path to font file

    Returns:
        TTFont instance
    """
    path = Path(path)
    check_font_suffix(path)
    return parse_font(path.read_bytes(), path.name)


def font_to_bytes(font: TTFont) -> bytes:
    """Serialize a font to bytes."""
    buffer = BytesIO()
    font.save(buffer)
    return buffer.getvalue()


def source_bytes(font: TTFont) -> bytes:
    """
    Bytes of a font as it was read, without touching the TTFont.

    Fonts that were built in memory have no reader; they are serialized with
    timestamp and bounding box recalculation off so the object keeps its
    head values.
    """
    if font.reader is not None:
        stream = font.reader.file
        position = stream.tell()
        stream.seek(0)
        data = stream.read()
        stream.seek(position)
        return data

    recalc = (font.recalcTimestamp, font.recalcBBoxes)
    font.recalcTimestamp = False
    font.recalcBBoxes = False
    try:
        return font_to_bytes(font)
    finally:
        font.recalcTimestamp, font.recalcBBoxes = recalc


def get_font_size_kb(data: bytes) -> float:
    """Get serialized font size in kilobytes."""
    return len(data) / 1024
