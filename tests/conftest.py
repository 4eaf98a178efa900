"""Shared pytest fixtures."""

from io import BytesIO

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import TTFont

# ASCII sample plus a few Thai letters and one accented Latin letter
SAMPLE_CHARS = "ABCabc xyzกขé"

UNITS_PER_EM = 1000
ASCENT = 800
DESCENT = -200
GLYPH_WIDTH = 500
NOTDEF_WIDTH = 600


def _box_glyph(width: int):
    pen = TTGlyphPen(None)
    pen.moveTo((50, 0))
    pen.lineTo((50, 700))
    pen.lineTo((width - 50, 700))
    pen.lineTo((width - 50, 0))
    pen.closePath()
    return pen.glyph()


def build_font(
    chars: str = SAMPLE_CHARS,
    family: str = "Test Sans",
    style: str = "Regular",
    units_per_em: int = UNITS_PER_EM,
    flavor: str | None = None,
) -> FontBuilder:
    """Build a TrueType font with one box glyph per character."""
    glyph_order = [".notdef"] + [f"uni{ord(char):04X}" for char in chars]
    cmap = {ord(char): f"uni{ord(char):04X}" for char in chars}

    fb = FontBuilder(units_per_em, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap(cmap)
    fb.setupGlyf(
        {
            name: _box_glyph(NOTDEF_WIDTH if name == ".notdef" else GLYPH_WIDTH)
            for name in glyph_order
        }
    )
    metrics = {name: (GLYPH_WIDTH, 50) for name in glyph_order}
    metrics[".notdef"] = (NOTDEF_WIDTH, 50)
    fb.setupHorizontalMetrics(metrics)
    fb.setupHorizontalHeader(ascent=ASCENT, descent=DESCENT)
    fb.setupNameTable(
        {
            "familyName": family,
            "styleName": style,
            "uniqueFontIdentifier": f"test;{family}-{style}",
            "fullName": f"{family} {style}",
            "psName": f"{family.replace(' ', '')}-{style}",
        }
    )
    fb.setupOS2(sTypoAscender=ASCENT, usWinAscent=ASCENT, usWinDescent=-DESCENT)
    fb.setupPost()

    if flavor:
        fb.font.flavor = flavor
    return fb


def build_font_bytes(**kwargs) -> bytes:
    """Serialize a font from build_font."""
    buffer = BytesIO()
    build_font(**kwargs).save(buffer)
    return buffer.getvalue()


def build_composite_font_bytes() -> bytes:
    """
    Build a font whose "Á" is a composite of "A" and an unmapped accent.

    Glyph order: .notdef, uni0041, acutecomb, uni00C1.
    """
    glyph_order = [".notdef", "uni0041", "acutecomb", "uni00C1"]

    pen = TTGlyphPen(glyph_order)
    pen.addComponent("uni0041", (1, 0, 0, 1, 0, 0))
    pen.addComponent("acutecomb", (1, 0, 0, 1, 100, 50))

    fb = FontBuilder(UNITS_PER_EM, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap({0x41: "uni0041", 0xC1: "uni00C1"})
    fb.setupGlyf(
        {
            ".notdef": _box_glyph(NOTDEF_WIDTH),
            "uni0041": _box_glyph(GLYPH_WIDTH),
            "acutecomb": _box_glyph(200),
            "uni00C1": pen.glyph(),
        }
    )
    metrics = {name: (GLYPH_WIDTH, 50) for name in glyph_order}
    metrics[".notdef"] = (NOTDEF_WIDTH, 50)
    fb.setupHorizontalMetrics(metrics)
    fb.setupHorizontalHeader(ascent=ASCENT, descent=DESCENT)
    fb.setupNameTable({"familyName": "Composite Sans", "styleName": "Regular"})
    fb.setupOS2(sTypoAscender=ASCENT, usWinAscent=ASCENT, usWinDescent=-DESCENT)
    fb.setupPost()

    buffer = BytesIO()
    fb.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def font_bytes():
    """Serialized sample font."""
    return build_font_bytes()


@pytest.fixture
def sample_font(font_bytes):
    """Parsed sample font."""
    font = TTFont(BytesIO(font_bytes))
    yield font
    font.close()


@pytest.fixture
def font_path(tmp_path, font_bytes):
    """Sample font written to a .ttf file."""
    path = tmp_path / "TestSans-Regular.ttf"
    path.write_bytes(font_bytes)
    return path


@pytest.fixture
def woff_path(tmp_path):
    """Sample font written to a .woff file."""
    path = tmp_path / "TestSans-Regular.woff"
    path.write_bytes(build_font_bytes(flavor="woff"))
    return path


@pytest.fixture
def make_font_bytes():
    """Factory for custom sample fonts."""
    return build_font_bytes


@pytest.fixture
def make_font_builder():
    """Factory for unsaved, in-memory sample fonts."""
    return build_font


@pytest.fixture
def composite_font():
    """Parsed font with a composite glyph."""
    font = TTFont(BytesIO(build_composite_font_bytes()))
    yield font
    font.close()
