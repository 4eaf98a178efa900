"""
Font session: owns the currently loaded font.

A session holds at most one font. Loading replaces it wholesale; every
analysis and export reads the font current at call time.
"""

from dataclasses import dataclass
from pathlib import Path

from fontTools.ttLib import TTFont

from fontlang.config.languages import LANGUAGES
from fontlang.core.coverage import LanguageCoverage, analyze_coverage
from fontlang.core.font_io import load_font, parse_font
from fontlang.core.lookup import GlyphLookup, font_lookup
from fontlang.core.metrics import FontInfo, font_info
from fontlang.core.naming import read_font_names
from fontlang.core.selection import select_glyphs
from fontlang.core.subsetter import build_subset_font, export_filename
from fontlang.errors import NoFontLoadedError
from fontlang.utils.logging import logger


@dataclass(frozen=True)
class SubsetExport:
    """A serialized subset font and its suggested filename."""

    language: str
    filename: str
    data: bytes
    glyphs: frozenset[int]


class FontSession:
    """Holds one parsed font and runs the core operations on it."""

    def __init__(self) -> None:
        self._font: TTFont | None = None
        self._lookup: GlyphLookup | None = None
        self.source_name: str | None = None

    @property
    def font(self) -> TTFont | None:
        return self._font

    @property
    def is_loaded(self) -> bool:
        return self._font is not None

    def load(self, path: Path) -> TTFont:
        """Load a font file, replacing any current font."""
        path = Path(path)
        font = load_font(path)
        self._replace(font, path.name)
        return font

    def load_bytes(self, data: bytes, name: str) -> TTFont:
        """Load font bytes, replacing any current font."""
        font = parse_font(data, name)
        self._replace(font, name)
        return font

    def _replace(self, font: TTFont, name: str) -> None:
        self.close()
        self._font = font
        self._lookup = font_lookup(font)
        self.source_name = name
        logger.info(f"Loaded {name} ({len(font.getGlyphOrder())} glyphs)")

    def close(self) -> None:
        """Discard the current font."""
        if self._font is not None:
            self._font.close()
        self._font = None
        self._lookup = None
        self.source_name = None

    def _require(self, operation: str) -> tuple[TTFont, GlyphLookup]:
        if self._font is None or self._lookup is None:
            logger.error(f"No font loaded, cannot {operation}")
            raise NoFontLoadedError(operation)
        return self._font, self._lookup

    def info(self) -> FontInfo:
        """Name and metrics summary of the current font."""
        font, _ = self._require("read font info")
        return font_info(font)

    def analyze(self, languages=LANGUAGES) -> dict[str, LanguageCoverage]:
        """Coverage of every language for the current font."""
        _, lookup = self._require("analyze coverage")
        return analyze_coverage(lookup, languages)

    def select_glyphs(self, language: str) -> frozenset[int]:
        """Glyph ids a subset for the language would carry."""
        _, lookup = self._require("select glyphs")
        return select_glyphs(lookup, language)

    def export(self, language: str) -> SubsetExport:
        """Build a subset font for one language."""
        font, lookup = self._require("export a subset font")
        glyphs = select_glyphs(lookup, language)
        data = build_subset_font(font, glyphs, language)
        filename = export_filename(read_font_names(font).full_name, language)
        return SubsetExport(
            language=language, filename=filename, data=data, glyphs=glyphs
        )
