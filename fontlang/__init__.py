"""
fontlang: per-language glyph coverage and subset export for TrueType fonts.
"""

__version__ = "0.1.0"
