"""
Exception types raised by fontlang operations.
"""


class FontLangError(Exception):
    """Base class for fontlang failures."""


class NoFontLoadedError(FontLangError):
    """An operation needs a font but none is loaded."""

    def __init__(self, operation: str):
        super().__init__(f"No font loaded: cannot {operation}")
        self.operation = operation


class UnsupportedFontFormatError(FontLangError):
    """The input is not a readable .ttf or .woff font."""


class FontConstructionError(FontLangError):
    """A subset font could not be assembled or serialized."""


class ExportWriteError(FontLangError):
    """A built subset font could not be written to disk."""
