"""
Filesystem path constants for fontlang commands.
"""

from pathlib import Path

# Default directory for extracted subset fonts
DIST_DIR = Path("dist")

# Input font suffixes fontlang can read
FONT_SUFFIXES = (".ttf", ".woff")

# Suffix appended to exported subset filenames
EXPORT_SUFFIX = "-extracted.ttf"
