"""
Unicode range definitions for language coverage checks.

Reference: https://www.unicode.org/charts/
Ranges are inclusive (start, end) code point pairs.
"""

# Printable Basic Latin, always carried into an extracted subset
BASIC_LATIN_SEED = (0x0020, 0x007F)

BASIC_LATIN = (0x0000, 0x007F)
LATIN_1_SUPPLEMENT = (0x00A0, 0x00FF)
LATIN_EXTENDED_A = (0x0100, 0x017F)
LATIN_EXTENDED_ADDITIONAL = (0x1E00, 0x1EFF)
CJK_UNIFIED_IDEOGRAPHS = (0x4E00, 0x9FFF)

UNICODE_RANGES: dict[str, list[tuple[int, int]]] = {
    "English": [BASIC_LATIN],
    # Cyrillic
    "Russian": [(0x0400, 0x04FF)],
    "Indonesian": [BASIC_LATIN],
    "Spanish (LATAM)": [BASIC_LATIN, LATIN_1_SUPPLEMENT],
    "Portuguese (Brazilian)": [BASIC_LATIN, LATIN_1_SUPPLEMENT],
    "Turkish": [BASIC_LATIN, LATIN_1_SUPPLEMENT, LATIN_EXTENDED_A],
    "Danish": [BASIC_LATIN, LATIN_1_SUPPLEMENT],
    "German": [BASIC_LATIN, LATIN_1_SUPPLEMENT],
    "Swedish": [BASIC_LATIN, LATIN_1_SUPPLEMENT],
    "Italian": [BASIC_LATIN, LATIN_1_SUPPLEMENT],
    "French": [BASIC_LATIN, LATIN_1_SUPPLEMENT],
    "Vietnamese": [
        BASIC_LATIN,
        LATIN_1_SUPPLEMENT,
        LATIN_EXTENDED_A,
        LATIN_EXTENDED_ADDITIONAL,
    ],
    "Thai": [(0x0E00, 0x0E7F)],
    # Devanagari
    "Hindi": [(0x0900, 0x097F)],
    "Bengali": [(0x0980, 0x09FF)],
    # Simplified and traditional share the unified block
    "Chinese (Mandarin)": [CJK_UNIFIED_IDEOGRAPHS],
    "Korean": [
        (0xAC00, 0xD7AF),  # Hangul Syllables
        (0x1100, 0x11FF),  # Hangul Jamo
    ],
    "Japanese": [
        (0x3040, 0x309F),  # Hiragana
        (0x30A0, 0x30FF),  # Katakana
        CJK_UNIFIED_IDEOGRAPHS,
    ],
    "Malay": [BASIC_LATIN],
    "Lao": [(0x0E80, 0x0EFF)],
    "Khmer": [(0x1780, 0x17FF)],
}
