"""
Coverage report rendering.

Turns coverage results into a plain-text table or JSON.
"""

import json

from fontlang.core.coverage import LanguageCoverage
from fontlang.core.metrics import FontInfo

HEADERS = ("Language", "Unicode Range Support", "Alphabet Support")


def format_percentage(value: float) -> str:
    return f"{value:.1f}%"


def coverage_rows(results: dict[str, LanguageCoverage]) -> list[tuple[str, str, str]]:
    """Table rows in result order: language, range cell, alphabet cell."""
    rows = []
    for language, coverage in results.items():
        rows.append(
            (
                language,
                f"{format_percentage(coverage.range_support)} "
                f"({coverage.range_level.value})",
                f"{format_percentage(coverage.alphabet_support)} "
                f"({coverage.alphabet_level.value})",
            )
        )
    return rows


def format_coverage_table(results: dict[str, LanguageCoverage]) -> str:
    """Render coverage as an aligned plain-text table."""
    rows = [HEADERS, *coverage_rows(results)]
    widths = [max(len(row[i]) for row in rows) for i in range(len(HEADERS))]

    lines = []
    for index, row in enumerate(rows):
        lines.append("  ".join(cell.ljust(width) for cell, width in zip(row, widths)))
        if index == 0:
            lines.append("  ".join("-" * width for width in widths))
    return "\n".join(line.rstrip() for line in lines)


def coverage_to_dict(results: dict[str, LanguageCoverage]) -> dict[str, dict]:
    return {
        language: {
            "alphabetSupport": coverage.alphabet_support,
            "rangeSupport": coverage.range_support,
        }
        for language, coverage in results.items()
    }


def format_coverage_json(results: dict[str, LanguageCoverage]) -> str:
    """Render coverage as JSON, keys in result order."""
    return json.dumps(coverage_to_dict(results), ensure_ascii=False, indent=2)


def format_font_info(info: FontInfo) -> str:
    """Render a font summary, one field per line."""
    return "\n".join(
        [
            f"Name: {info.full_name}",
            f"Units per em: {info.units_per_em}",
            f"Ascender: {info.ascender}",
            f"Descender: {info.descender}",
            f"Glyphs: {info.glyph_count}",
            f"Condensation factor: {info.condensation:.2f}",
        ]
    )
