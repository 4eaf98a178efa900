"""
Subset export operations.

Writes single-language subset fonts to disk.
"""

from pathlib import Path

from fontlang.config.paths import DIST_DIR
from fontlang.core.font_io import get_font_size_kb
from fontlang.core.session import FontSession, SubsetExport
from fontlang.errors import ExportWriteError, FontConstructionError
from fontlang.pipeline.validate import validate_subset
from fontlang.utils.logging import logger


def write_export(export: SubsetExport, output_dir: Path = DIST_DIR) -> Path:
    """
    Write an export to the output directory.

    Args:
        export: Built subset font
        output_dir: Destination directory, created if needed

    Returns:
        Path of the written file

    Raises:
        ExportWriteError: If the directory or file cannot be written
    """
    output_dir = Path(output_dir)
    output = output_dir / export.filename
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        output.write_bytes(export.data)
    except OSError as e:
        raise ExportWriteError(f"Cannot write {output}: {e}") from e
    logger.info(
        f"Created {output.name} ({len(export.glyphs)} glyphs, "
        f"{get_font_size_kb(export.data):.1f} KB)"
    )
    return output


def export_language(
    font_path: Path,
    language: str,
    output_dir: Path = DIST_DIR,
    *,
    check: bool = False,
) -> Path:
    """
    Load a font and write its subset for one language.

    Nothing is written when the subset cannot be built or, with check,
    fails validation against the source.

    Args:
        font_path: Source .ttf or .woff font
        language: Language to extract
        output_dir: Destination directory
        check: Re-parse and validate the subset before writing

    Returns:
        Path of the written file
    """
    session = FontSession()
    session.load(font_path)
    try:
        export = session.export(language)
        if check:
            failures = validate_subset(export.data, session.font, export.glyphs)
            for failure in failures:
                logger.error(f"  {failure}")
            if failures:
                raise FontConstructionError(
                    f"{export.filename} failed validation ({len(failures)} problems)"
                )
            logger.info(f"{export.filename} passed validation")
    finally:
        session.close()
    return write_export(export, output_dir)
