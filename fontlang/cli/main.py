"""
Main CLI entry point for fontlang.
"""

import sys
from pathlib import Path

import click

from fontlang import __version__
from fontlang.config.paths import DIST_DIR
from fontlang.errors import FontLangError
from fontlang.utils.logging import logger, set_verbosity

font_argument = click.argument(
    "font", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)


def _load_session(font: Path):
    from fontlang.core.session import FontSession

    session = FontSession()
    try:
        session.load(font)
    except FontLangError as e:
        logger.error(str(e))
        sys.exit(1)
    return session


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging.")
def cli(verbose):
    """Font language coverage and subset extraction."""
    set_verbosity(verbose)


@cli.command()
def languages():
    """List languages with reference data."""
    from fontlang.config.languages import LANGUAGES

    for language in LANGUAGES:
        click.echo(
            f"{language.name}: {len(language.alphabet)} letters, "
            f"{language.range_size} code points"
        )


@cli.command()
@font_argument
def info(font):
    """Show font name, metrics and condensation factor."""
    from fontlang.operations.report import format_font_info

    session = _load_session(font)
    try:
        click.echo(format_font_info(session.info()))
    finally:
        session.close()


@cli.command()
@font_argument
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON.")
@click.option(
    "--language",
    "language_names",
    multiple=True,
    help="Only analyze this language (repeatable).",
)
def coverage(font, as_json, language_names):
    """Report per-language alphabet and Unicode range support."""
    from fontlang.config.languages import LANGUAGES, get_language
    from fontlang.operations.report import format_coverage_json, format_coverage_table

    if language_names:
        selected = [get_language(name) for name in language_names]
    else:
        selected = LANGUAGES

    session = _load_session(font)
    try:
        results = session.analyze(selected)
    finally:
        session.close()

    if as_json:
        click.echo(format_coverage_json(results))
    else:
        click.echo(format_coverage_table(results))


@cli.command()
@font_argument
@click.argument("language")
def glyphs(font, language):
    """List the glyph ids a subset for LANGUAGE would carry."""
    session = _load_session(font)
    try:
        selected = session.select_glyphs(language)
    finally:
        session.close()

    logger.info(f"{len(selected)} glyphs selected for {language}")
    click.echo(" ".join(str(gid) for gid in sorted(selected)))


@cli.command()
@font_argument
@click.argument("language")
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DIST_DIR,
    show_default=True,
    help="Directory for the extracted font.",
)
@click.option("--check", is_flag=True, help="Validate the subset before writing.")
def export(font, language, output_dir, check):
    """Extract a subset font with the glyphs LANGUAGE needs."""
    from fontlang.operations.export import export_language

    try:
        output = export_language(font, language, output_dir, check=check)
    except FontLangError as e:
        logger.error(str(e))
        sys.exit(1)
    click.echo(str(output))


if __name__ == "__main__":
    cli()
