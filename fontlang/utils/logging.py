"""
Shared logging configuration for fontlang commands.

Diagnostics go to stderr so command output on stdout stays parseable.
"""

import logging
import sys

logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stderr)],
)

logger = logging.getLogger("fontlang")


def set_verbosity(verbose: bool) -> None:
    """Switch the fontlang logger between INFO and DEBUG."""
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
