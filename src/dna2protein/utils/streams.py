"""Reading sequences from and writing results to files or standard streams."""

import logging
import sys
from typing import NoReturn
from pathlib import Path

logger = logging.getLogger(__name__)

STDIO = "-"


def read_sequence(source: str | Path) -> str:
    """
    Read the raw sequence text.

    Args:
        source: File path, or ``-`` to read a single line from standard input

    Returns:
        The raw text, unmodified

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the input is not valid text
    """
    if str(source) == STDIO:
        logger.debug("Reading sequence from stdin")
        return sys.stdin.readline()

    logger.debug("Reading sequence from %s", source)
    return Path(source).read_text()


def write_output(sink: str | Path, lines: list[str]) -> None:
    """
    Write result lines to a file, or to standard output for ``-``.

    Args:
        sink: File path, or ``-`` for standard output
        lines: Results, written one per line in order

    Raises:
        OSError: If the file cannot be written
    """
    text = "".join(f"{line}\n" for line in lines)
    if str(sink) == STDIO:
        sys.stdout.write(text)
        return

    Path(sink).write_text(text)
    logger.info("Wrote %d line(s) to %s", len(lines), sink)


def abort(message: str, status: int = 1) -> NoReturn:
    """Report an error on standard error and exit with a non-zero status."""
    print(message, file=sys.stderr)
    sys.exit(status)
