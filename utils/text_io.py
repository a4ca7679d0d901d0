"""
Reading input text from a file or stdin and writing results back.
"""

import logging
import sys

from .transform_char import normalize_text

logger = logging.getLogger("ChunkCipher.TextIO")


class TextIOError(OSError):
    """A file could not be opened for reading or writing."""


def read_input(path: str | None = None, stream=None) -> str:
    """
    Return the normalised contents of *path*, or of *stream*
    (stdin by default) when no path is given.
    """
    if path:
        try:
            with open(path, "r", encoding="utf-8", errors="replace") as f:
                raw = f.read()
        except OSError as exc:
            raise TextIOError(
                f"failed to create istream on file '{path}'"
            ) from exc
        logger.info("Read %d characters from %s", len(raw), path)
    else:
        raw = (stream or sys.stdin).read()
    return normalize_text(raw)


def write_output(text: str, path: str | None = None, stream=None):
    """Write *text* plus a trailing newline to *path* or *stream*."""
    if path:
        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(text + "\n")
        except OSError as exc:
            raise TextIOError(
                f"failed to create ostream on file '{path}'"
            ) from exc
        logger.info("Wrote %d characters to %s", len(text), path)
    else:
        out = stream or sys.stdout
        out.write(text + "\n")
        out.flush()
