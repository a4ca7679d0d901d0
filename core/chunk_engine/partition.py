"""
Lossless splitting of input text into per-worker chunks.

For a text of length L and N workers every chunk holds floor(L/N)
characters and the last chunk also takes the L mod N remainder, so
joining the chunks in index order always gives back the input.
"""

import logging
from typing import NamedTuple

from core.cipher_engine.errors import ConfigurationError

logger = logging.getLogger("ChunkCipher.Partition")


class TextChunk(NamedTuple):
    """A contiguous slice of the input tagged with its position."""
    index: int
    text:  str


def validate_worker_count(n: int) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise ConfigurationError(
            f"Worker count must be an integer, got {n!r}"
        )
    if n <= 0:
        raise ConfigurationError(
            f"Worker count must be at least 1, got {n}"
        )
    return n


def split_text(text: str, n: int) -> list[TextChunk]:
    """
    Partition *text* into exactly *n* chunks.

    Raises
    ------
    ConfigurationError
        If *n* is not a positive integer.
    """
    validate_worker_count(n)
    size   = len(text) // n
    chunks = []
    for i in range(n):
        start = i * size
        end   = len(text) if i == n - 1 else start + size
        chunks.append(TextChunk(i, text[start:end]))

    logger.debug(
        "Split %d characters into %d chunks (base size %d, last %d)",
        len(text), n, size, len(chunks[-1].text),
    )
    return chunks


def join_chunks(chunks: list[TextChunk]) -> str:
    """Inverse of split_text(): concatenate chunks by index."""
    return "".join(c.text for c in sorted(chunks, key=lambda c: c.index))
