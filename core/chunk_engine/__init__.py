"""
ChunkCipher chunk engine — parallel, order-preserving cipher execution.
"""

from .partition  import TextChunk, split_text, join_chunks
from .assembly   import assemble
from .dispatcher import dispatch
from .engine     import ChunkedCipherEngine, run_cipher

__all__ = [
    "TextChunk", "split_text", "join_chunks",
    "assemble", "dispatch",
    "ChunkedCipherEngine", "run_cipher",
]
