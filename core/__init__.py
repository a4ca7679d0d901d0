from .cipher_engine import CipherFactory, CipherMode, CipherType
from .chunk_engine  import ChunkedCipherEngine

__all__ = ["CipherFactory", "CipherMode", "CipherType", "ChunkedCipherEngine"]
