"""
ChunkCipher cipher engine — the classical ciphers and their factory.
"""

from .modes           import CipherMode, CipherType
from .errors          import (
    ChunkCipherError, ConfigurationError, CipherConstructionError,
    InvalidKey, WorkerFailure,
)
from .base            import Cipher
from .caesar_crypto   import CaesarCipher
from .playfair_crypto import PlayfairCipher
from .vigenere_crypto import VigenereCipher
from .hash_crypto     import HashCrypto
from .cipher_factory  import CipherFactory

__all__ = [
    # Selection
    "CipherMode", "CipherType",
    # Errors
    "ChunkCipherError", "ConfigurationError", "CipherConstructionError",
    "InvalidKey", "WorkerFailure",
    # Unified interface
    "Cipher", "CipherFactory", "HashCrypto",
    # Individual ciphers
    "CaesarCipher", "PlayfairCipher", "VigenereCipher",
]
