"""
Abstract base class for every classical cipher in ChunkCipher.

Every algorithm (Caesar, Playfair, Vigenère …) implements this
interface so the chunk engine and the GUI can treat them uniformly.
Instances are immutable once built: the engine shares a single
cipher object, read-only, across all of its worker threads.
"""

from abc import ABC, abstractmethod

from .modes import CipherMode


class Cipher(ABC):
    """
    Unified interface for classical text ciphers.

    apply_cipher() accepts upper-case alphabetic text and never
    raises; a malformed key is rejected when the cipher is built.
    """

    @abstractmethod
    def apply_cipher(self, text: str, mode: CipherMode) -> str:
        """Encrypt or decrypt *text* according to *mode*."""

    @property
    @abstractmethod
    def cipher_name(self) -> str:
        """Command-line name, e.g. 'caesar'."""

    @property
    def context_free(self) -> bool:
        """True if each character is transformed independently."""
        return False

    def encrypt(self, text: str) -> str:
        return self.apply_cipher(text, CipherMode.ENCRYPT)

    def decrypt(self, text: str) -> str:
        return self.apply_cipher(text, CipherMode.DECRYPT)

    def info(self) -> dict:
        """Return cipher metadata for CLI and GUI display."""
        return {
            "name":         self.cipher_name,
            "context_free": self.context_free,
        }
