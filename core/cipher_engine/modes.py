"""
Operation direction and algorithm selection for the classical ciphers.
"""

from enum import Enum


class CipherMode(Enum):
    """Whether a cipher should encrypt or decrypt its input."""
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


class CipherType(Enum):
    """Every classical algorithm the factory knows how to build."""
    CAESAR   = "caesar"
    PLAYFAIR = "playfair"
    VIGENERE = "vigenere"

    @classmethod
    def from_name(cls, name: str) -> "CipherType":
        """Parse a command-line cipher name, e.g. ``"Playfair"``."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown cipher: {name}. "
                f"Available: {[c.value for c in cls]}"
            ) from None
