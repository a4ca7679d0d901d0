"""
Caesar cipher — fixed alphabetic shift.

Key:   string of decimal digits (empty = shift of 0)
Shift: key value mod 26

Each letter is handled on its own, so splitting the text into chunks
never changes the result.
"""

import string

from .base   import Cipher
from .errors import InvalidKey
from .modes  import CipherMode

ALPHABET = string.ascii_uppercase


class CaesarCipher(Cipher):
    """Shift every letter a fixed number of places along the alphabet."""

    def __init__(self, key: str | int = ""):
        if isinstance(key, int):
            shift = key
        else:
            key = key.strip()
            if key and not (key.isascii() and key.isdigit()):
                raise InvalidKey(
                    f"Caesar key must be a non-negative integer, got '{key}'"
                )
            shift = int(key) if key else 0
        self._shift = shift % len(ALPHABET)

    @property
    def shift(self) -> int:
        return self._shift

    def apply_cipher(self, text: str, mode: CipherMode) -> str:
        shift = self._shift if mode is CipherMode.ENCRYPT else -self._shift
        result = []
        for ch in text:
            pos = ALPHABET.find(ch)
            if pos < 0:
                result.append(ch)
            else:
                result.append(ALPHABET[(pos + shift) % len(ALPHABET)])
        return "".join(result)

    @property
    def cipher_name(self) -> str:
        return "caesar"

    @property
    def context_free(self) -> bool:
        return True

    def info(self) -> dict:
        base = super().info()
        base["shift"] = self._shift
        return base
