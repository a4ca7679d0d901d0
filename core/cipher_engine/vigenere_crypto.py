"""
Vigenère polyalphabetic cipher.

Each key letter is a Caesar shift (A=0 … Z=25); the key cycles over
the letters of the text. Non-letters pass through and do not advance
the key.

The key stream restarts at the beginning of every call, so a text
ciphered in chunks differs from the same text ciphered in one pass
unless every chunk length is a multiple of the key length.
"""

import string

from .base   import Cipher
from .errors import InvalidKey
from .modes  import CipherMode

ALPHABET = string.ascii_uppercase


class VigenereCipher(Cipher):
    """Vigenère cipher over the upper-case Latin alphabet."""

    def __init__(self, key: str):
        key = key.strip().upper()
        if not key or not all(ch in ALPHABET for ch in key):
            raise InvalidKey("Vigenère key must be alphabetic.")
        self._key    = key
        self._shifts = tuple(ALPHABET.index(ch) for ch in key)

    @property
    def key(self) -> str:
        return self._key

    def apply_cipher(self, text: str, mode: CipherMode) -> str:
        sign   = 1 if mode is CipherMode.ENCRYPT else -1
        result = []
        k_idx  = 0
        for ch in text:
            pos = ALPHABET.find(ch)
            if pos < 0:
                result.append(ch)
                continue
            shift = self._shifts[k_idx % len(self._shifts)]
            result.append(ALPHABET[(pos + sign * shift) % len(ALPHABET)])
            k_idx += 1
        return "".join(result)

    @property
    def cipher_name(self) -> str:
        return "vigenere"

    def info(self) -> dict:
        base = super().info()
        base["period"] = len(self._key)
        return base
