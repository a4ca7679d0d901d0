"""
Playfair digraph cipher.

Grid:   5×5, key letters first (J merged into I, duplicates dropped),
        then the rest of the alphabet.
Encrypt:
    * J becomes I
    * a repeated letter inside a digraph is split with X
      (Q if the repeated letter is X itself)
    * an odd-length text is padded with Z
Decrypt reverses the grid moves only; fillers and padding remain,
and an unpaired trailing letter is passed through.

Every call pairs letters from the start of its own text, so chunks of
odd length are padded independently.
"""

import string

from .base   import Cipher
from .errors import InvalidKey
from .modes  import CipherMode

GRID_SIZE = 5


class PlayfairCipher(Cipher):
    """Playfair cipher with a keyed 5×5 square."""

    def __init__(self, key: str = ""):
        key = key.strip().upper()
        if not all(ch in string.ascii_uppercase for ch in key):
            raise InvalidKey(
                f"Playfair key must contain only letters, got '{key}'"
            )
        self._key = key

        grid: list[str] = []
        for ch in (key + string.ascii_uppercase).replace("J", "I"):
            if ch not in grid:
                grid.append(ch)
        self._grid = "".join(grid)
        # letter -> (row, col) and back
        self._coords = {
            ch: divmod(i, GRID_SIZE) for i, ch in enumerate(self._grid)
        }

    @property
    def grid(self) -> list[str]:
        """Rows of the square, top to bottom."""
        return [
            self._grid[r * GRID_SIZE:(r + 1) * GRID_SIZE]
            for r in range(GRID_SIZE)
        ]

    def _letter_at(self, row: int, col: int) -> str:
        return self._grid[(row % GRID_SIZE) * GRID_SIZE + col % GRID_SIZE]

    @staticmethod
    def _letters(text: str) -> list[str]:
        return [ch for ch in text.replace("J", "I")
                if ch in string.ascii_uppercase]

    @classmethod
    def _prepare(cls, text: str) -> str:
        """Apply the J, repeated-letter and padding rules."""
        letters = cls._letters(text)
        out: list[str] = []
        i = 0
        while i < len(letters):
            first = letters[i]
            out.append(first)
            if i + 1 < len(letters) and letters[i + 1] != first:
                out.append(letters[i + 1])
                i += 2
            else:
                if i + 1 < len(letters):
                    out.append("Q" if first == "X" else "X")
                i += 1
        if len(out) % 2:
            out.append("Z")
        return "".join(out)

    def apply_cipher(self, text: str, mode: CipherMode) -> str:
        if mode is CipherMode.ENCRYPT:
            text, step = self._prepare(text), 1
        else:
            text, step = "".join(self._letters(text)), -1

        result = []
        for i in range(0, len(text) - 1, 2):
            r1, c1 = self._coords[text[i]]
            r2, c2 = self._coords[text[i + 1]]
            if r1 == r2:
                result.append(self._letter_at(r1, c1 + step))
                result.append(self._letter_at(r2, c2 + step))
            elif c1 == c2:
                result.append(self._letter_at(r1 + step, c1))
                result.append(self._letter_at(r2 + step, c2))
            else:
                result.append(self._letter_at(r1, c2))
                result.append(self._letter_at(r2, c1))
        # an unpaired trailing letter (odd-length ciphertext) is kept as is
        if len(text) % 2:
            result.append(text[-1])
        return "".join(result)

    @property
    def cipher_name(self) -> str:
        return "playfair"

    def info(self) -> dict:
        base = super().info()
        base["grid"] = self.grid
        return base
