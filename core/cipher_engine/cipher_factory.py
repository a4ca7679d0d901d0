"""
CipherFactory — unified cipher creation and discovery.

Usage:
    cipher = CipherFactory.create(CipherType.VIGENERE, "LEMON")
    encrypted = cipher.apply_cipher("ATTACKATDAWN", CipherMode.ENCRYPT)

    # List all available ciphers
    for name in CipherFactory.list_ciphers():
        print(CipherFactory.get_info(name))
"""

import logging

from .base            import Cipher
from .caesar_crypto   import CaesarCipher
from .hash_crypto     import HashCrypto
from .modes           import CipherType
from .playfair_crypto import PlayfairCipher
from .vigenere_crypto import VigenereCipher

logger = logging.getLogger("ChunkCipher.CipherFactory")


class CipherFactory:
    """
    Create any supported cipher by type or command-line name.

    The factory is the only place a key is validated: a malformed key
    raises ``InvalidKey`` here, before any text is processed.
    """

    # ── Registry ─────────────────────────────────────────────────
    _REGISTRY: dict[CipherType, dict] = {
        CipherType.CAESAR: {
            "class":    CaesarCipher,
            "key":      "decimal shift (empty = no shift)",
            "category": "Monoalphabetic substitution",
            "chunking": "Exact (context-free)",
        },
        CipherType.PLAYFAIR: {
            "class":    PlayfairCipher,
            "key":      "letters only (empty = plain square)",
            "category": "Digraph substitution",
            "chunking": "Per-chunk pairing and padding",
        },
        CipherType.VIGENERE: {
            "class":    VigenereCipher,
            "key":      "one or more letters",
            "category": "Polyalphabetic substitution",
            "chunking": "Key stream restarts per chunk",
        },
    }

    # ── Factory method ───────────────────────────────────────────

    @classmethod
    def create(cls, cipher_type: CipherType | str, key: str = "") -> Cipher:
        """
        Create a cipher instance.

        Parameters
        ----------
        cipher_type : CipherType | str
            Algorithm to build, as an enum or its command-line name.
        key : str
            Raw key text; each algorithm validates its own format.

        Returns
        -------
        Cipher
            Ready-to-use, immutable cipher instance.

        Raises
        ------
        InvalidKey
            If *key* is malformed for the chosen algorithm.
        """
        cipher_type = cls._resolve(cipher_type)
        info   = cls._REGISTRY[cipher_type]
        cipher = info["class"](key)

        logger.debug(
            "Created cipher: %s (key fingerprint=%s)",
            cipher.cipher_name, HashCrypto.fingerprint(key),
        )
        return cipher

    @classmethod
    def _resolve(cls, cipher_type: CipherType | str) -> CipherType:
        if isinstance(cipher_type, str):
            cipher_type = CipherType.from_name(cipher_type)
        if cipher_type not in cls._REGISTRY:
            raise ValueError(
                f"Unknown cipher: {cipher_type}. "
                f"Available: {cls.list_ciphers()}"
            )
        return cipher_type

    # ── Discovery ────────────────────────────────────────────────

    @classmethod
    def list_ciphers(cls) -> list[str]:
        """Return all registered cipher names in command-line form."""
        return [t.value for t in cls._REGISTRY]

    @classmethod
    def get_info(cls, cipher_type: CipherType | str) -> dict:
        """Return metadata for a cipher."""
        cipher_type = cls._resolve(cipher_type)
        info = cls._REGISTRY[cipher_type]
        return {
            "name":     cipher_type.value,
            "key":      info["key"],
            "category": info["category"],
            "chunking": info["chunking"],
        }

    @classmethod
    def get_all_info(cls) -> list[dict]:
        return [cls.get_info(name) for name in cls.list_ciphers()]

    @classmethod
    def is_available(cls, cipher_name: str) -> bool:
        try:
            cls._resolve(cipher_name)
        except ValueError:
            return False
        return True
