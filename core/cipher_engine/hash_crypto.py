"""
Digests used to identify keys and outputs without revealing them.
"""

from cryptography.hazmat.primitives import hashes


class HashCrypto:
    """Static SHA-256 helpers for log fingerprints and output checks."""

    @staticmethod
    def sha256(data: bytes) -> bytes:
        d = hashes.Hash(hashes.SHA256())
        d.update(data)
        return d.finalize()

    @staticmethod
    def sha256_hex(text: str) -> str:
        return HashCrypto.sha256(text.encode("utf-8")).hex()

    @staticmethod
    def fingerprint(key: str, length: int = 12) -> str:
        """Short, log-safe identifier for a cipher key."""
        return HashCrypto.sha256_hex(key)[:length]
