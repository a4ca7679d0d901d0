"""
ChunkedCipherEngine — split, apply in parallel, merge in order.
"""

import logging

from config.settings           import Settings
from core.cipher_engine.base   import Cipher
from core.cipher_engine.modes  import CipherMode

from .assembly   import assemble
from .dispatcher import HeartbeatCallback, dispatch
from .partition  import split_text, validate_worker_count

logger = logging.getLogger("ChunkCipher.Engine")


class ChunkedCipherEngine:
    """
    Run a cipher over text on a fixed number of worker threads.

    Parameters
    ----------
    workers : int
        Number of chunks, and of threads. Must be at least 1.
    heartbeat_interval : float
        Seconds between "processing" messages while waiting.
    on_heartbeat : callable | None
        ``callback(completed: int, total: int)`` — called from the
        joining thread at every heartbeat.
    """

    def __init__(
        self,
        workers: int = Settings.DEFAULT_WORKERS,
        heartbeat_interval: float = Settings.HEARTBEAT_INTERVAL,
        on_heartbeat: HeartbeatCallback | None = None,
    ):
        self.workers            = validate_worker_count(workers)
        self.heartbeat_interval = heartbeat_interval
        self._on_heartbeat      = on_heartbeat

    def run(self, cipher: Cipher, text: str, mode: CipherMode) -> str:
        """Return *text* encrypted or decrypted by *cipher*."""
        chunks = split_text(text, self.workers)
        logger.info(
            "Running %s (%s) on %d characters with %d workers",
            cipher.cipher_name, mode.value, len(text), self.workers,
        )
        slots = dispatch(
            cipher, chunks, mode,
            heartbeat_interval=self.heartbeat_interval,
            on_heartbeat=self._on_heartbeat,
        )
        output = assemble(slots)
        logger.info("Assembled %d characters", len(output))
        return output


def run_cipher(cipher: Cipher, text: str, mode: CipherMode,
               workers: int = Settings.DEFAULT_WORKERS) -> str:
    """Convenience wrapper: one engine, one run."""
    return ChunkedCipherEngine(workers).run(cipher, text, mode)
