"""
Scatter/gather execution of a cipher over a fixed pool of workers.

Each chunk is submitted as its own task to a ThreadPoolExecutor with
exactly one thread per chunk. The join is a single all-of wait over
every future; the heartbeat timeout only decides how often a
"processing" message is emitted, never whether the wait is over.

Workers share the cipher (immutable) and read their own chunk; each
future is the only writer of its result, and the executor makes that
result visible to the joining thread.
"""

import logging
from concurrent.futures import (
    ALL_COMPLETED, Future, ThreadPoolExecutor, wait,
)
from typing import Callable

from config.settings             import Settings
from core.cipher_engine.base     import Cipher
from core.cipher_engine.errors   import WorkerFailure
from core.cipher_engine.modes    import CipherMode

from .partition import TextChunk

logger = logging.getLogger("ChunkCipher.Dispatcher")

HeartbeatCallback = Callable[[int, int], None]


def _cipher_chunk(cipher: Cipher, chunk: TextChunk,
                  mode: CipherMode) -> str:
    if not chunk.text:
        return ""
    result = cipher.apply_cipher(chunk.text, mode)
    logger.debug(
        "Chunk %d: %d -> %d characters",
        chunk.index, len(chunk.text), len(result),
    )
    return result


def dispatch(
    cipher: Cipher,
    chunks: list[TextChunk],
    mode: CipherMode,
    heartbeat_interval: float = Settings.HEARTBEAT_INTERVAL,
    on_heartbeat: HeartbeatCallback | None = None,
) -> list[str]:
    """
    Apply *cipher* to every chunk in parallel and return the results
    as a list indexed by chunk index.

    Blocks until all workers have finished. If any worker raised,
    ``WorkerFailure`` lists every failing chunk and no results are
    returned.
    """
    total = len(chunks)
    if total == 0:
        return []

    with ThreadPoolExecutor(
        max_workers=total,
        thread_name_prefix=Settings.THREAD_NAME_PREFIX,
    ) as pool:
        futures: dict[Future, int] = {
            pool.submit(_cipher_chunk, cipher, chunk, mode): chunk.index
            for chunk in chunks
        }

        pending = set(futures)
        while pending:
            done, pending = wait(
                pending,
                timeout=heartbeat_interval,
                return_when=ALL_COMPLETED,
            )
            if pending:
                completed = total - len(pending)
                logger.warning(
                    "processing… %d/%d chunks complete", completed, total
                )
                if on_heartbeat is not None:
                    try:
                        on_heartbeat(completed, total)
                    except Exception:
                        logger.exception("Heartbeat callback failed")

    slots: list[str | None] = [None] * total
    failures: list[tuple[int, BaseException]] = []
    for future, index in futures.items():
        exc = future.exception()
        if exc is not None:
            failures.append((index, exc))
        else:
            slots[index] = future.result()

    if failures:
        failures.sort(key=lambda f: f[0])
        for index, exc in failures:
            logger.error("Worker for chunk %d failed: %s", index, exc)
        raise WorkerFailure(failures) from failures[0][1]

    return slots
