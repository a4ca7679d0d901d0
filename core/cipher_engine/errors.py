"""
Exception hierarchy shared by the cipher and chunk engines.
"""


class ChunkCipherError(Exception):
    """Base class for every error raised by ChunkCipher."""


class ConfigurationError(ChunkCipherError, ValueError):
    """Invalid engine configuration, e.g. a worker count below one."""


class CipherConstructionError(ChunkCipherError, ValueError):
    """A cipher could not be built from the supplied parameters."""


class InvalidKey(CipherConstructionError):
    """The key is malformed for the chosen algorithm."""


class WorkerFailure(ChunkCipherError, RuntimeError):
    """
    One or more workers raised while transforming their chunk.

    ``failures`` holds ``(chunk_index, exception)`` pairs in index
    order; the first exception is also chained as ``__cause__``.
    """

    def __init__(self, failures: list[tuple[int, BaseException]]):
        self.failures = list(failures)
        details = ", ".join(
            f"chunk {index}: {type(exc).__name__}: {exc}"
            for index, exc in self.failures
        )
        super().__init__(
            f"{len(self.failures)} worker(s) failed ({details})"
        )

    @property
    def failed_indices(self) -> list[int]:
        return [index for index, _ in self.failures]
