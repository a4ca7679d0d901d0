"""
ChunkedCipherEngine — parallel dispatch, join and ordered merge.
"""

import random
import string
import threading
import time

import pytest

from core.chunk_engine  import ChunkedCipherEngine, dispatch, run_cipher, split_text
from core.cipher_engine import (
    CaesarCipher, Cipher, CipherFactory, CipherMode, ConfigurationError,
    PlayfairCipher, VigenereCipher, WorkerFailure,
)

ENC = CipherMode.ENCRYPT
DEC = CipherMode.DECRYPT


class GatedCipher(Cipher):
    """Lower-cases each chunk, but only once its gate has been opened."""

    cipher_name = "gated"

    def __init__(self, gates):
        self.gates    = gates
        self.finished = []
        self._lock    = threading.Lock()

    def apply_cipher(self, text, mode):
        self.gates[text].wait(timeout=5)
        with self._lock:
            self.finished.append(text)
        return text.lower()


class FailingCipher(Cipher):
    """Raises on any chunk containing an X."""

    cipher_name = "failing"

    def __init__(self):
        self.calls = []

    def apply_cipher(self, text, mode):
        self.calls.append(text)
        if "X" in text:
            raise ValueError(f"cannot handle {text}")
        return text


def _random_text(rng, length):
    return "".join(rng.choice(string.ascii_uppercase) for _ in range(length))

# ── Scenario ──────────────────────────────────────────────────────────────────
def test_helloworld_four_workers_caesar_shift_3():
    cipher = CipherFactory.create("caesar", "3")
    result = ChunkedCipherEngine(workers=4).run(cipher, "HELLOWORLD", ENC)
    assert result == "KHOORZRUOG"
    assert result == cipher.apply_cipher("HELLOWORLD", ENC)

def test_run_cipher_helper():
    assert run_cipher(CaesarCipher("1"), "ABC", ENC, workers=2) == "BCD"

# ── Empty input / more workers than characters ────────────────────────────────
@pytest.mark.parametrize("n", [1, 4, 10])
@pytest.mark.parametrize("name, key", [
    ("caesar", "3"), ("playfair", "KEY"), ("vigenere", "KEY"),
])
def test_empty_input_gives_empty_output(n, name, key):
    cipher = CipherFactory.create(name, key)
    assert ChunkedCipherEngine(workers=n).run(cipher, "", ENC) == ""
    assert ChunkedCipherEngine(workers=n).run(cipher, "", DEC) == ""

def test_more_workers_than_characters_caesar():
    cipher = CaesarCipher("3")
    assert ChunkedCipherEngine(workers=5).run(cipher, "AB", ENC) == cipher.encrypt("AB")

def test_empty_chunks_never_reach_the_cipher():
    gates  = {"AB": threading.Event()}
    gates["AB"].set()
    cipher = GatedCipher(gates)
    assert ChunkedCipherEngine(workers=5).run(cipher, "AB", ENC) == "ab"
    assert cipher.finished == ["AB"]

# ── Round-trip & determinism ──────────────────────────────────────────────────
@pytest.mark.parametrize("n", [1, 2, 3, 4, 8, 13])
@pytest.mark.parametrize("cipher", [CaesarCipher("11"), VigenereCipher("LEMON")])
def test_roundtrip_through_engine(n, cipher):
    text   = _random_text(random.Random(n), 257)
    engine = ChunkedCipherEngine(workers=n)
    assert engine.run(cipher, engine.run(cipher, text, ENC), DEC) == text

@pytest.mark.parametrize("name, key", [
    ("caesar", "3"), ("playfair", "MONARCHY"), ("vigenere", "KEY"),
])
def test_repeated_runs_are_identical(name, key):
    cipher = CipherFactory.create(name, key)
    text   = _random_text(random.Random(7), 5000)
    engine = ChunkedCipherEngine(workers=6)
    outputs = {engine.run(cipher, text, ENC) for _ in range(5)}
    assert len(outputs) == 1

@pytest.mark.parametrize("n", [1, 2, 5, 16])
def test_context_free_cipher_matches_single_pass(n):
    cipher = CaesarCipher("19")
    text   = _random_text(random.Random(3), 1001)
    assert ChunkedCipherEngine(workers=n).run(cipher, text, ENC) == cipher.encrypt(text)

# ── Context-sensitive ciphers (per-chunk behaviour) ───────────────────────────
def test_vigenere_key_stream_restarts_per_chunk():
    cipher = VigenereCipher("LEMON")
    result = ChunkedCipherEngine(workers=2).run(cipher, "ATTACKATDAWN", ENC)
    assert result == cipher.encrypt("ATTACK") + cipher.encrypt("ATDAWN")
    assert result != cipher.encrypt("ATTACKATDAWN")

def test_playfair_pads_each_chunk_independently():
    cipher = PlayfairCipher("MONARCHY")
    result = ChunkedCipherEngine(workers=3).run(cipher, "ABCDEFGHIKL", ENC)
    chunks = [c.text for c in split_text("ABCDEFGHIKL", 3)]
    assert chunks == ["ABC", "DEF", "GHIKL"]
    assert result == "".join(cipher.encrypt(c) for c in chunks)
    assert len(result) == 4 + 4 + 6

# ── Completion order ──────────────────────────────────────────────────────────
@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_output_independent_of_completion_order(seed):
    letters = list("ABCDEFGH")
    order   = letters[:]
    random.Random(seed).shuffle(order)
    gates   = {ch: threading.Event() for ch in letters}
    cipher  = GatedCipher(gates)

    def release_in_order():
        for ch in order:
            before = len(cipher.finished)
            gates[ch].set()
            deadline = time.monotonic() + 5
            while len(cipher.finished) == before and time.monotonic() < deadline:
                time.sleep(0.001)

    threading.Thread(target=release_in_order, daemon=True).start()
    result = ChunkedCipherEngine(workers=8).run(cipher, "ABCDEFGH", ENC)

    assert cipher.finished == order
    assert result == "abcdefgh"

# ── Join & heartbeat ──────────────────────────────────────────────────────────
def test_heartbeat_does_not_end_the_join():
    gates  = {"AB": threading.Event(), "CD": threading.Event()}
    gates["AB"].set()
    cipher = GatedCipher(gates)
    beats  = []

    def on_heartbeat(completed, total):
        beats.append((completed, total))
        if len(beats) == 3:
            gates["CD"].set()

    engine = ChunkedCipherEngine(
        workers=2, heartbeat_interval=0.01, on_heartbeat=on_heartbeat,
    )
    assert engine.run(cipher, "ABCD", ENC) == "abcd"
    assert len(beats) >= 3
    assert all(total == 2 and completed < 2 for completed, total in beats)

def test_raising_heartbeat_does_not_abort_the_join(caplog):
    gates  = {"AB": threading.Event(), "CD": threading.Event()}
    gates["AB"].set()
    cipher = GatedCipher(gates)
    beats  = []

    def on_heartbeat(completed, total):
        beats.append(completed)
        if len(beats) == 2:
            gates["CD"].set()
        raise RuntimeError("display gone")

    engine = ChunkedCipherEngine(
        workers=2, heartbeat_interval=0.01, on_heartbeat=on_heartbeat,
    )
    with caplog.at_level("ERROR", logger="ChunkCipher.Dispatcher"):
        assert engine.run(cipher, "ABCD", ENC) == "abcd"
    assert len(beats) >= 2
    assert "Heartbeat callback failed" in caplog.text

def test_heartbeat_is_logged(caplog):
    gates  = {"AB": threading.Event()}
    cipher = GatedCipher(gates)
    engine = ChunkedCipherEngine(
        workers=1, heartbeat_interval=0.01,
        on_heartbeat=lambda done, total: gates["AB"].set(),
    )
    with caplog.at_level("WARNING", logger="ChunkCipher.Dispatcher"):
        engine.run(cipher, "AB", ENC)
    assert "processing" in caplog.text

def test_dispatch_returns_slots_by_index():
    slots = dispatch(CaesarCipher("1"), split_text("AAABBBCCCD", 3), ENC)
    assert slots == ["BBB", "CCC", "DDDE"]

def test_dispatch_no_chunks():
    assert dispatch(CaesarCipher("1"), [], ENC) == []

# ── Failures ──────────────────────────────────────────────────────────────────
def test_worker_failure_reports_every_failing_chunk():
    cipher = FailingCipher()
    with pytest.raises(WorkerFailure) as excinfo:
        ChunkedCipherEngine(workers=4).run(cipher, "AAXXAAXX", ENC)
    err = excinfo.value
    assert err.failed_indices == [1, 3]
    assert isinstance(err.__cause__, ValueError)
    assert "chunk 1" in str(err) and "chunk 3" in str(err)
    # every worker ran to completion before the failure was raised
    assert len(cipher.calls) == 4

def test_worker_failure_is_logged(caplog):
    with caplog.at_level("ERROR", logger="ChunkCipher.Dispatcher"):
        with pytest.raises(WorkerFailure):
            ChunkedCipherEngine(workers=2).run(FailingCipher(), "XXAA", ENC)
    assert "chunk 0 failed" in caplog.text

@pytest.mark.parametrize("n", [0, -1])
def test_invalid_worker_count_rejected_before_any_work(n):
    cipher = FailingCipher()
    with pytest.raises(ConfigurationError):
        ChunkedCipherEngine(workers=n).run(cipher, "HELLO", ENC)
    assert cipher.calls == []
