"""
ChunkCipher — Cipher Verification Script

Run this to verify every cipher works correctly through the chunk engine:
    python verify_ciphers.py
"""

import os
import random
import string
import sys
import time

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from core.cipher_engine import CipherFactory, CipherMode, HashCrypto
from core.chunk_engine  import ChunkedCipherEngine

TEST_KEYS = {
    "caesar":   "7",
    "playfair": "PLAYFAIREXAMPLE",
    "vigenere": "LEMON",
}
WORKER_COUNTS = (1, 2, 4, 7, 16)


def main():
    print("╔══════════════════════════════════════════════════╗")
    print("║     ChunkCipher — Cipher Verification Suite      ║")
    print("╚══════════════════════════════════════════════════╝")
    print()

    rng = random.Random(1553)
    test_messages = [
        "HELLOWORLD",
        "",                                                  # empty
        "A",                                                 # shorter than N
        "Z" * 1_000,
        "".join(rng.choice(string.ascii_uppercase)
                for _ in range(100_000)),                    # 100 K letters
    ]
    all_pass = True

    # ── Test 1: Encrypt → Decrypt through the engine ─────────────
    print("━━━ Test 1: Encrypt → Decrypt Round-Trip ━━━━━━━━━━")
    for name in CipherFactory.list_ciphers():
        cipher = CipherFactory.create(name, TEST_KEYS[name])
        if name == "playfair":
            print(f"  ➖ {name:<12s}  skipped (fillers are not removed)")
            continue
        ok = True
        for n in WORKER_COUNTS:
            engine = ChunkedCipherEngine(workers=n)
            for msg in test_messages:
                encrypted = engine.run(cipher, msg, CipherMode.ENCRYPT)
                if engine.run(cipher, encrypted, CipherMode.DECRYPT) != msg:
                    ok = False
        print(f"  {'✅' if ok else '❌'} {name:<12s}  "
              f"workers={','.join(map(str, WORKER_COUNTS))}")
        all_pass &= ok

    print()

    # ── Test 2: Determinism ──────────────────────────────────────
    print("━━━ Test 2: Repeated Runs Are Identical ━━━━━━━━━━━")
    for name in CipherFactory.list_ciphers():
        cipher  = CipherFactory.create(name, TEST_KEYS[name])
        engine  = ChunkedCipherEngine(workers=8)
        digests = {
            HashCrypto.sha256_hex(
                engine.run(cipher, test_messages[-1], CipherMode.ENCRYPT)
            )
            for _ in range(5)
        }
        ok = len(digests) == 1
        print(f"  {'✅' if ok else '❌'} {name:<12s}  "
              f"sha256={next(iter(digests))[:16]}…")
        all_pass &= ok

    print()

    # ── Test 3: Context-free ciphers match a single pass ─────────
    print("━━━ Test 3: Chunked == Single Pass ━━━━━━━━━━━━━━━━")
    for name in CipherFactory.list_ciphers():
        cipher = CipherFactory.create(name, TEST_KEYS[name])
        whole  = cipher.apply_cipher(test_messages[-1], CipherMode.ENCRYPT)
        chunked = ChunkedCipherEngine(workers=7).run(
            cipher, test_messages[-1], CipherMode.ENCRYPT
        )
        if cipher.context_free:
            ok = whole == chunked
            print(f"  {'✅' if ok else '❌'} {name:<12s}  identical")
            all_pass &= ok
        else:
            same = "identical" if whole == chunked else "differs (expected)"
            print(f"  ➖ {name:<12s}  {same}")

    print()

    # ── Test 4: Benchmark ────────────────────────────────────────
    print("━━━ Test 4: Performance Benchmark (100 K letters) ━━")
    data = test_messages[-1]
    for name in CipherFactory.list_ciphers():
        cipher = CipherFactory.create(name, TEST_KEYS[name])
        for n in (1, 4):
            engine = ChunkedCipherEngine(workers=n)
            t0 = time.perf_counter()
            engine.run(cipher, data, CipherMode.ENCRYPT)
            elapsed = (time.perf_counter() - t0) * 1000
            print(f"  {name:<12s}  workers={n:<2d}  {elapsed:>8.1f}ms")

    print()
    print("━━━ Summary ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━")
    print(f"  Total ciphers tested: {len(CipherFactory.list_ciphers())}")
    if all_pass:
        print("  Result:               🎉 ALL TESTS PASSED")
    else:
        print("  Result:               ⚠️  SOME TESTS FAILED")
    print()
    return 0 if all_pass else 1


if __name__ == "__main__":
    sys.exit(main())
