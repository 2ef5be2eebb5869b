"""
Benchmark EdDSA-Poseidon: key derivation, sign, verify, Poseidon, pack/unpack.
Reports time per call and peak memory (tracemalloc).

Run from repo root:

  PYTHONPATH=src python benchmarks/signing.py

Or after pip install -e .:

  python benchmarks/signing.py
"""

from __future__ import annotations

import os
import sys
import time
import tracemalloc

_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
_src = os.path.join(_root, "src")
if _src not in sys.path:
    sys.path.insert(0, _src)

from eddsa_poseidon import (
    derive_public_key,
    pack_public_key,
    poseidon5,
    sign_message,
    unpack_public_key,
    verify_signature,
)

N_TIME = 50
N_MEM = 20
PRIV = bytes(31) + bytes([1])
MSG = 2


def _time_per_call(fn, *args, n: int = N_TIME) -> float:
    for _ in range(3):
        fn(*args)
    start = time.perf_counter()
    for _ in range(n):
        fn(*args)
    return (time.perf_counter() - start) / n


def _peak_kb(fn, *args, n: int = N_MEM) -> float:
    tracemalloc.start()
    if hasattr(tracemalloc, "reset_peak"):
        tracemalloc.reset_peak()
    for _ in range(n):
        fn(*args)
    _, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    return peak / 1024.0


def main() -> None:
    # Warms the Poseidon parameter cache as a side effect
    pub = derive_public_key(PRIV)
    sig = sign_message(PRIV, MSG)
    packed = pack_public_key(pub)
    assert verify_signature(MSG, sig, pub)
    print("Benchmark: EdDSA-Poseidon (pure Python)")
    print(f"  n = {N_TIME} (time), {N_MEM} (memory)")
    print()

    cases = [
        ("derive_public_key", derive_public_key, (PRIV,)),
        ("sign_message", sign_message, (PRIV, MSG)),
        ("verify_signature", verify_signature, (MSG, sig, pub)),
        ("poseidon5", poseidon5, ([1, 2, 3, 4, 5],)),
        ("pack_public_key", pack_public_key, (pub,)),
        ("unpack_public_key", unpack_public_key, (packed,)),
    ]
    for name, fn, args in cases:
        t = _time_per_call(fn, *args) * 1000
        m = _peak_kb(fn, *args)
        print(f"  {name:<20} {t:9.4f} ms  peak {m:8.2f} KiB")


if __name__ == "__main__":
    main()
