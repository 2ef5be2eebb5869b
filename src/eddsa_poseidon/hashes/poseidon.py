"""
Poseidon hash over the BN254 scalar field with circomlib parameters (x^5 S-box,
8 full rounds, width-dependent partial rounds, state [0, *inputs], output state[0]).

Round constants and the Cauchy MDS matrix are derived with the Grain LFSR of the
Poseidon reference parameter generator, once per state width.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Sequence

FIELD_MODULUS = (
    21888242871839275222246405745257275088548364400416034343698204186575808495617
)
_FIELD_BITS = FIELD_MODULUS.bit_length()  # 254

ROUNDS_F = 8
# Partial rounds indexed by width t - 2 (t = number of inputs + 1)
ROUNDS_P = (56, 57, 56, 60, 60, 63, 64, 63, 60, 66, 60, 65, 70, 60, 64, 68)
MAX_INPUTS = len(ROUNDS_P)


class _Grain:
    """Self-shrinking Grain LFSR (80-bit state) used by the Poseidon generator."""

    def __init__(self, t: int, rounds_f: int, rounds_p: int) -> None:
        # field = 1 (prime field), sbox = 0 (x^alpha)
        init = (
            f"{1:02b}{0:04b}{_FIELD_BITS:012b}{t:012b}{rounds_f:010b}{rounds_p:010b}"
            + "1" * 30
        )
        state = 0
        for i, bit in enumerate(init):
            if bit == "1":
                state |= 1 << i
        self._state = state
        for _ in range(160):
            self._clock()

    def _clock(self) -> int:
        s = self._state
        bit = ((s >> 62) ^ (s >> 51) ^ (s >> 38) ^ (s >> 23) ^ (s >> 13) ^ s) & 1
        self._state = (s >> 1) | (bit << 79)
        return bit

    def _next_bit(self) -> int:
        while True:
            if self._clock():
                return self._clock()
            self._clock()

    def random_bits(self, n: int) -> int:
        """n output bits read as a big-endian integer."""
        value = 0
        for _ in range(n):
            value = (value << 1) | self._next_bit()
        return value


@lru_cache(maxsize=None)
def _parameters(t: int) -> tuple[tuple[int, ...], tuple[tuple[int, ...], ...]]:
    """(round constants, MDS matrix) for state width t."""
    p = FIELD_MODULUS
    rounds_p = ROUNDS_P[t - 2]
    grain = _Grain(t, ROUNDS_F, rounds_p)

    constants = []
    for _ in range((ROUNDS_F + rounds_p) * t):
        c = grain.random_bits(_FIELD_BITS)
        while c >= p:
            c = grain.random_bits(_FIELD_BITS)
        constants.append(c)

    while True:
        values = [grain.random_bits(_FIELD_BITS) % p for _ in range(2 * t)]
        while len(set(values)) != len(values):
            values = [grain.random_bits(_FIELD_BITS) % p for _ in range(2 * t)]
        xs, ys = values[:t], values[t:]
        if any((x + y) % p == 0 for x in xs for y in ys):
            continue
        mds = tuple(
            tuple(pow(x + y, p - 2, p) for y in ys) for x in xs
        )
        return tuple(constants), mds


def poseidon(inputs: Sequence[int]) -> int:
    """
    Poseidon hash of 1 to 16 field elements (circomlib compatible).

    Args:
        inputs: Ints in [0, FIELD_MODULUS).

    Returns:
        Field element (int).
    """
    n = len(inputs)
    if n < 1 or n > MAX_INPUTS:
        raise ValueError(f"poseidon takes 1 to {MAX_INPUTS} inputs, got {n}")
    p = FIELD_MODULUS
    for x in inputs:
        if isinstance(x, bool) or not isinstance(x, int) or not 0 <= x < p:
            raise ValueError("poseidon inputs must be field elements")
    t = n + 1
    rounds_p = ROUNDS_P[t - 2]
    constants, mds = _parameters(t)
    half_f = ROUNDS_F // 2

    state = [0, *inputs]
    for r in range(ROUNDS_F + rounds_p):
        base = r * t
        state = [(x + constants[base + i]) % p for i, x in enumerate(state)]
        if r < half_f or r >= half_f + rounds_p:
            state = [pow(x, 5, p) for x in state]
        else:
            state[0] = pow(state[0], 5, p)
        state = [sum(m * x for m, x in zip(row, state)) % p for row in mds]
    return state[0]


def poseidon5(inputs: Sequence[int]) -> int:
    """Poseidon hash of exactly 5 field elements."""
    if len(inputs) != 5:
        raise ValueError("poseidon5 takes exactly 5 inputs")
    return poseidon(inputs)


__all__: tuple[str, ...] = (
    "FIELD_MODULUS",
    "MAX_INPUTS",
    "poseidon",
    "poseidon5",
)
