"""
Baby Jubjub (EIP-2494): twisted Edwards curve a*x^2 + y^2 = 1 + d*x^2*y^2 over the
BN254 scalar field. Point addition, scalar multiplication, membership test and
point compression. Pure Python ints.
"""

from __future__ import annotations

from ..field import PrimeField

# Base field prime (BN254 scalar field)
P = 21888242871839275222246405745257275088548364400416034343698204186575808495617
A = 168700
D = 168696
# Full curve order = 8 * SUB_ORDER
ORDER = 21888242871839275222246405745257275088614511777268538073601725287587578984328
SUB_ORDER = ORDER >> 3

GENERATOR = (
    995203441582195749578291179787384436505546430278305826713579947235728471134,
    5472060717959818805561601436314318772137091100104008585924551046643952123905,
)
# BASE8 = 8 * GENERATOR, generates the prime-order subgroup
BASE8 = (
    5299619240641551281634865583518297030282874472190772894086521144482721001553,
    16950150798460657717958625567821834550301663161624707787222815936182638968203,
)
IDENTITY = (0, 1)

Fr = PrimeField(P)

_SIGN_BIT = 1 << 255


def _to_extended(p: tuple[int, int]) -> tuple[int, int, int, int]:
    return (p[0], p[1], 1, (p[0] * p[1]) % P)


def _from_extended(p: tuple[int, int, int, int]) -> tuple[int, int]:
    zinv = Fr.inv(p[2])
    return (p[0] * zinv % P, p[1] * zinv % P)


def _extended_add(
    p: tuple[int, int, int, int], q: tuple[int, int, int, int]
) -> tuple[int, int, int, int]:
    """Unified addition in extended coordinates (Hisil et al. 2008, general a)."""
    a = p[0] * q[0] % P
    b = p[1] * q[1] % P
    c = D * p[3] * q[3] % P
    d = p[2] * q[2] % P
    e = ((p[0] + p[1]) * (q[0] + q[1]) - a - b) % P
    f = (d - c) % P
    g = (d + c) % P
    h = (b - A * a) % P
    return (e * f % P, g * h % P, f * g % P, e * h % P)


def add_point(p1: tuple[int, int], p2: tuple[int, int]) -> tuple[int, int]:
    """
    Add two affine points.

    Args:
        p1: (x, y) point.
        p2: (x, y) point.

    Returns:
        p1 + p2 as an (x, y) tuple of ints in [0, P).
    """
    beta = p1[0] * p2[1] % P
    gamma = p1[1] * p2[0] % P
    delta = (p1[1] - A * p1[0]) * (p2[0] + p2[1]) % P
    tau = beta * gamma % P
    dtau = D * tau % P
    x = Fr.div(beta + gamma, 1 + dtau)
    y = Fr.div(delta + A * beta - gamma, 1 - dtau)
    return (x, y)


def mul_point_escalar(base: tuple[int, int], e: int) -> tuple[int, int]:
    """
    Scalar multiplication e * base by double-and-add. The scalar is not reduced
    modulo the group order.

    Args:
        base: (x, y) point.
        e: Non-negative integer scalar.

    Returns:
        e * base as an (x, y) tuple.
    """
    if e < 0:
        raise ValueError("scalar must be non-negative")
    q = (0, 1, 1, 0)
    p = _to_extended(base)
    while e > 0:
        if e & 1:
            q = _extended_add(q, p)
        p = _extended_add(p, p)
        e >>= 1
    return _from_extended(q)


def in_curve(p: tuple[int, int]) -> bool:
    """True iff (x, y) satisfies a*x^2 + y^2 = 1 + d*x^2*y^2 (mod P)."""
    x2 = p[0] * p[0] % P
    y2 = p[1] * p[1] % P
    return (A * x2 + y2) % P == (1 + D * x2 * y2) % P


def pack_point(p: tuple[int, int]) -> int:
    """
    Compress a point: little-endian y with bit 255 set when x is "negative"
    (x > P // 2).

    Returns:
        Packed point as an int < 2^256.
    """
    packed = p[1] % P
    if Fr.is_negative(p[0]):
        packed |= _SIGN_BIT
    return packed


def unpack_point(packed: int) -> tuple[int, int] | None:
    """
    Decompress a packed point.

    Args:
        packed: Int produced by pack_point.

    Returns:
        (x, y) tuple, or None if the value encodes no curve point.
    """
    if packed < 0 or packed >= 1 << 256:
        return None
    sign = packed & _SIGN_BIT
    y = packed & (_SIGN_BIT - 1)
    if y >= P:
        return None
    y2 = y * y % P
    den = (A - D * y2) % P
    if den == 0:
        return None
    x = Fr.sqrt(Fr.div(1 - y2, den))
    if x is None:
        return None
    if sign:
        x = Fr.neg(x)
    return (x, y)


__all__: tuple[str, ...] = (
    "A",
    "BASE8",
    "D",
    "Fr",
    "GENERATOR",
    "IDENTITY",
    "ORDER",
    "P",
    "SUB_ORDER",
    "add_point",
    "in_curve",
    "mul_point_escalar",
    "pack_point",
    "unpack_point",
)
