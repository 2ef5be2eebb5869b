"""Elliptic curves: Baby Jubjub (EIP-2494)."""

from .babyjubjub import (BASE8, GENERATOR, IDENTITY, ORDER, SUB_ORDER, Fr,
                         add_point, in_curve, mul_point_escalar, pack_point,
                         unpack_point)

__all__: tuple[str, ...] = (
    "BASE8",
    "Fr",
    "GENERATOR",
    "IDENTITY",
    "ORDER",
    "SUB_ORDER",
    "add_point",
    "in_curve",
    "mul_point_escalar",
    "pack_point",
    "unpack_point",
)
