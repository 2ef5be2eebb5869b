"""
Input normalisation for every public entry point (one function per entity) and
little-endian int/bytes conversion.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence

from .curves.babyjubjub import P
from .errors import (
    InvalidMessage,
    InvalidPrivateKey,
    InvalidPublicKey,
    InvalidSignature,
    InvalidType,
)

_DECIMAL_RE = re.compile(r"[0-9]+")
_HEX_RE = re.compile(r"0[xX][0-9a-fA-F]+")

PRIVATE_KEY_BYTES = 32


def le_bytes_to_int(data: bytes) -> int:
    return int.from_bytes(data, "little")


def le_int_to_bytes(value: int, size: int) -> bytes:
    """Little-endian encoding of value in exactly size bytes (OverflowError if it does not fit)."""
    return value.to_bytes(size, "little")


def is_stringified_int(value: object) -> bool:
    """True iff value is a string of decimal digits."""
    return isinstance(value, str) and _DECIMAL_RE.fullmatch(value) is not None


def is_hexadecimal(value: object) -> bool:
    """True iff value is a 0x-prefixed hex string."""
    return isinstance(value, str) and _HEX_RE.fullmatch(value) is not None


def _parse_int(value: object) -> int | None:
    """int from a native int or a decimal/hex string; None for anything else."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if is_stringified_int(value):
        # CPython caps decimal conversion length (sys.set_int_max_str_digits)
        try:
            return int(value, 10)
        except ValueError:
            return None
    if is_hexadecimal(value):
        return int(value[2:], 16)
    return None


def normalize_private_key(private_key: object) -> bytes:
    """
    Private key as the byte buffer fed to BLAKE-512.

    Bytes are used verbatim; ints and numeric strings become 32 little-endian
    bytes; other text is UTF-8 encoded.

    Raises:
        InvalidPrivateKey: Unsupported type, negative or oversized value, or a
            buffer that is empty or longer than 32 bytes.
    """
    if isinstance(private_key, (bytes, bytearray, memoryview)):
        key = bytes(private_key)
    elif isinstance(private_key, (int, str)) and not isinstance(private_key, bool):
        value = _parse_int(private_key)
        if value is None:
            key = private_key.encode("utf-8")
        elif 0 <= value < 1 << (8 * PRIVATE_KEY_BYTES):
            key = le_int_to_bytes(value, PRIVATE_KEY_BYTES)
        else:
            raise InvalidPrivateKey("private key out of range")
    else:
        raise InvalidPrivateKey(
            f"unsupported private key type: {type(private_key).__name__}"
        )
    if not 0 < len(key) <= PRIVATE_KEY_BYTES:
        raise InvalidPrivateKey(
            f"private key must be 1 to {PRIVATE_KEY_BYTES} bytes, got {len(key)}"
        )
    return key


def normalize_message(message: object) -> int:
    """
    Message as a field element.

    Accepts an int, a decimal or 0x-hex string, or big-endian bytes.

    Raises:
        InvalidMessage: Unsupported type or value outside [0, p).
    """
    if isinstance(message, (bytes, bytearray, memoryview)):
        value = int.from_bytes(bytes(message), "big")
    else:
        value = _parse_int(message)
    if value is None:
        raise InvalidMessage(f"unsupported message type: {type(message).__name__}")
    if not 0 <= value < P:
        raise InvalidMessage("message must be in [0, p)")
    return value


def _normalize_coordinate(value: object, error: type[Exception]) -> int:
    coord = _parse_int(value)
    if coord is None or not 0 <= coord < P:
        raise error("point coordinate must be an int in [0, p)")
    return coord


def normalize_point(
    point: object, error: type[Exception] = InvalidPublicKey
) -> tuple[int, int]:
    """
    (x, y) of ints from a 2-sequence of ints or numeric strings. Curve
    membership is not checked here.

    Raises:
        error (InvalidPublicKey by default): Wrong shape or coordinate.
    """
    if isinstance(point, (str, bytes, bytearray)) or not isinstance(point, Sequence):
        raise error("point must be a sequence (x, y)")
    if len(point) != 2:
        raise error("point must have exactly two coordinates")
    return (
        _normalize_coordinate(point[0], error),
        _normalize_coordinate(point[1], error),
    )


def normalize_signature(signature: object) -> tuple[tuple[int, int], int]:
    """
    (R8, S) of ints from a Signature, an (R8, S) pair, or a mapping with
    "R8" and "S" keys. The range of S is not checked here.

    Raises:
        InvalidSignature: Wrong shape or ill-typed field.
    """
    if isinstance(signature, Mapping):
        if "R8" not in signature or "S" not in signature:
            raise InvalidSignature("signature must have R8 and S")
        r8, s = signature["R8"], signature["S"]
    elif isinstance(signature, Sequence) and not isinstance(
        signature, (str, bytes, bytearray)
    ):
        if len(signature) != 2:
            raise InvalidSignature("signature must be a pair (R8, S)")
        r8, s = signature
    else:
        raise InvalidSignature(
            f"unsupported signature type: {type(signature).__name__}"
        )
    point = normalize_point(r8, InvalidSignature)
    value = _parse_int(s)
    if value is None:
        raise InvalidSignature("S must be an int or numeric string")
    return point, value


def normalize_packed_point(packed: object) -> int:
    """
    Packed public key as an int.

    Raises:
        InvalidType: Not an int, decimal string or 0x-hex string.
    """
    value = _parse_int(packed)
    if value is None:
        raise InvalidType(f"invalid packed public key type: {type(packed).__name__}")
    return value


__all__: tuple[str, ...] = (
    "PRIVATE_KEY_BYTES",
    "is_hexadecimal",
    "is_stringified_int",
    "le_bytes_to_int",
    "le_int_to_bytes",
    "normalize_message",
    "normalize_packed_point",
    "normalize_point",
    "normalize_private_key",
    "normalize_signature",
)
