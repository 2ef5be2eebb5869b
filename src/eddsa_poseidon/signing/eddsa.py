"""
EdDSA over Baby Jubjub with Poseidon as the challenge hash and BLAKE-512 for key
expansion. Compatible with circomlib / zk-kit eddsa-poseidon.

The secret scalar is derived as in RFC 8032 5.1.5 steps 1-3 and then divided by
the cofactor, so that the public key is (s >> 3) * Base8, which is the form the
fixed-base multiplication in the matching circuits expects.
"""

from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass, field
from typing import NamedTuple, Union

from ..curves.babyjubjub import (
    BASE8,
    SUB_ORDER,
    Fr,
    add_point,
    in_curve,
    mul_point_escalar,
    pack_point,
    unpack_point,
)
from ..errors import EdDSAPoseidonError, InvalidPublicKey
from ..field import PrimeField
from ..hashes import blake512, poseidon5
from ..utils import (
    PRIVATE_KEY_BYTES,
    le_bytes_to_int,
    le_int_to_bytes,
    normalize_message,
    normalize_packed_point,
    normalize_point,
    normalize_private_key,
    normalize_signature,
)

logger = logging.getLogger(__name__)

PrivateKey = Union[bytes, bytearray, int, str]
Message = Union[int, str, bytes]
Point = tuple[str, str]

# Scalars are reduced modulo the order of Base8
_SUBGROUP = PrimeField(SUB_ORDER)
_COFACTOR = 8


class Signature(NamedTuple):
    """EdDSA signature: commitment point R8 and response S, as decimal strings."""

    R8: Point
    S: str

    def to_dict(self) -> dict[str, object]:
        """JSON-ready form {"R8": [x, y], "S": s}."""
        return {"R8": [self.R8[0], self.R8[1]], "S": self.S}


def _prune_buffer(buff: bytes) -> bytes:
    """Clear the 3 low bits and the top bit, set the second-highest bit (RFC 8032 5.1.5)."""
    pruned = bytearray(buff)
    pruned[0] &= 0xF8
    pruned[31] &= 0x7F
    pruned[31] |= 0x40
    return bytes(pruned)


def _expand_private_key(private_key: object) -> tuple[int, bytes]:
    """Pruned (unshifted) scalar s and the 32-byte nonce prefix."""
    h = blake512(normalize_private_key(private_key))
    return le_bytes_to_int(_prune_buffer(h[:32])), h[32:64]


def _to_strings(point: tuple[int, int]) -> Point:
    return (str(point[0]), str(point[1]))


def derive_secret_scalar(private_key: PrivateKey) -> str:
    """
    Secret scalar for a private key: BLAKE-512, low 32 bytes, pruned, read as a
    little-endian int and shifted right by 3.

    Args:
        private_key: Bytes (up to 32), int, numeric string or text.

    Returns:
        Decimal string of the scalar.

    Raises:
        InvalidPrivateKey: If the key cannot be normalised.
    """
    s, _ = _expand_private_key(private_key)
    return str(s >> 3)


def derive_public_key(private_key: PrivateKey) -> Point:
    """
    Public key secret_scalar * Base8.

    Returns:
        (x, y) as decimal strings.

    Raises:
        InvalidPrivateKey: If the key cannot be normalised.
    """
    s = int(derive_secret_scalar(private_key))
    return _to_strings(mul_point_escalar(BASE8, s))


def sign_message(private_key: PrivateKey, message: Message) -> Signature:
    """
    Deterministic EdDSA-Poseidon signature.

    Args:
        private_key: Bytes (up to 32), int, numeric string or text.
        message: Field element (int, numeric string or big-endian bytes).

    Returns:
        Signature with R8 = r * Base8 and S = r + H(R8, A, m) * s mod subOrder.

    Raises:
        InvalidPrivateKey: If the key cannot be normalised.
        InvalidMessage: If the message is not in [0, p).
    """
    s, prefix = _expand_private_key(private_key)
    m = normalize_message(message)

    a = mul_point_escalar(BASE8, s >> 3)
    r = _SUBGROUP.e(
        le_bytes_to_int(blake512(prefix + le_int_to_bytes(m, PRIVATE_KEY_BYTES)))
    )
    r8 = mul_point_escalar(BASE8, r)
    hm = poseidon5([r8[0], r8[1], a[0], a[1], m])
    S = _SUBGROUP.add(r, _SUBGROUP.mul(hm, s))
    return Signature(R8=_to_strings(r8), S=str(S))


def verify_signature(message: object, signature: object, public_key: object) -> bool:
    """
    Verify an EdDSA-Poseidon signature: S * Base8 == R8 + (8 * hm) * A.

    Malformed input of any kind yields False; this function does not raise on
    bad input.

    Args:
        message: Field element that was signed.
        signature: Signature, (R8, S) pair or {"R8": ..., "S": ...} mapping.
        public_key: (x, y) point.

    Returns:
        True iff the signature is valid for message and public_key.
    """
    try:
        a = normalize_point(public_key)
    except EdDSAPoseidonError as e:
        logger.debug("signature rejected: bad public key: %s", e)
        return False
    if not in_curve(a):
        logger.debug("signature rejected: public key not on curve")
        return False
    try:
        r8, s = normalize_signature(signature)
    except EdDSAPoseidonError as e:
        logger.debug("signature rejected: bad signature: %s", e)
        return False
    if not in_curve(r8):
        logger.debug("signature rejected: R8 not on curve")
        return False
    if not 0 <= s < SUB_ORDER:
        logger.debug("signature rejected: S out of range")
        return False
    try:
        m = normalize_message(message)
    except EdDSAPoseidonError as e:
        logger.debug("signature rejected: bad message: %s", e)
        return False

    hm = poseidon5([r8[0], r8[1], a[0], a[1], m])
    left = mul_point_escalar(BASE8, s)
    right = add_point(r8, mul_point_escalar(a, _COFACTOR * hm))
    return Fr.eq(left[0], right[0]) and Fr.eq(left[1], right[1])


def pack_public_key(public_key: object) -> str:
    """
    Compressed form of a public key.

    Returns:
        Packed point as a decimal string.

    Raises:
        InvalidPublicKey: Malformed or off-curve point.
    """
    point = normalize_point(public_key)
    if not in_curve(point):
        raise InvalidPublicKey("public key is not on the curve")
    return str(pack_point(point))


def unpack_public_key(packed_public_key: int | str) -> Point:
    """
    Public key from its compressed form.

    Args:
        packed_public_key: Int, decimal string or 0x-hex string.

    Returns:
        (x, y) as decimal strings.

    Raises:
        InvalidType: Unsupported argument type.
        InvalidPublicKey: Value does not decode to a curve point.
    """
    point = unpack_point(normalize_packed_point(packed_public_key))
    if point is None:
        raise InvalidPublicKey("packed public key does not decode to a curve point")
    return _to_strings(point)


@dataclass(frozen=True)
class EdDSAPoseidon:
    """
    Signing identity: a private key with its derived secret scalar, public key
    and packed public key. A random 32-byte key is drawn when none is given.
    """

    private_key: PrivateKey = field(
        default_factory=lambda: secrets.token_bytes(PRIVATE_KEY_BYTES), repr=False
    )
    secret_scalar: str = field(init=False, repr=False)
    public_key: Point = field(init=False)
    packed_public_key: str = field(init=False)

    def __post_init__(self) -> None:
        if isinstance(self.private_key, (bytearray, memoryview)):
            object.__setattr__(self, "private_key", bytes(self.private_key))
        object.__setattr__(
            self, "secret_scalar", derive_secret_scalar(self.private_key)
        )
        object.__setattr__(self, "public_key", derive_public_key(self.private_key))
        object.__setattr__(
            self, "packed_public_key", pack_public_key(self.public_key)
        )

    def sign(self, message: Message) -> Signature:
        return sign_message(self.private_key, message)

    def verify(self, message: object, signature: object) -> bool:
        return verify_signature(message, signature, self.public_key)


__all__: tuple[str, ...] = (
    "EdDSAPoseidon",
    "Signature",
    "derive_public_key",
    "derive_secret_scalar",
    "pack_public_key",
    "sign_message",
    "unpack_public_key",
    "verify_signature",
)
