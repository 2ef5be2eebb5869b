"""
EdDSA-Poseidon: EdDSA signatures over Baby Jubjub with a Poseidon challenge hash,
verifiable inside circom circuits. No circomlib dependency; pure Python.
"""

from .__about__ import __version__
from .curves import (BASE8, SUB_ORDER, add_point, in_curve, mul_point_escalar,
                     pack_point, unpack_point)
from .errors import (EdDSAPoseidonError, InvalidMessage, InvalidPrivateKey,
                     InvalidPublicKey, InvalidSignature, InvalidType)
from .field import PrimeField
from .hashes import blake512, poseidon, poseidon5
from .signing import (EdDSAPoseidon, Signature, derive_public_key,
                      derive_secret_scalar, pack_public_key, sign_message,
                      unpack_public_key, verify_signature)

__all__: tuple[str, ...] = (
    # About
    "__version__",
    # Hashes
    "blake512",
    "poseidon",
    "poseidon5",
    # Field
    "PrimeField",
    # Curves: Baby Jubjub
    "BASE8",
    "SUB_ORDER",
    "add_point",
    "in_curve",
    "mul_point_escalar",
    "pack_point",
    "unpack_point",
    # Signing: EdDSA-Poseidon
    "EdDSAPoseidon",
    "Signature",
    "derive_public_key",
    "derive_secret_scalar",
    "pack_public_key",
    "sign_message",
    "unpack_public_key",
    "verify_signature",
    # Errors
    "EdDSAPoseidonError",
    "InvalidMessage",
    "InvalidPrivateKey",
    "InvalidPublicKey",
    "InvalidSignature",
    "InvalidType",
)
