"""Signing schemes: EdDSA-Poseidon over Baby Jubjub."""

from .eddsa import (EdDSAPoseidon, Signature, derive_public_key,
                    derive_secret_scalar, pack_public_key, sign_message,
                    unpack_public_key, verify_signature)

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
