"""Exceptions raised by key derivation, signing and public-key packing."""

from __future__ import annotations


class EdDSAPoseidonError(ValueError):
    """Base class for all eddsa_poseidon input errors."""


class InvalidPrivateKey(EdDSAPoseidonError):
    """Private key cannot be normalised to a byte buffer of at most 32 bytes."""


class InvalidMessage(EdDSAPoseidonError):
    """Message is not an integer in [0, p)."""


class InvalidPublicKey(EdDSAPoseidonError):
    """Malformed or off-curve point, or a packed value that decodes to no point."""


class InvalidSignature(EdDSAPoseidonError):
    """Signature is not an (R8, S) pair of well-formed values."""


class InvalidType(EdDSAPoseidonError, TypeError):
    """Argument of the wrong kind, e.g. a packed public key that is not an int or numeric string."""


__all__: tuple[str, ...] = (
    "EdDSAPoseidonError",
    "InvalidMessage",
    "InvalidPrivateKey",
    "InvalidPublicKey",
    "InvalidSignature",
    "InvalidType",
)
