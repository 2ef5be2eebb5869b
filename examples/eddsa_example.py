#!/usr/bin/env python3
"""Example: EdDSA-Poseidon over Baby Jubjub (circom-friendly keys and signatures)."""

from eddsa_poseidon import (
    EdDSAPoseidon,
    derive_public_key,
    pack_public_key,
    sign_message,
    unpack_public_key,
    verify_signature,
)

private_key = b"secret"
public_key = derive_public_key(private_key)
print("Public key:", public_key[0][:16] + "...", public_key[1][:16] + "...")

packed = pack_public_key(public_key)
print("Packed public key:", packed[:32] + "...")
assert unpack_public_key(packed) == public_key

message = 2
signature = sign_message(private_key, message)
print("Signature S:", signature.S[:32] + "...")
print("Verify:", verify_signature(message, signature, public_key))
print("Verify wrong message:", verify_signature(3, signature, public_key))

identity = EdDSAPoseidon()
sig = identity.sign(12345)
print("Random identity verify:", identity.verify(12345, sig))
print("Signature JSON:", sig.to_dict())
