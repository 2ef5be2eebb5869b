"""pytest tests for EdDSA-Poseidon signing, verification and key packing."""

from __future__ import annotations

import dataclasses
import logging

import pytest

from eddsa_poseidon import (
    BASE8,
    SUB_ORDER,
    EdDSAPoseidon,
    InvalidMessage,
    InvalidPrivateKey,
    InvalidPublicKey,
    InvalidType,
    Signature,
    derive_public_key,
    derive_secret_scalar,
    mul_point_escalar,
    pack_public_key,
    sign_message,
    unpack_public_key,
    verify_signature,
)
from eddsa_poseidon.curves.babyjubjub import P

PRIV = bytes(range(32))
OTHER_PRIV = bytes(range(1, 33))
MSG = 2


@pytest.fixture(scope="module")
def signed():
    return sign_message(PRIV, MSG), derive_public_key(PRIV)


def test_secret_scalar_range() -> None:
    s = int(derive_secret_scalar(PRIV))
    # bit 254 set before the shift, low three bits dropped
    assert 1 << 251 <= s < 1 << 252
    assert derive_secret_scalar(PRIV) == derive_secret_scalar(PRIV)


def test_public_key_is_scalar_times_base8() -> None:
    s = int(derive_secret_scalar(PRIV))
    x, y = mul_point_escalar(BASE8, s)
    assert derive_public_key(PRIV) == (str(x), str(y))


def test_private_key_encodings_agree() -> None:
    k = int.from_bytes(PRIV, "little")
    expected = derive_public_key(PRIV)
    assert derive_public_key(k) == expected
    assert derive_public_key(str(k)) == expected
    assert derive_public_key(hex(k)) == expected
    assert derive_public_key(bytearray(PRIV)) == expected


def test_text_private_key() -> None:
    assert derive_public_key("secret") == derive_public_key(b"secret")


@pytest.mark.parametrize(
    "bad_key",
    [b"", bytes(33), -1, 1 << 256, 1.5, None, True, "x" * 33],
)
def test_invalid_private_key(bad_key) -> None:
    with pytest.raises(InvalidPrivateKey):
        derive_secret_scalar(bad_key)
    with pytest.raises(InvalidPrivateKey):
        sign_message(bad_key, MSG)


def test_sign_deterministic(signed) -> None:
    sig, _ = signed
    assert sign_message(PRIV, MSG) == sig
    assert isinstance(sig, Signature)
    assert all(isinstance(v, str) for v in (*sig.R8, sig.S))


def test_sign_verify(signed) -> None:
    sig, pub = signed
    assert verify_signature(MSG, sig, pub) is True


def test_message_encodings_agree(signed) -> None:
    sig, pub = signed
    assert sign_message(PRIV, "2") == sig
    assert sign_message(PRIV, "0x2") == sig
    assert sign_message(PRIV, b"\x02") == sig
    assert verify_signature("2", sig, pub) is True


@pytest.mark.parametrize("bad_msg", [P, -1, 1.0, None, True, "two", [2]])
def test_invalid_message(bad_msg) -> None:
    with pytest.raises(InvalidMessage):
        sign_message(PRIV, bad_msg)


def test_largest_message() -> None:
    sig = sign_message(PRIV, P - 1)
    assert verify_signature(P - 1, sig, derive_public_key(PRIV)) is True


def test_verify_rejects_tampered_message(signed) -> None:
    sig, pub = signed
    assert verify_signature(MSG ^ 1, sig, pub) is False
    assert verify_signature(MSG + 1, sig, pub) is False


def test_verify_rejects_tampered_s(signed) -> None:
    sig, pub = signed
    s = int(sig.S)
    assert verify_signature(MSG, Signature(sig.R8, str((s + 1) % SUB_ORDER)), pub) is False
    assert verify_signature(MSG, Signature(sig.R8, str(s ^ 1)), pub) is False


def test_verify_rejects_tampered_r8(signed) -> None:
    sig, pub = signed
    x, y = int(sig.R8[0]), int(sig.R8[1])
    assert verify_signature(MSG, Signature((str(x ^ 1), str(y)), sig.S), pub) is False
    assert verify_signature(MSG, Signature((str(x), str(y ^ 1)), sig.S), pub) is False


def test_verify_rejects_other_key(signed) -> None:
    sig, _ = signed
    assert verify_signature(MSG, sig, derive_public_key(OTHER_PRIV)) is False


def test_verify_rejects_s_out_of_range(signed) -> None:
    sig, pub = signed
    # S + subOrder satisfies the curve equation but is not canonical
    high = Signature(sig.R8, str(int(sig.S) + SUB_ORDER))
    assert verify_signature(MSG, high, pub) is False


@pytest.mark.parametrize(
    "bad_pub",
    [(1, 1), ("1", "1"), None, "123", (1, 2, 3), [BASE8[0]], ("a", "b"), (P, 1)],
)
def test_verify_rejects_bad_public_key(signed, bad_pub) -> None:
    sig, _ = signed
    assert verify_signature(MSG, sig, bad_pub) is False


@pytest.mark.parametrize(
    "bad_sig",
    [
        None,
        "sig",
        {"R8": ["1", "1"]},
        {"S": "1"},
        {"R8": ["1", "1"], "S": "1"},
        {"R8": "xy", "S": "1"},
        ((1, 2, 3), "1"),
        (BASE8, 1.5),
        (BASE8,),
    ],
)
def test_verify_rejects_bad_signature_shape(signed, bad_sig) -> None:
    _, pub = signed
    assert verify_signature(MSG, bad_sig, pub) is False


def test_verify_rejects_bad_message(signed) -> None:
    sig, pub = signed
    assert verify_signature(P, sig, pub) is False
    assert verify_signature("not a number", sig, pub) is False
    assert verify_signature(None, sig, pub) is False


def test_overlong_decimal_strings(signed) -> None:
    sig, pub = signed
    assert verify_signature("9" * 5000, sig, pub) is False
    assert verify_signature(MSG, {"R8": list(sig.R8), "S": "1" * 5000}, pub) is False
    assert verify_signature(MSG, sig, ("1" * 5000, pub[1])) is False
    with pytest.raises(InvalidPrivateKey):
        derive_public_key("9" * 5000)
    with pytest.raises(InvalidMessage):
        sign_message(PRIV, "9" * 5000)
    with pytest.raises((InvalidType, InvalidPublicKey)):
        unpack_public_key("9" * 5000)


def test_verify_accepts_int_forms(signed) -> None:
    sig, pub = signed
    r8 = (int(sig.R8[0]), int(sig.R8[1]))
    assert verify_signature(MSG, (r8, int(sig.S)), (int(pub[0]), int(pub[1]))) is True
    assert verify_signature(MSG, sig.to_dict(), list(pub)) is True


def test_verify_logs_rejection(signed, caplog) -> None:
    sig, pub = signed
    high = Signature(sig.R8, str(int(sig.S) + SUB_ORDER))
    with caplog.at_level(logging.DEBUG, logger="eddsa_poseidon.signing.eddsa"):
        assert verify_signature(MSG, high, pub) is False
    assert "S out of range" in caplog.text


def test_pack_unpack_public_key() -> None:
    for key in (PRIV, OTHER_PRIV, b"secret", 1):
        pub = derive_public_key(key)
        packed = pack_public_key(pub)
        assert isinstance(packed, str)
        assert unpack_public_key(packed) == pub
        assert unpack_public_key(int(packed)) == pub
        assert unpack_public_key(hex(int(packed))) == pub


def test_pack_public_key_invalid() -> None:
    with pytest.raises(InvalidPublicKey):
        pack_public_key((1, 1))
    with pytest.raises(InvalidPublicKey):
        pack_public_key("not a point")
    with pytest.raises(InvalidPublicKey):
        pack_public_key((1, 2, 3))


@pytest.mark.parametrize("bad", [1.5, None, b"\x01", "xyz", [1, 2], True])
def test_unpack_public_key_invalid_type(bad) -> None:
    with pytest.raises(InvalidType):
        unpack_public_key(bad)
    with pytest.raises(TypeError):
        unpack_public_key(bad)


def test_unpack_public_key_invalid_point() -> None:
    with pytest.raises(InvalidPublicKey):
        unpack_public_key(P)
    with pytest.raises(InvalidPublicKey):
        unpack_public_key(str(1 << 256))


def test_identity() -> None:
    identity = EdDSAPoseidon(PRIV)
    assert identity.secret_scalar == derive_secret_scalar(PRIV)
    assert identity.public_key == derive_public_key(PRIV)
    assert identity.packed_public_key == pack_public_key(identity.public_key)
    sig = identity.sign(MSG)
    assert sig == sign_message(PRIV, MSG)
    assert identity.verify(MSG, sig) is True
    assert identity.verify(MSG + 1, sig) is False
    assert EdDSAPoseidon(OTHER_PRIV).verify(MSG, sig) is False


def test_identity_is_immutable() -> None:
    identity = EdDSAPoseidon(bytearray(PRIV))
    assert identity.private_key == PRIV
    with pytest.raises(dataclasses.FrozenInstanceError):
        identity.public_key = ("0", "1")
    assert PRIV.hex() not in repr(identity)
    assert identity.secret_scalar not in repr(identity)


def test_identity_random_key() -> None:
    a, b = EdDSAPoseidon(), EdDSAPoseidon()
    assert len(a.private_key) == 32
    assert a.public_key != b.public_key
    assert a.verify(MSG, a.sign(MSG)) is True


def test_identity_invalid_key() -> None:
    with pytest.raises(InvalidPrivateKey):
        EdDSAPoseidon(b"")
