import pytest

from zkrangeproof.ccs08 import CCS08, Proof, PublicParams, SetupSecret
from zkrangeproof.ecc import CurvePointSize


@pytest.fixture(scope="module")
def ccs08_data():

    ccs08 = CCS08(4, 3)
    secret = ccs08.setup()
    proof = ccs08.prove(42, ccs08.random_blinding())

    return ccs08, secret, proof


def test_proof_serialization(ccs08_data):

    ccs08, _, proof = ccs08_data

    s = proof.to_bytes()
    n = CurvePointSize["BN254"].value

    assert len(s) == 8 + (3 + 2) * n * 4 + 3 * n * 12 + (2 * 3 + 2) * 32

    parsed = Proof.from_bytes(s)

    assert parsed == proof
    assert parsed.to_bytes() == s
    assert ccs08.verify(parsed)


def test_params_serialization(ccs08_data):

    ccs08, _, proof = ccs08_data

    s = ccs08.params.to_bytes()
    params = PublicParams.from_bytes(s)

    assert params == ccs08.params
    assert params.validate()
    assert CCS08.from_params(params).verify(proof)


def test_secret_serialization(ccs08_data):

    ccs08, secret, _ = ccs08_data

    parsed = SetupSecret.from_bytes(secret.to_bytes())

    assert parsed.private_key == secret.private_key
    assert secret.to_bytes() not in ccs08.params.to_bytes()


def test_params_validation(ccs08_data):

    ccs08, _, _ = ccs08_data
    params = ccs08.params

    swapped = PublicParams(
        params.u,
        params.l,
        params.public_key,
        params.H,
        (params.signatures[1], params.signatures[0]) + params.signatures[2:],
    )
    missing = PublicParams(
        params.u, params.l, params.public_key, params.H, params.signatures[:-1]
    )

    assert not swapped.validate()
    assert not missing.validate()


def test_malformed_proof(ccs08_data):

    _, _, proof = ccs08_data
    s = proof.to_bytes()

    with pytest.raises(ValueError):
        Proof.from_bytes(s[:-1])

    with pytest.raises(ValueError):
        Proof.from_bytes(s + b"\x00")

    with pytest.raises(ValueError):
        Proof.from_bytes(bytes(8) + s[8:])

    with pytest.raises(ValueError):
        Proof.from_bytes(s[:4])

    # non canonical scalar in the last position
    with pytest.raises(ValueError):
        Proof.from_bytes(s[:-32] + b"\xff" * 32)


def _flip(s: bytes, index: int) -> bytes:
    data = bytearray(s)
    data[index] ^= 1
    return bytes(data)


@pytest.mark.parametrize("region", ["V", "D", "C", "a", "c", "zr", "zsig", "zv"])
def test_bit_flip_rejected(ccs08_data, region):

    ccs08, _, proof = ccs08_data
    s = proof.to_bytes()

    n = CurvePointSize["BN254"].value
    l = 3
    g2, gt = n * 4, n * 12

    # last byte of the first element of each region
    offsets = {
        "V": 8 + g2,
        "D": 8 + l * g2 + g2,
        "C": 8 + (l + 1) * g2 + g2,
        "a": 8 + (l + 2) * g2 + gt,
        "c": 8 + (l + 2) * g2 + l * gt + 32,
        "zr": 8 + (l + 2) * g2 + l * gt + 64,
        "zsig": 8 + (l + 2) * g2 + l * gt + 96,
        "zv": 8 + (l + 2) * g2 + l * gt + (2 + l) * 32 + 32,
    }

    tampered = _flip(s, offsets[region] - 1)

    try:
        parsed = Proof.from_bytes(tampered)
    except ValueError:
        return

    assert not ccs08.verify(parsed)
