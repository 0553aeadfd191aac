import pytest

from zkrangeproof import signature
from zkrangeproof.ecc import EllipticCurve


@pytest.mark.parametrize("curve", ["BN254", "BLS12_381"])
def test_sign_verify(curve):

    sk, pk = signature.keygen(curve)

    sig = signature.sign(3, sk, curve)

    assert signature.verify(3, sig, pk, curve)
    assert not signature.verify(4, sig, pk, curve)


def test_wrong_key():

    sk, _ = signature.keygen()
    _, other_pk = signature.keygen()

    sig = signature.sign(7, sk)

    assert not signature.verify(7, sig, other_pk)


def test_identity_signature_rejected():

    _, pk = signature.keygen()

    assert not signature.verify(0, EllipticCurve("BN254").Z2(), pk)


def test_unsignable_message():

    E = EllipticCurve("BN254")
    sk = 5

    with pytest.raises(ValueError):
        signature.sign(E.order - sk, sk)
