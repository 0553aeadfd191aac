import pytest

from zkrangeproof.ecc import Curve, EllipticCurve, GT, CurvePointSize


@pytest.mark.parametrize("curve", ["BN254", "BLS12_381"])
def test_point_serialization(curve):

    E = EllipticCurve(curve)
    n = CurvePointSize[curve].value

    P = E.G1() * 1337
    Q = E.G2() * 7331

    assert len(P.to_bytes()) == n * 2
    assert len(Q.to_bytes()) == n * 4

    assert E.from_bytes(P.to_bytes()) == P
    assert E.from_bytes(Q.to_bytes()) == Q
    assert Curve.from_bytes(Q.to_bytes(), curve) == Q


def test_identity_serialization():

    E = EllipticCurve("BN254")

    Z = E.G2() * 0
    assert Z.is_zero()
    assert Z.to_bytes() == bytes(128)
    assert E.from_bytes(bytes(128)).is_zero()
    assert E.from_bytes(bytes(64)).is_zero()


def test_point_arithmetic():

    E = EllipticCurve("BN254")
    G2 = E.G2()

    assert G2 * 3 + G2 * 4 == G2 * 7
    assert G2 * 3 - G2 * 3 == E.Z2()
    assert G2 * -1 == -G2
    assert G2 * (E.order + 5) == G2 * 5
    assert E.G1().is_valid() and G2.is_valid()

    with pytest.raises(TypeError):
        G2 * 1.5


def test_invalid_point_rejected():

    E = EllipticCurve("BN254")

    data = bytearray(E.G1().to_bytes())
    data[-1] ^= 1

    with pytest.raises(ValueError):
        E.from_bytes(bytes(data))

    with pytest.raises(ValueError):
        E.from_bytes(b"\xff" * 64)

    with pytest.raises(ValueError):
        E.from_bytes(b"\x01" * 10)


@pytest.mark.parametrize("curve", ["BN254", "BLS12_381"])
def test_pairing_bilinearity(curve):

    E = EllipticCurve(curve)

    a, b = 1234, 5678
    lhs = E.pairing(E.G1() * a, E.G2() * b)

    assert lhs == E.GT() ** (a * b)
    assert E.pairing(E.G1(), E.G2()) == E.GT()
    assert GT.from_bytes(lhs.to_bytes(), curve) == lhs


def test_gt_negative_exponent():

    E = EllipticCurve("BN254")
    e = E.GT()

    assert e**-5 * e**5 == e**0
    assert e ** (E.order - 5) == e**-5


def test_unsupported_curve():

    with pytest.raises(ValueError):
        EllipticCurve("SECP256K1")
