import hashlib

from py_ecc.bls.hash_to_curve import hash_to_G2 as bls12_381_hash_to_G2

from .ecc import Curve, CurveFQ2, CurveType, GT, scalar_to_bytes

MAX_HASH_TO_CURVE_ATTEMPTS = 256


def _sqrt_fq2(a, p: int):
    """
    Square root in Fp2 = Fp[i]/(i^2 + 1) for p = 3 mod 4
    (Adj and Rodriguez-Henriquez, Algorithm 9), or None for a non-residue
    """
    one = a.one()
    a1 = a ** ((p - 3) // 4)
    alpha = a1 * a1 * a
    a0 = (alpha**p) * alpha
    if a0 == -one:
        return None

    x0 = a1 * a
    if alpha == -one:
        x = a.__class__([0, 1]) * x0
    else:
        x = ((one + alpha) ** ((p - 1) // 2)) * x0

    return x if x * x == a else None


def _hash_to_field(data: bytes, domain_separation_tag: bytes, counter: int, p: int):
    coeffs = []
    for index in range(2):
        digest = hashlib.sha512(
            domain_separation_tag + data + counter.to_bytes(4, "big") + bytes([index])
        ).digest()
        coeffs.append(int.from_bytes(digest, "big") % p)
    return coeffs


def hash_to_G2(data: bytes, domain_separation_tag: bytes, curve: str = "BN254"):
    """
    Hash data to a point of the prime order subgroup of G2 whose discrete
    logarithm with respect to any other generator is unknown
    """
    if CurveType[curve].value is CurveType.BLS12_381.value:
        x, y, z = bls12_381_hash_to_G2(data, domain_separation_tag, hashlib.sha256)
        return Curve(x, y, z, curve, False)

    # try-and-increment on the sextic twist, then clear the cofactor 2p - r
    crv = CurveType[curve].value.optimized_curve
    fq2 = CurveFQ2[curve].value
    p = crv.field_modulus
    cofactor = 2 * p - crv.curve_order

    for counter in range(MAX_HASH_TO_CURVE_ATTEMPTS):
        x = fq2(_hash_to_field(data, domain_separation_tag, counter, p))
        y = _sqrt_fq2(x**3 + crv.b2, p)
        if y is None:
            continue

        point = crv.multiply((x, y, fq2.one()), cofactor)
        if crv.is_inf(point):
            continue

        result = Curve(point[0], point[1], point[2], curve, False)
        if result.is_valid():
            return result

    raise ValueError("Failed to hash to G2, no valid point found")


class FiatShamirTranscript:

    def __init__(self, label: bytes, alg="sha256", field=None):
        self.alg = alg
        self.label = label
        self.field = field
        self.hasher = hashlib.new(alg, label)

    def reset(self):
        self.hasher = hashlib.new(self.alg, self.label)

    def append(self, data):

        if isinstance(data, bytes):
            self.hasher.update(data)
        elif isinstance(data, str):
            self.hasher.update(data.encode())
        elif isinstance(data, int):
            self.hasher.update(scalar_to_bytes(data))
        elif isinstance(data, (Curve, GT)):
            self.hasher.update(data.to_bytes())
        elif data and isinstance(data, list):
            for d in data:
                self.append(d)
        else:
            raise TypeError(f"Type of {type(data)} is not supported as transcript")

    def get_challenge(self) -> bytes:
        digest = self.hasher.digest()
        return digest

    def get_challenge_scalar(self) -> int:
        scalar = int.from_bytes(self.get_challenge(), "big")
        return scalar % self.field if self.field else scalar
