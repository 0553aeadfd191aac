"""
Boneh-Boyen short signatures (https://eprint.iacr.org/2004/171.pdf)

The public key lives in G1 and signatures in G2, so that a blinded
signature `V = sig^v` can be checked against `e(pk * G1^m, V) = e(G1, G2)^v`
"""

from .ecc import EllipticCurve
from .utils import get_random_int


def keygen(curve: str = "BN254"):
    """Generate `(private_key, public_key)` where `public_key = G1 * private_key`"""
    E = EllipticCurve(curve)
    private_key = get_random_int(E.order - 1)
    return private_key, E.G1() * private_key


def sign(message: int, private_key: int, curve: str = "BN254"):
    """Sign integer message, that is `G2 * 1/(private_key + message)`"""
    E = EllipticCurve(curve)

    exponent = (private_key + message) % E.order
    if exponent == 0:
        raise ValueError("Message cannot be signed under this private key")

    return E.G2() * pow(exponent, -1, E.order)


def verify(message: int, signature, public_key, curve: str = "BN254") -> bool:
    E = EllipticCurve(curve)

    if signature.is_zero() or not signature.is_valid():
        return False

    # e(pk * G1^m, sig) == e(G1, G2)
    return E.pairing(public_key + E.G1() * message, signature) == E.GT()
