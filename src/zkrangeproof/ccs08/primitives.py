"""Building blocks shared by the CCS08 prover and verifier"""

from ..ecc import EllipticCurve
from ..errors import ParameterError, RangeViolationError
from ..transcript import FiatShamirTranscript

TRANSCRIPT_LABEL = b"zkrangeproof/ccs08"


def check_range_parameters(u, l):
    for name, value in (("u", u), ("l", l)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ParameterError(f"{name} must be an integer, got {type(value)}")
        if value < 1:
            raise ParameterError(f"{name} must be positive, got {value}")


def commit(x: int, r: int, params):
    """
    Pedersen commitment `C = G2^x * H^r` of secret `x` under blinding `r`
    """
    E = EllipticCurve(params.curve)
    return E.G2() * x + params.H * r


def decompose(x: int, u: int, l: int) -> list:
    """
    Decompose `x` into `l` digits of base `u`, least significant first,
    so that `x = sum(digits[i] * u^i)`
    """
    check_range_parameters(u, l)
    if isinstance(x, bool) or not isinstance(x, int):
        raise TypeError(f"Secret value must be an integer, got {type(x)}")
    if not 0 <= x < u**l:
        raise RangeViolationError(f"Secret value is not in range [0, {u}^{l})")

    digits = []
    for _ in range(l):
        digits.append(x % u)
        x //= u

    return digits


def compute_challenge(a: list, D, order: int) -> int:
    """
    Fiat-Shamir challenge from the first round pairing values `a`
    and the aggregated digit randomization `D`
    """
    transcript = FiatShamirTranscript(TRANSCRIPT_LABEL, field=order)
    for a_i in a:
        transcript.append(a_i)
    transcript.append(D)

    return transcript.get_challenge_scalar()
