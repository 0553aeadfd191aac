import logging

from joblib import Parallel, delayed

from ..ecc import EllipticCurve
from ..errors import RangeViolationError
from ..utils import get_random_int, get_n_jobs
from .primitives import commit, compute_challenge, decompose
from .serialization import Proof, PublicParams

logger = logging.getLogger(__name__)


def _prove_digit(A, v, s, t, weight, gt):
    """
    First round of a single digit: blinded signature `V = A^v`,
    `a = e(G1, V)^-s * e(G1, G2)^t` and its share `G2^(s * u^i)` of `D`
    """
    E = EllipticCurve(A.name)

    V = A * v
    a = E.pairing(-(E.G1() * s), V) * gt**t

    return V, a, E.G2() * (s * weight)


class Prover:
    """
    Prover object

    Args:
        params: `PublicParams` from trusted setup
    """

    def __init__(self, params: PublicParams):
        self.params = params
        self.E = EllipticCurve(params.curve)
        self.order = self.E.order

    def prove(self, x: int, r: int) -> Proof:
        """
        Prove that secret `x`, committed under blinding `r`,
        lies in `[0, u^l)`
        """
        if isinstance(r, bool) or not isinstance(r, int):
            raise TypeError(f"Blinding factor must be an integer, got {type(r)}")

        u, l = self.params.u, self.params.l
        digits = decompose(x, u, l)

        try:
            A = [self.params.signature(d) for d in digits]
        except KeyError as exc:
            raise RangeViolationError(
                f"No signature issued for digit {exc.args[0]}"
            ) from exc

        m = get_random_int(self.order - 1)
        v = [get_random_int(self.order - 1) for _ in range(l)]
        s = [get_random_int(self.order - 1) for _ in range(l)]
        t = [get_random_int(self.order - 1) for _ in range(l)]

        gt = self.E.GT()
        first_round = Parallel(n_jobs=get_n_jobs())(
            delayed(_prove_digit)(A[i], v[i], s[i], t[i], pow(u, i, self.order), gt)
            for i in range(l)
        )

        V = [item[0] for item in first_round]
        a = [item[1] for item in first_round]

        D = self.params.H * m
        for _, _, share in first_round:
            D += share

        C = commit(x, r, self.params)
        c = compute_challenge(a, D, self.order)

        zr = (m - r * c) % self.order
        zsig = [(s[i] - digits[i] * c) % self.order for i in range(l)]
        zv = [(t[i] - v[i] * c) % self.order for i in range(l)]

        logger.debug("Generated range proof for [0, %d^%d)", u, l)

        return Proof(V, D, C, a, c, zsig, zv, zr)
