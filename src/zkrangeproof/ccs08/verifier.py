import logging

from joblib import Parallel, delayed

from ..ecc import Curve, CurveType, EllipticCurve, GT
from ..utils import get_n_jobs
from .primitives import compute_challenge
from .serialization import Proof, PublicParams

logger = logging.getLogger(__name__)


def _verify_digit(V, a, zsig, zv, c, public_key, gt) -> bool:
    E = EllipticCurve(V.name)

    # a == e(pk, V)^c * e(G1, V)^-zsig * e(G1, G2)^zv
    expected = E.pairing(public_key * c - E.G1() * zsig, V) * gt**zv

    return expected.to_bytes() == a.to_bytes()


class Verifier:
    """
    Verifier object

    Args:
        params: `PublicParams` from trusted setup
    """

    def __init__(self, params: PublicParams):
        self.params = params
        self.E = EllipticCurve(params.curve)
        self.order = self.E.order

    def _same_curve(self, element) -> bool:
        return CurveType[element.name] is CurveType[self.params.curve]

    def _is_scalar(self, k) -> bool:
        return isinstance(k, int) and not isinstance(k, bool) and 0 <= k < self.order

    def _check_structure(self, proof: Proof, public_key) -> bool:
        l = self.params.l

        if not (len(proof.V) == len(proof.a) == len(proof.zsig) == len(proof.zv) == l):
            logger.debug("Proof does not contain %d digits", l)
            return False

        points = list(proof.V) + [proof.D, proof.C]
        if not all(isinstance(p, Curve) and p.is_g2() and self._same_curve(p) for p in points):
            logger.debug("Proof contains an element outside of G2")
            return False
        if not all(isinstance(a, GT) and self._same_curve(a) for a in proof.a):
            logger.debug("Proof contains an element outside of GT")
            return False
        if not all(self._is_scalar(k) for k in [proof.c, proof.zr, *proof.zsig, *proof.zv]):
            logger.debug("Proof contains a non canonical scalar")
            return False

        if (
            not isinstance(public_key, Curve)
            or public_key.is_g2()
            or not self._same_curve(public_key)
            or public_key.is_zero()
            or not public_key.is_valid()
        ):
            logger.debug("Public key is not a valid G1 element")
            return False

        # an identity V would satisfy the digit equation without any signature
        if any(V.is_zero() for V in proof.V):
            logger.debug("Proof contains an identity blinded signature")
            return False
        if not all(p.is_valid() for p in points):
            logger.debug("Proof contains a point outside of the prime order subgroup")
            return False

        return True

    def verify(self, proof: Proof, public_key=None) -> bool:
        """
        Verify proof against the authority public key,
        `params.public_key` is used if none is given
        """
        public_key = self.params.public_key if public_key is None else public_key

        if not self._check_structure(proof, public_key):
            return False

        if proof.c != compute_challenge(list(proof.a), proof.D, self.order):
            logger.debug("Challenge was not derived from the first round values")
            return False

        u = self.params.u
        G2 = self.E.G2()

        # D == C^c * H^zr * prod(G2^(zsig_i * u^i))
        D = proof.C * proof.c + self.params.H * proof.zr
        for i, zsig in enumerate(proof.zsig):
            D += G2 * (zsig * pow(u, i, self.order))

        if D.to_bytes() != proof.D.to_bytes():
            logger.debug("Consistency check of D failed")
            return False

        gt = self.E.GT()
        result = Parallel(n_jobs=get_n_jobs())(
            delayed(_verify_digit)(V, a, zsig, zv, proof.c, public_key, gt)
            for V, a, zsig, zv in zip(proof.V, proof.a, proof.zsig, proof.zv)
        )

        if not all(result):
            logger.debug("Digit check failed at index %d", result.index(False))
            return False

        return True
