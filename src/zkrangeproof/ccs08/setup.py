"""Trusted setup module of the CCS08 range proof"""

import logging

from ..ecc import EllipticCurve
from ..errors import ParameterError
from ..signature import keygen, sign
from ..transcript import hash_to_G2
from .primitives import check_range_parameters
from .serialization import PublicParams, SetupSecret

logger = logging.getLogger(__name__)

DEFAULT_SEED = b"CCS08 Pedersen generator H"
H_DOMAIN_SEPARATION_TAG = b"zkrangeproof/ccs08/H"


class Setup:

    def __init__(self, u: int, l: int, curve: str = "BN254", seed: bytes = DEFAULT_SEED):
        """
        Trusted setup object, run by the parameter authority

        Args:
            u: digit base
            l: number of digits, the provable interval is `[0, u^l)`
            curve: `BN254` or `BLS12_381`
            seed: public seed from which the commitment generator `H` is hashed
        """
        check_range_parameters(u, l)

        try:
            self.E = EllipticCurve(curve)
        except ValueError as exc:
            raise ParameterError(str(exc)) from exc

        self.order = self.E.order
        if u**l > self.order:
            raise ParameterError(f"Range [0, {u}^{l}) exceeds the group order")

        self.u = u
        self.l = l
        self.curve = curve
        self.seed = seed

    def generate(self) -> tuple[PublicParams, SetupSecret]:
        """Generate `PublicParams` and the authority `SetupSecret`"""

        private_key, public_key = keygen(self.curve)
        # every digit must be signable, that is sk + v != 0
        while any((private_key + v) % self.order == 0 for v in range(self.u)):
            private_key, public_key = keygen(self.curve)

        signatures = [sign(v, private_key, self.curve) for v in range(self.u)]

        H = hash_to_G2(self.seed, H_DOMAIN_SEPARATION_TAG, self.curve)

        logger.info(
            "Generated CCS08 parameters for range [0, %d^%d) on %s",
            self.u,
            self.l,
            self.curve,
        )

        params = PublicParams(self.u, self.l, public_key, H, tuple(signatures), self.curve)
        return params, SetupSecret(private_key, self.curve)
