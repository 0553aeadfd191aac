from ..ecc import EllipticCurve
from ..utils import get_random_int
from .primitives import commit
from .prover import Prover
from .serialization import Proof, PublicParams, SetupSecret
from .setup import DEFAULT_SEED, Setup
from .verifier import Verifier


class CCS08:
    """
    CCS08 signature based range proof (https://doi.org/10.1007/978-3-540-89255-7_15)

    Args:
        u: digit base
        l: number of digits, the provable interval is `[0, u^l)`
        curve: `BN254` or `BLS12_381`
    """

    def __init__(self, u: int, l: int, curve: str = "BN254"):
        self.u = u
        self.l = l
        self.curve = curve
        self.params = None

    @classmethod
    def from_params(cls, params: PublicParams):
        """Build the protocol around public parameters issued elsewhere"""
        protocol = cls(params.u, params.l, params.curve)
        protocol.params = params
        return protocol

    def setup(self, seed: bytes = DEFAULT_SEED) -> SetupSecret:
        """
        Trusted setup to generate `PublicParams`,
        the returned `SetupSecret` is not kept by this object
        """
        self.params, secret = Setup(self.u, self.l, self.curve, seed).generate()
        return secret

    def random_blinding(self) -> int:
        """Sample a commitment blinding factor"""
        return get_random_int(EllipticCurve(self.curve).order - 1)

    def commit(self, x: int, r: int):
        return commit(x, r, self.params)

    def prove(self, x: int, r: int) -> Proof:
        return Prover(self.params).prove(x, r)

    def verify(self, proof: Proof, public_key=None) -> bool:
        return Verifier(self.params).verify(proof, public_key)
