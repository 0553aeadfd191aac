"""
CCS08 signature based range proof
"""

from .protocol import CCS08
from .primitives import commit, compute_challenge, decompose
from .prover import Prover
from .serialization import Proof, PublicParams, SetupSecret
from .setup import Setup
from .verifier import Verifier
