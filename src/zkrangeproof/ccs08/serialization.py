from dataclasses import dataclass, field

from ..ecc import (
    SCALAR_SIZE,
    Curve,
    CurvePointSize,
    EllipticCurve,
    GT,
    scalar_from_bytes,
    scalar_to_bytes,
)
from ..signature import verify as verify_signature
from ..utils import split_list
from .primitives import check_range_parameters

LENGTH_SIZE = 8


def _length_to_bytes(n: int) -> bytes:
    return n.to_bytes(LENGTH_SIZE, "little")


def _length_from_bytes(s: bytes) -> int:
    if len(s) < LENGTH_SIZE:
        raise ValueError("Truncated length prefix")
    return int.from_bytes(s[:LENGTH_SIZE], "little")


@dataclass(frozen=True)
class PublicParams:
    """
    Public parameters issued by the trusted setup, shared by every prover
    and verifier of the interval `[0, u^l)`

    Args:
        u: digit base
        l: number of digits
        public_key: authority public key in G1
        H: Pedersen commitment generator in G2
        signatures: `signatures[v]` is the authority signature of digit `v`
        curve: `BN254` or `BLS12_381`
    """

    u: int
    l: int
    public_key: Curve
    H: Curve
    signatures: tuple
    curve: str = "BN254"

    def __post_init__(self):
        check_range_parameters(self.u, self.l)
        object.__setattr__(self, "signatures", tuple(self.signatures))

    @property
    def upper_bound(self) -> int:
        """Exclusive upper bound `u^l` of the provable interval"""
        return self.u**self.l

    def signature(self, digit: int):
        """Return the signature of `digit`, raise KeyError if none was issued"""
        if not 0 <= digit < len(self.signatures):
            raise KeyError(digit)
        return self.signatures[digit]

    def validate(self) -> bool:
        """
        Check that every digit in `[0, u)` carries a valid authority
        signature and that `H` and the public key are usable generators
        """
        if len(self.signatures) != self.u:
            return False
        if self.H.is_zero() or not self.H.is_valid():
            return False
        if self.public_key.is_zero() or not self.public_key.is_valid():
            return False

        return all(
            verify_signature(v, sig, self.public_key, self.curve)
            for v, sig in enumerate(self.signatures)
        )

    def to_bytes(self) -> bytes:
        s = _length_to_bytes(self.u) + _length_to_bytes(self.l)
        s += self.public_key.to_bytes()
        s += self.H.to_bytes()
        for sig in self.signatures:
            s += sig.to_bytes()
        return s

    @classmethod
    def from_bytes(cls, s: bytes, crv="BN254"):
        """Construct PublicParams from bytes"""
        E = EllipticCurve(crv)
        n = CurvePointSize[crv].value

        u = _length_from_bytes(s)
        l = _length_from_bytes(s[LENGTH_SIZE:])
        s = s[LENGTH_SIZE * 2 :]

        if u < 1 or l < 1:
            raise ValueError("Invalid range parameters")
        if len(s) != n * 2 + n * 4 * (u + 1):
            raise ValueError(
                f"Length of the parameters must equal {n * 2 + n * 4 * (u + 1)} bytes"
            )

        public_key = E.from_bytes(s[: n * 2])
        H = E.from_bytes(s[n * 2 : n * 6])
        signatures = [E.from_bytes(block) for block in split_list(s[n * 6 :], n * 4)]

        return cls(u, l, public_key, H, tuple(signatures), crv)


@dataclass(frozen=True)
class SetupSecret:
    """Authority private key, it must never reach provers or verifiers"""

    private_key: int = field(repr=False)
    curve: str = "BN254"

    def to_bytes(self) -> bytes:
        return scalar_to_bytes(self.private_key)

    @classmethod
    def from_bytes(cls, s: bytes, crv="BN254"):
        E = EllipticCurve(crv)
        return cls(scalar_from_bytes(s, E.order), crv)


@dataclass(frozen=True)
class Proof:
    """
    CCS08 range proof transcript

    Args:
        V: blinded digit signatures in G2
        D: aggregated digit randomization in G2
        C: Pedersen commitment of the secret in G2
        a: first round pairing values in GT
        c: Fiat-Shamir challenge
        zsig: digit responses
        zv: signature blinding responses
        zr: commitment opening response
    """

    V: tuple
    D: Curve
    C: Curve
    a: tuple
    c: int
    zsig: tuple
    zv: tuple
    zr: int

    def __post_init__(self):
        for name in ("V", "a", "zsig", "zv"):
            object.__setattr__(self, name, tuple(getattr(self, name)))

    def __str__(self):
        return f"C = {self.C}\nD = {self.D}\nc = {self.c}\nl = {len(self.V)}"

    @property
    def curve(self) -> str:
        return self.C.name

    def to_bytes(self) -> bytes:
        """Return bytes representation of the Proof"""
        s = _length_to_bytes(len(self.V))
        for V in self.V:
            s += V.to_bytes()
        s += self.D.to_bytes()
        s += self.C.to_bytes()
        for a in self.a:
            s += a.to_bytes()
        s += scalar_to_bytes(self.c)
        s += scalar_to_bytes(self.zr)
        for zsig in self.zsig:
            s += scalar_to_bytes(zsig)
        for zv in self.zv:
            s += scalar_to_bytes(zv)
        return s

    @classmethod
    def from_bytes(cls, s: bytes, crv="BN254"):
        """Parse Proof from serialized bytes"""
        E = EllipticCurve(crv)
        n = CurvePointSize[crv].value

        l = _length_from_bytes(s)
        s = s[LENGTH_SIZE:]

        g2_size = n * 4
        gt_size = n * 12
        total = (l + 2) * g2_size + l * gt_size + (2 * l + 2) * SCALAR_SIZE

        if l < 1:
            raise ValueError("Proof must contain at least one digit")
        if len(s) != total:
            raise ValueError(f"Length of the Proof must equal {total} bytes")

        point_s = split_list(s[: (l + 2) * g2_size], g2_size)
        s = s[(l + 2) * g2_size :]
        gt_s = split_list(s[: l * gt_size], gt_size)
        s = s[l * gt_size :]
        field_s = split_list(s, SCALAR_SIZE)

        V = [E.from_bytes(block) for block in point_s[:l]]
        D = E.from_bytes(point_s[l])
        C = E.from_bytes(point_s[l + 1])
        a = [GT.from_bytes(block, crv) for block in gt_s]

        c, zr = (scalar_from_bytes(block, E.order) for block in field_s[:2])
        zsig = [scalar_from_bytes(block, E.order) for block in field_s[2 : 2 + l]]
        zv = [scalar_from_bytes(block, E.order) for block in field_s[2 + l :]]

        return cls(V, D, C, a, c, zsig, zv, zr)
