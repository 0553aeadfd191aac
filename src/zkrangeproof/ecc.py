from enum import Enum
from functools import lru_cache
from typing import Union

from py_ecc import optimized_bls12_381, optimized_bn128
from py_ecc.fields.optimized_field_elements import FQ, FQ2
from py_ecc.fields import (
    optimized_bn128_FQ,
    optimized_bn128_FQ2,
    optimized_bn128_FQ12,
    optimized_bls12_381_FQ,
    optimized_bls12_381_FQ2,
    optimized_bls12_381_FQ12,
)


class CurveType(Enum):
    BN128 = optimized_bn128
    BN254 = optimized_bn128
    ALT_BN128 = optimized_bn128
    BLS12_381 = optimized_bls12_381


class CurveFQ(Enum):
    BN128 = optimized_bn128_FQ
    BN254 = optimized_bn128_FQ
    ALT_BN128 = optimized_bn128_FQ
    BLS12_381 = optimized_bls12_381_FQ


class CurveFQ2(Enum):
    BN128 = optimized_bn128_FQ2
    BN254 = optimized_bn128_FQ2
    ALT_BN128 = optimized_bn128_FQ2
    BLS12_381 = optimized_bls12_381_FQ2


class CurveFQ12(Enum):
    BN128 = optimized_bn128_FQ12
    BN254 = optimized_bn128_FQ12
    ALT_BN128 = optimized_bn128_FQ12
    BLS12_381 = optimized_bls12_381_FQ12


class CurvePointSize(Enum):
    """Size in bytes of one base field element"""

    BN128 = 32
    BN254 = 32
    ALT_BN128 = 32
    BLS12_381 = 48


SCALAR_SIZE = 32


def scalar_to_bytes(k: int) -> bytes:
    return int(k).to_bytes(SCALAR_SIZE, "big")


def scalar_from_bytes(b: bytes, order: int) -> int:
    if len(b) != SCALAR_SIZE:
        raise ValueError(f"Scalar of {SCALAR_SIZE} bytes expected, got {len(b)}")
    k = int.from_bytes(b, "big")
    if k >= order:
        raise ValueError("Scalar is not reduced modulo the group order")
    return k


def _field_to_bytes(coeffs, size: int) -> bytes:
    return b"".join(int(c).to_bytes(size, "big") for c in coeffs)


def _field_from_bytes(b: bytes, size: int, modulus: int) -> list:
    coeffs = [int.from_bytes(b[i : i + size], "big") for i in range(0, len(b), size)]
    if any(c >= modulus for c in coeffs):
        raise ValueError("Field element is not reduced modulo the field modulus")
    return coeffs


class EllipticCurve:
    def __init__(self, curve: str = "BN254"):
        if curve not in CurveType.__members__:
            raise ValueError(f"Unsupported curve: {curve}")

        self.name = curve
        self.curve = CurveType[curve].value.optimized_curve
        self.order = self.curve.curve_order
        self.field_modulus = self.curve.field_modulus
        self.__pairing = CurveType[curve].value.optimized_pairing.pairing

    def G1(self):
        """
        Return generator G1 of the curve
        """
        x, y, z = self.curve.G1
        return Curve(x, y, z, self.name, False)

    def G2(self):
        """
        Return generator G2 of the curve
        """
        x, y, z = self.curve.G2
        return Curve(x, y, z, self.name, False)

    def Z1(self):
        x, y, z = self.curve.Z1
        return Curve(x, y, z, self.name, False)

    def Z2(self):
        x, y, z = self.curve.Z2
        return Curve(x, y, z, self.name, False)

    def GT(self):
        """
        Return `e(G1, G2)`, computed once per process for each curve
        """
        return base_pairing(self.name)

    def pairing(self, a, b):
        """
        Compute pairing, that is `e(a, b)`, where `a in G1` and `b in G2`
        """
        return GT(self.__pairing(b.point, a.point), self.name)

    def from_bytes(self, b: bytes):
        """
        Construct G1, G2 or GT element from its canonical encoding
        """
        n = CurvePointSize[self.name].value

        if len(b) in (n * 2, n * 4):
            return Curve.from_bytes(b, self.name)
        elif len(b) == n * 12:
            return GT.from_bytes(b, self.name)
        else:
            raise ValueError(
                f"Encoding size of {n*2}, {n*4} or {n*12} bytes expected, got {len(b)}"
            )


@lru_cache(maxsize=None)
def base_pairing(crv: str):
    E = EllipticCurve(crv)
    return E.pairing(E.G1(), E.G2())


class Curve:
    def __init__(
        self,
        x: Union[int, tuple[int]],
        y: Union[int, tuple[int]],
        z: Union[int, tuple[int]],
        crv: str,
        verify=True,
    ):
        self.name = crv
        fq = CurveFQ[crv].value
        fq2 = CurveFQ2[crv].value

        if (
            isinstance(x, (tuple, list))
            and isinstance(y, (tuple, list))
            and isinstance(z, (tuple, list))
        ):
            self.point = (fq2(x), fq2(y), fq2(z))
            if verify and not self.curve.is_on_curve(self.point, self.curve.b2):
                raise ValueError("Invalid curve point")
        elif isinstance(x, int) and isinstance(y, int) and isinstance(z, int):
            self.point = (fq(x), fq(y), fq(z))
            if verify and not self.curve.is_on_curve(self.point, self.curve.b):
                raise ValueError("Invalid curve point")
        else:
            # this point is not checked since it will come from internal arithmetic function
            self.point = (x, y, z)

    @property
    def curve(self):
        return CurveType[self.name].value.optimized_curve

    @property
    def order(self) -> int:
        return self.curve.curve_order

    def _wrap(self, result):
        return Curve(result[0], result[1], result[2], self.name, False)

    def is_g2(self) -> bool:
        return isinstance(self.point[0], FQ2)

    def __add__(self, other):
        if not isinstance(other, Curve):
            raise TypeError(
                f"Addition of {type(self)} with {type(other)} is not allowed"
            )

        return self._wrap(self.curve.add(self.point, other.point))

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        return self.__add__(-other)

    def __mul__(self, other):
        if not isinstance(other, int):
            raise TypeError(
                f"Multiplication of {type(self)} with {type(other)} is not allowed"
            )

        return self._wrap(self.curve.multiply(self.point, other % self.order))

    def __rmul__(self, other):
        return self.__mul__(other)

    def __neg__(self):
        return self._wrap(self.curve.neg(self.point))

    def __eq__(self, other):
        if not isinstance(other, Curve):
            return NotImplemented
        return self.name == other.name and self.to_bytes() == other.to_bytes()

    def __hash__(self):
        return hash(self.to_bytes())

    def __str__(self) -> str:
        return f"{self.curve.normalize(self.point)}"

    def __repr__(self) -> str:
        return self.__str__()

    def is_zero(self) -> bool:
        return self.curve.is_inf(self.point)

    def is_on_curve(self) -> bool:
        b = self.curve.b2 if self.is_g2() else self.curve.b
        return self.curve.is_on_curve(self.point, b)

    def is_valid(self) -> bool:
        """
        Check that the point lies on the curve and in the prime order subgroup
        """
        if not self.is_on_curve():
            return False
        return self.curve.is_inf(self.curve.multiply(self.point, self.order))

    def to_bytes(self) -> bytes:
        point_size = CurvePointSize[self.name].value
        n_coords = 4 if self.is_g2() else 2

        if self.is_zero():
            return bytes(point_size * n_coords)

        x, y = self.curve.normalize(self.point)
        if isinstance(x, FQ) and isinstance(y, FQ):
            return _field_to_bytes((x, y), point_size)
        elif isinstance(x, FQ2) and isinstance(y, FQ2):
            return _field_to_bytes(tuple(x.coeffs) + tuple(y.coeffs), point_size)
        else:
            raise TypeError(f"Unknown field element type: {type(x)} and {type(y)}")

    @classmethod
    def from_bytes(cls, b: bytes, crv: str = "BN254"):
        """
        Parse G1 point (`x || y`) or G2 point (`x0 || x1 || y0 || y1`)
        """
        n = CurvePointSize[crv].value
        modulus = CurveType[crv].value.optimized_curve.field_modulus

        if len(b) not in (n * 2, n * 4):
            raise ValueError(
                f"Point size of {n*2} or {n*4} bytes expected, got {len(b)}"
            )

        coeffs = _field_from_bytes(b, n, modulus)

        if len(coeffs) == 2:
            if not any(coeffs):
                x, y, z = CurveType[crv].value.optimized_curve.Z1
                return cls(x, y, z, crv, False)
            point = cls(coeffs[0], coeffs[1], 1, crv)
        else:
            if not any(coeffs):
                x, y, z = CurveType[crv].value.optimized_curve.Z2
                return cls(x, y, z, crv, False)
            point = cls(coeffs[0:2], coeffs[2:4], (1, 0), crv)

        if not point.is_valid():
            raise ValueError("Point is not in the prime order subgroup")

        return point


class GT:
    """Element of the pairing target group"""

    def __init__(self, value, crv: str):
        self.name = crv
        self.value = value

    @property
    def order(self) -> int:
        return CurveType[self.name].value.optimized_curve.curve_order

    def __mul__(self, other):
        if not isinstance(other, GT):
            raise TypeError(
                f"Multiplication of {type(self)} with {type(other)} is not allowed"
            )
        return GT(self.value * other.value, self.name)

    def __pow__(self, other):
        if not isinstance(other, int):
            raise TypeError(
                f"Exponentiation of {type(self)} with {type(other)} is not allowed"
            )
        # GT has prime order, so negative exponents reduce to positive ones
        return GT(self.value ** (other % self.order), self.name)

    def __eq__(self, other):
        if not isinstance(other, GT):
            return NotImplemented
        return self.name == other.name and self.to_bytes() == other.to_bytes()

    def __hash__(self):
        return hash(self.to_bytes())

    def __str__(self) -> str:
        return f"{self.value}"

    def __repr__(self) -> str:
        return self.__str__()

    def to_bytes(self) -> bytes:
        return _field_to_bytes(self.value.coeffs, CurvePointSize[self.name].value)

    @classmethod
    def from_bytes(cls, b: bytes, crv: str = "BN254"):
        n = CurvePointSize[crv].value
        if len(b) != n * 12:
            raise ValueError(f"GT element of {n*12} bytes expected, got {len(b)}")

        modulus = CurveType[crv].value.optimized_curve.field_modulus
        coeffs = _field_from_bytes(b, n, modulus)
        return cls(CurveFQ12[crv].value(coeffs), crv)
