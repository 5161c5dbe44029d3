"""
Named elliptic curve parameters.

The supported curves are the short Weierstrass curves
y^2 = x^3 + a*x + b over GF(p) published by NIST (secp256r1, also known as
P-256) and SEC 2 (secp256k1).
"""

from dataclasses import dataclass
from typing import Dict

from ecverify import ecmath
from ecverify.exceptions import InvalidCurveParametersError, UnsupportedCurveError
from ecverify.numbertheory import is_probable_prime
from ecverify.point import Point


@dataclass(frozen=True)
class CurveParams:
    """Immutable description of a named curve"""
    name: str
    p: int  # field prime
    a: int
    b: int
    g: Point  # base point
    n: int  # order of g
    h: int = 1  # cofactor

    @property
    def byte_length(self) -> int:
        """Width in bytes of an encoded coordinate or scalar"""
        return (self.p.bit_length() + 7) // 8

    def contains(self, point: Point) -> bool:
        """Check that point lies on this curve"""
        return ecmath.is_on_curve(point, self)

    def check(self) -> None:
        """
        Validate the curve constants.

        Raises:
            InvalidCurveParametersError: If p or n is not prime, the base
                point is not on the curve, or n*G is not the identity
        """
        if not is_probable_prime(self.p):
            raise InvalidCurveParametersError(f"{self.name}: field modulus is not prime")
        if not is_probable_prime(self.n):
            raise InvalidCurveParametersError(f"{self.name}: group order is not prime")
        if self.g.is_infinity or not self.contains(self.g):
            raise InvalidCurveParametersError(f"{self.name}: base point is not on the curve")
        if not ecmath.multiply(self.g, self.n, self).is_infinity:
            raise InvalidCurveParametersError(f"{self.name}: n*G is not the identity")

    def __str__(self) -> str:
        return self.name


SECP256R1 = CurveParams(
    name="secp256r1",
    p=0xFFFFFFFF00000001000000000000000000000000FFFFFFFFFFFFFFFFFFFFFFFF,
    a=0xFFFFFFFF00000001000000000000000000000000FFFFFFFFFFFFFFFFFFFFFFFC,
    b=0x5AC635D8AA3A93E7B3EBBD55769886BC651D06B0CC53B0F63BCE3C3E27D2604B,
    g=Point.from_affine(
        0x6B17D1F2E12C4247F8BCE6E563A440F277037D812DEB33A0F4A13945D898C296,
        0x4FE342E2FE1A7F9B8EE7EB4A7C0F9E162BCE33576B315ECECBB6406837BF51F5,
    ),
    n=0xFFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551,
    h=1,
)

SECP256K1 = CurveParams(
    name="secp256k1",
    p=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F,
    a=0,
    b=7,
    g=Point.from_affine(
        0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
        0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
    ),
    n=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141,
    h=1,
)

SUPPORTED_CURVES: Dict[str, CurveParams] = {
    SECP256R1.name: SECP256R1,
    SECP256K1.name: SECP256K1,
}


def get_curve(name: str) -> CurveParams:
    """
    Look up a curve by exact name.

    Args:
        name: Curve name ("secp256r1" or "secp256k1")

    Returns:
        Curve parameters

    Raises:
        UnsupportedCurveError: If the name is not a supported curve
    """
    try:
        return SUPPORTED_CURVES[name]
    except (KeyError, TypeError):
        raise UnsupportedCurveError(str(name)) from None
