"""
Point arithmetic on short Weierstrass curves.

This module implements the group operations used by ECDSA verification:
doubling, addition, negation and scalar multiplication. Internally every
point is handled in Jacobian coordinates so that no modular inverse is
needed until the final conversion back to affine form.

All functions take the curve explicitly and return points whose
coordinates are reduced into [0, p).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ecverify.numbertheory import inverse_mod, normalize
from ecverify.point import Point, INFINITY

if TYPE_CHECKING:
    from ecverify.curves import CurveParams


def to_affine(point: Point, curve: CurveParams) -> Point:
    """
    Convert a point to affine form (z == 1).

    Args:
        point: Point in Jacobian coordinates
        curve: Curve the point belongs to

    Returns:
        Equivalent point with z == 1, or INFINITY for the identity
    """
    if point.is_infinity:
        return INFINITY

    p = curve.p
    z_inv = inverse_mod(point.z, p)
    z_inv_squared = (z_inv * z_inv) % p
    z_inv_cubed = (z_inv_squared * z_inv) % p

    return Point(
        (point.x * z_inv_squared) % p,
        (point.y * z_inv_cubed) % p,
        1,
    )


def is_on_curve(point: Point, curve: CurveParams) -> bool:
    """
    Check that a point satisfies y^2 = x^3 + a*x + b (mod p).

    The identity is considered on the curve. Coordinates outside [0, p)
    are rejected rather than reduced.
    """
    if point.is_infinity:
        return True

    p = curve.p
    if not (0 <= point.x < p and 0 <= point.y < p and 0 < point.z < p):
        return False

    x, y = to_affine(point, curve).xy()
    left = (y * y) % p
    right = (x * x * x + curve.a * x + curve.b) % p
    return left == right


def negate(point: Point, curve: CurveParams) -> Point:
    """Return -P"""
    if point.is_infinity:
        return INFINITY
    p = curve.p
    return Point(normalize(point.x, p), normalize(-point.y, p), normalize(point.z, p))


def double(point: Point, curve: CurveParams) -> Point:
    """
    Point doubling in Jacobian coordinates.

    Uses the general formula with the curve's a coefficient, so it is valid
    for both a = -3 (secp256r1) and a = 0 (secp256k1).
    """
    if point.is_infinity or point.y % curve.p == 0:
        return INFINITY

    p = curve.p
    x, y, z = point.x, point.y, point.z

    # ysq = Y^2, S = 4*X*Y^2, M = 3*X^2 + a*Z^4
    ysq = (y * y) % p
    s = (4 * x * ysq) % p
    z_sq = (z * z) % p
    m = (3 * x * x + curve.a * z_sq * z_sq) % p

    nx = (m * m - 2 * s) % p
    ny = (m * (s - nx) - 8 * ysq * ysq) % p
    nz = (2 * y * z) % p

    return Point(nx, ny, nz)


def add(p1: Point, p2: Point, curve: CurveParams) -> Point:
    """
    Point addition in Jacobian coordinates.

    Handles the identity on either side, P + (-P) and P + P (which is
    delegated to doubling).
    """
    if p1.is_infinity:
        return p2
    if p2.is_infinity:
        return p1

    p = curve.p

    z1_sq = (p1.z * p1.z) % p
    z2_sq = (p2.z * p2.z) % p
    u1 = (p1.x * z2_sq) % p
    u2 = (p2.x * z1_sq) % p
    s1 = (p1.y * z2_sq * p2.z) % p
    s2 = (p2.y * z1_sq * p1.z) % p

    if u1 == u2:
        if s1 != s2:
            return INFINITY
        return double(p1, curve)

    h = (u2 - u1) % p
    r = (s2 - s1) % p
    h_sq = (h * h) % p
    h_cu = (h * h_sq) % p
    u1_h_sq = (u1 * h_sq) % p

    nx = (r * r - h_cu - 2 * u1_h_sq) % p
    ny = (r * (u1_h_sq - nx) - s1 * h_cu) % p
    nz = (h * p1.z * p2.z) % p

    return Point(nx, ny, nz)


def multiply(point: Point, k: int, curve: CurveParams) -> Point:
    """
    Scalar multiplication k*P using a Montgomery ladder.

    The ladder walks a fixed number of bits (the bit length of the group
    order, or of k if it is larger) and performs one addition and one
    doubling per bit, so the sequence of group operations does not depend
    on the bits of k.

    Args:
        point: Point to multiply
        k: Scalar; negative values multiply the negated point
        curve: Curve parameters

    Returns:
        k*P
    """
    if k < 0:
        return multiply(negate(point, curve), -k, curve)
    if k == 0 or point.is_infinity:
        return INFINITY

    r0 = INFINITY
    r1 = point
    for i in reversed(range(max(curve.n.bit_length(), k.bit_length()))):
        if (k >> i) & 1:
            r0 = add(r0, r1, curve)
            r1 = double(r1, curve)
        else:
            r1 = add(r0, r1, curve)
            r0 = double(r0, curve)

    return r0


def multiply_and_add(p1: Point, k1: int, p2: Point, k2: int, curve: CurveParams) -> Point:
    """Compute k1*P1 + k2*P2"""
    return add(multiply(p1, k1, curve), multiply(p2, k2, curve), curve)
