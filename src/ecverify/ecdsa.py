"""
ECDSA signature verification.

Implements the verification equation from SEC 1 section 4.1.4:

    w  = s^-1 mod n
    u1 = e*w mod n
    u2 = r*w mod n
    P  = u1*G + u2*Q

and accepts the signature when P is finite and P.x mod n == r.
"""

from dataclasses import dataclass

from ecverify import ecmath
from ecverify.curves import CurveParams
from ecverify.numbertheory import inverse_mod, normalize
from ecverify.point import Point


@dataclass(frozen=True)
class Signature:
    """ECDSA signature (r, s)"""
    r: int
    s: int

    def in_range(self, n: int) -> bool:
        """Check that both components are in [1, n-1]"""
        return 1 <= self.r < n and 1 <= self.s < n


def hash_to_int(message_hash: bytes, n: int) -> int:
    """
    Convert a digest to the integer e used in the verification equation.

    Digests longer than the bit length of n are truncated to their leftmost
    n.bit_length() bits. Shorter digests are used as-is.
    """
    e = int.from_bytes(message_hash, "big")
    excess_bits = len(message_hash) * 8 - n.bit_length()
    if excess_bits > 0:
        e >>= excess_bits
    return e


def verify(message_hash: bytes, signature: Signature, public_key: Point, curve: CurveParams) -> bool:
    """
    Verify an ECDSA signature over a message digest.

    Args:
        message_hash: Digest of the signed message
        signature: Signature to check
        public_key: Signer's public key point
        curve: Curve the key belongs to

    Returns:
        True if the signature is valid, False otherwise
    """
    n = curve.n

    if not signature.in_range(n):
        return False

    if public_key.is_infinity or not ecmath.is_on_curve(public_key, curve):
        return False

    e = hash_to_int(message_hash, n)

    try:
        w = inverse_mod(signature.s, n)
    except (ZeroDivisionError, ValueError):
        return False

    u1 = (e * w) % n
    u2 = (signature.r * w) % n

    point = ecmath.multiply_and_add(curve.g, u1, public_key, u2, curve)
    if point.is_infinity:
        return False

    x, _ = ecmath.to_affine(point, curve).xy()
    return normalize(x, n) == signature.r
