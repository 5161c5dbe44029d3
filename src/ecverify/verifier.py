"""
Byte-level verification API.

Decodes fixed-width big-endian public keys and signatures, selects the curve
and hash function by name, and runs ECDSA verification.

Layouts (for 256-bit curves):

    public_key: x (32 bytes) || y (32 bytes), uncompressed, no prefix byte
    signature:  r (32 bytes) || s (32 bytes)
"""

import hashlib
import logging
from typing import Callable, Dict

from ecverify import ecdsa
from ecverify.curves import CurveParams, get_curve
from ecverify.ecdsa import Signature
from ecverify.exceptions import MalformedInputError, UnsupportedHashFunctionError
from ecverify.point import Point

logger = logging.getLogger(__name__)

HASH_FUNCTIONS: Dict[str, Callable] = {
    "sha256": hashlib.sha256,
}


def get_hash_function(name: str) -> Callable:
    """
    Look up a hash constructor by exact name.

    Raises:
        UnsupportedHashFunctionError: If the name is not supported
    """
    try:
        return HASH_FUNCTIONS[name]
    except (KeyError, TypeError):
        raise UnsupportedHashFunctionError(str(name)) from None


def _split_pair(data: bytes, curve: CurveParams, what: str) -> tuple:
    """Split a buffer into two big-endian integers of curve width"""
    width = curve.byte_length
    if len(data) != 2 * width:
        raise MalformedInputError(
            f"{what} must be {2 * width} bytes for {curve.name}, got {len(data)}"
        )
    first = int.from_bytes(data[:width], "big")
    second = int.from_bytes(data[width:], "big")
    return first, second


def decode_public_key(data: bytes, curve: CurveParams) -> Point:
    """
    Decode an uncompressed x || y public key into an affine point.

    The point is not validated here; verification rejects off-curve keys.

    Raises:
        MalformedInputError: If data has the wrong length
    """
    x, y = _split_pair(data, curve, "Public key")
    return Point.from_affine(x, y)


def decode_signature(data: bytes, curve: CurveParams) -> Signature:
    """
    Decode an r || s signature.

    Raises:
        MalformedInputError: If data has the wrong length
    """
    r, s = _split_pair(data, curve, "Signature")
    return Signature(r, s)


def verify_signature(
    public_key: bytes,
    message: bytes,
    signature: bytes,
    hash_function: str,
    curve_name: str,
) -> bool:
    """
    Verify an ECDSA signature over a message.

    The message is hashed with the selected hash function before
    verification.

    Args:
        public_key: Raw public key (x || y)
        message: Signed message
        signature: Raw signature (r || s)
        hash_function: Hash function name ("sha256")
        curve_name: Curve name ("secp256r1" or "secp256k1")

    Returns:
        True if the signature is valid, False otherwise

    Raises:
        UnsupportedCurveError: If curve_name is not supported
        UnsupportedHashFunctionError: If hash_function is not supported
        MalformedInputError: If public_key or signature has the wrong length
    """
    curve = get_curve(curve_name)
    hash_constructor = get_hash_function(hash_function)

    point = decode_public_key(bytes(public_key), curve)
    sig = decode_signature(bytes(signature), curve)

    message_hash = hash_constructor(bytes(message)).digest()
    result = ecdsa.verify(message_hash, sig, point, curve)

    logger.debug(f"{curve.name}/{hash_function} verification result: {result}")
    return result
