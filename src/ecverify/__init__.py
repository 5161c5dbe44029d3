"""ecverify - ECDSA signature verification over secp256r1 and secp256k1."""

__version__ = "0.1.0"

from ecverify.curves import CurveParams, SECP256R1, SECP256K1, get_curve
from ecverify.ecdsa import Signature, verify
from ecverify.exceptions import (
    EcdsaVerifyError,
    UnsupportedCurveError,
    UnsupportedHashFunctionError,
    MalformedInputError,
    InvalidCurveParametersError,
)
from ecverify.point import Point, INFINITY
from ecverify.verifier import verify_signature

__all__ = [
    "__version__",
    "CurveParams",
    "SECP256R1",
    "SECP256K1",
    "get_curve",
    "Signature",
    "verify",
    "Point",
    "INFINITY",
    "verify_signature",
    "EcdsaVerifyError",
    "UnsupportedCurveError",
    "UnsupportedHashFunctionError",
    "MalformedInputError",
    "InvalidCurveParametersError",
]
