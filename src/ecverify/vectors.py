"""Known-good verification vectors."""

from dataclasses import dataclass
from typing import Dict

from ecverify.exceptions import UnsupportedCurveError


@dataclass(frozen=True)
class VerificationVector:
    """Inputs for verify_signature with the expected result"""
    public_key: bytes
    message: bytes
    signature: bytes
    hash_function: str
    curve_name: str
    expected: bool = True


SECP256R1_SHA256 = VerificationVector(
    public_key=bytes.fromhex(
        "7fa92dd0666eee7c13ddb7b6249b0c8f9fba4360857c4e15d2fc634a2b5a1f8f"
        "db9983b319469d35e719a3b93e1ac292854cd3ff2ad50898681b0a32ffbcbc6a"
    ),
    message=bytes.fromhex(
        "49960de5880e8c687434170f6476605b8fe4aeb9a28632c7995cf3ba831d9763"
        "010000000117bd119a942a38b92bfc3b90a21f7eaa37fe1a7fa0abe27fd15dd20683b14d54"
    ),
    signature=bytes.fromhex(
        "10fab01307f3eed59bc11601265efaab524b50d017bd9cdfeec4f61b01caa8d6"
        "69c6e9f8d9bcbdba4e5478cb75b084332d51b0be2c21701b157c7c87abb98057"
    ),
    hash_function="sha256",
    curve_name="secp256r1",
)

SECP256K1_SHA256 = VerificationVector(
    public_key=bytes.fromhex(
        "14f0bfd7f667613d092276b1b1f298806127b13a037035b8e713e74e065b7914"
        "42ef0b12148222521d0b96bfb6f8b50360a42769001f3bc2d22665caf74defcd"
    ),
    message=b"ecverify secp256k1 reference message",
    signature=bytes.fromhex(
        "ef39ab0a3703f3586e63503f301dfe27eac42c74654dd62bf6ebbbdd1c011656"
        "621cf7cd989cd43a55d9655dd163c6fa49cbc583eaf3a184f3ff981c4e799e23"
    ),
    hash_function="sha256",
    curve_name="secp256k1",
)

REFERENCE_VECTORS: Dict[str, VerificationVector] = {
    SECP256R1_SHA256.curve_name: SECP256R1_SHA256,
    SECP256K1_SHA256.curve_name: SECP256K1_SHA256,
}


def get_vector(curve_name: str) -> VerificationVector:
    """
    Look up the reference vector for a curve.

    Raises:
        UnsupportedCurveError: If there is no vector for the curve
    """
    try:
        return REFERENCE_VECTORS[curve_name]
    except (KeyError, TypeError):
        raise UnsupportedCurveError(str(curve_name)) from None
