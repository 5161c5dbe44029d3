"""Exception types raised by the verification API."""


class EcdsaVerifyError(ValueError):
    """Base class for caller and configuration errors"""


class UnsupportedCurveError(EcdsaVerifyError):
    """Raised when a curve name is not one of the supported curves"""

    def __init__(self, curve_name: str):
        super().__init__(f"Unsupported curve: {curve_name}")
        self.curve_name = curve_name


class UnsupportedHashFunctionError(EcdsaVerifyError):
    """Raised when a hash function name is not supported"""

    def __init__(self, hash_function: str):
        super().__init__(f"Unsupported hash function: {hash_function}")
        self.hash_function = hash_function


class MalformedInputError(EcdsaVerifyError):
    """Raised when a public key or signature has the wrong length"""


class InvalidCurveParametersError(EcdsaVerifyError):
    """Raised when curve constants fail their self-check"""
