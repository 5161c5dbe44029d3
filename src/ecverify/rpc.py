"""RPC server implementation using FastAPI."""

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI
from pydantic import BaseModel

from ecverify import __version__
from ecverify.config import VerifierConfig
from ecverify.curves import SUPPORTED_CURVES
from ecverify.exceptions import EcdsaVerifyError
from ecverify.verifier import HASH_FUNCTIONS, verify_signature

logger = logging.getLogger(__name__)

# Error codes returned in RPCResponse.error
RPC_INVALID_PARAMS = -32602
RPC_METHOD_NOT_FOUND = -32601
RPC_VERIFY_ERROR = -1


class RPCRequest(BaseModel):
    """RPC request model."""
    method: str
    params: Optional[Dict[str, Any]] = None
    id: Optional[int] = None


class RPCResponse(BaseModel):
    """RPC response model."""
    result: Optional[Any] = None
    error: Optional[Dict[str, Any]] = None
    id: Optional[int] = None


class VerifyParams(BaseModel):
    """Parameters of the ecdsa_verify method (hex encoded buffers)."""
    public_key: str
    input_data: str
    signature: str
    hash_func: Optional[str] = None
    curve_name: Optional[str] = None


class RPCError(Exception):
    """Error reported to the caller in the response body."""

    def __init__(self, code: int, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


class RPCServer:
    """RPC server exposing signature verification."""

    def __init__(self, config: Optional[VerifierConfig] = None) -> None:
        """Initialize the RPC server.

        Args:
            config: Configuration supplying default curve and hash function
        """
        self.app = FastAPI(title="ecverify RPC")
        self.config = config or VerifierConfig()
        self._setup_routes()

    def _setup_routes(self) -> None:
        """Set up RPC routes."""

        @self.app.get("/")
        async def root() -> Dict[str, str]:
            """Root endpoint."""
            return {"message": "ecverify RPC"}

        @self.app.post("/rpc")
        async def rpc_endpoint(request: RPCRequest) -> RPCResponse:
            """Handle RPC requests."""
            try:
                result = await self._handle_rpc_method(request.method, request.params or {})
                return RPCResponse(result=result, id=request.id)
            except RPCError as e:
                logger.info(f"RPC {request.method} failed: {e.message}")
                return RPCResponse(
                    error={"code": e.code, "message": e.message},
                    id=request.id
                )

        @self.app.get("/health")
        async def health() -> Dict[str, str]:
            """Health check endpoint."""
            return {"status": "healthy"}

    async def _handle_rpc_method(self, method: str, params: Dict[str, Any]) -> Any:
        """Handle RPC method calls.

        Args:
            method: RPC method name
            params: Method parameters

        Returns:
            Method result

        Raises:
            RPCError: If the method is unknown or the call fails
        """
        if method == "ecdsa_verify":
            return await self.rpc_ecdsa_verify(params)
        elif method == "listcurves":
            return await self.rpc_listcurves()
        elif method == "getinfo":
            return await self.rpc_getinfo()
        else:
            raise RPCError(RPC_METHOD_NOT_FOUND, f"Unknown method: {method}")

    async def rpc_ecdsa_verify(self, params: Dict[str, Any]) -> bool:
        """Verify a signature.

        Args:
            params: Fields of VerifyParams

        Returns:
            True if the signature is valid, False otherwise

        Raises:
            RPCError: On bad parameters, unsupported curve or hash function,
                or wrong buffer lengths
        """
        try:
            request = VerifyParams(**params)
        except (TypeError, ValueError) as e:
            raise RPCError(RPC_INVALID_PARAMS, f"Invalid params: {e}") from None

        try:
            public_key = bytes.fromhex(request.public_key)
            input_data = bytes.fromhex(request.input_data)
            signature = bytes.fromhex(request.signature)
        except ValueError:
            raise RPCError(RPC_INVALID_PARAMS, "Buffers must be hex encoded") from None

        try:
            return verify_signature(
                public_key,
                input_data,
                signature,
                request.hash_func or self.config.get("hashfunc"),
                request.curve_name or self.config.get("curve"),
            )
        except EcdsaVerifyError as e:
            raise RPCError(RPC_VERIFY_ERROR, str(e)) from None

    async def rpc_listcurves(self) -> Dict[str, Any]:
        """List supported curves and hash functions."""
        return {
            "curves": list(SUPPORTED_CURVES),
            "hash_functions": list(HASH_FUNCTIONS),
        }

    async def rpc_getinfo(self) -> Dict[str, Any]:
        """Return version and configured defaults."""
        return {
            "version": __version__,
            "curve": self.config.get("curve"),
            "hash_function": self.config.get("hashfunc"),
        }

    def get_app(self) -> FastAPI:
        """Get the FastAPI application."""
        return self.app
