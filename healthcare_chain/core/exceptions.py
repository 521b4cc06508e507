"""
Custom exceptions for the HealthcareRecordSystem tooling.
Provides structured error handling for selector lookup and deployment.
"""

from typing import Any, Dict, Optional
from fastapi import HTTPException, status


class HealthcareChainError(Exception):
    """Base exception for the HealthcareRecordSystem tooling."""

    def __init__(
        self,
        message: str,
        error_code: str = "HEALTHCARE_CHAIN_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


# Validation
class InvalidInputError(HealthcareChainError):
    """Raised when a selector, signature or revert payload is malformed."""

    def __init__(self, message: str = "Invalid input", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "INVALID_INPUT", details)


# Configuration
class NetworkConfigurationError(HealthcareChainError):
    """Raised when a network is unknown or missing required settings."""

    def __init__(self, message: str = "Network configuration error", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "NETWORK_CONFIG_ERROR", details)


# Blockchain Operations
class BlockchainConnectionError(HealthcareChainError):
    """Raised when the RPC endpoint cannot be reached."""

    def __init__(self, rpc_url: str, details: Optional[Dict[str, Any]] = None):
        message = f"Cannot connect to blockchain RPC: {rpc_url}"
        super().__init__(message, "BLOCKCHAIN_CONNECTION_ERROR", details)


class ArtifactNotFoundError(HealthcareChainError):
    """Raised when a compiled contract artifact is missing."""

    def __init__(self, contract_name: str, details: Optional[Dict[str, Any]] = None):
        message = f"Artifact not found: {contract_name}"
        super().__init__(message, "ARTIFACT_NOT_FOUND", details)


class DeploymentError(HealthcareChainError):
    """Raised when a deployment module is invalid or a deployment fails."""

    def __init__(self, message: str = "Deployment failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "DEPLOYMENT_ERROR", details)


def create_http_exception(
    exc: HealthcareChainError,
    status_code: Optional[int] = None
) -> HTTPException:
    """
    Convert a HealthcareChainError to an HTTPException.

    Args:
        exc: HealthcareChainError instance
        status_code: HTTP status code, derived from the error code when omitted

    Returns:
        HTTPException: FastAPI HTTP exception
    """
    return HTTPException(
        status_code=status_code or get_exception_status_code(exc),
        detail={
            "error_code": exc.error_code,
            "message": exc.message,
            "details": exc.details
        }
    )


def get_exception_status_code(exc: HealthcareChainError) -> int:
    """
    Get the appropriate HTTP status code for a HealthcareChainError.

    Args:
        exc: HealthcareChainError instance

    Returns:
        int: HTTP status code
    """
    status_mapping = {
        "INVALID_INPUT": status.HTTP_422_UNPROCESSABLE_ENTITY,
        "NETWORK_CONFIG_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
        "BLOCKCHAIN_CONNECTION_ERROR": status.HTTP_502_BAD_GATEWAY,
        "ARTIFACT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
        "DEPLOYMENT_ERROR": status.HTTP_502_BAD_GATEWAY,
    }

    return status_mapping.get(exc.error_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
