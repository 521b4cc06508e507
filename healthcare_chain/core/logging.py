"""
Logging configuration for the HealthcareRecordSystem tooling.
Provides structured logging for selector lookups and contract deployments.
"""

import logging
import sys
from typing import Any, Dict, Optional
import structlog
from structlog.stdlib import LoggerFactory

from healthcare_chain.core.config import settings


def setup_logging() -> None:
    """
    Configure structured logging for the application.
    Sets up different log formats for development and production environments.
    """

    # Configure structlog
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            _get_processor(),
        ],
        context_class=dict,
        logger_factory=LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Configure standard library logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.LOG_LEVEL.upper()),
    )

    # Set specific logger levels
    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(logging.INFO)
    logging.getLogger("web3").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def _get_processor():
    """
    Get the appropriate processor based on environment.

    Returns:
        Processor function for structlog
    """
    if settings.ENVIRONMENT == "production":
        return structlog.processors.JSONRenderer()
    else:
        return structlog.dev.ConsoleRenderer(colors=True)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        structlog.stdlib.BoundLogger: Configured logger instance
    """
    return structlog.get_logger(name)


def log_selector_match(
    target: str,
    signature: Optional[str] = None,
    scanned: int = 0,
    **kwargs
) -> None:
    """
    Log the outcome of a selector lookup.

    Args:
        target: Normalized target selector
        signature: Matching error signature, None when nothing matched
        scanned: Number of signatures hashed
        **kwargs: Additional context
    """
    logger = get_logger("selector.match")
    logger.info(
        "Selector match" if signature else "No selector match",
        target=target,
        signature=signature,
        scanned=scanned,
        **kwargs
    )


def log_deployment_step(
    module_id: str,
    future_id: str,
    contract_name: str,
    address: str = None,
    tx_hash: str = None,
    network: str = None,
    **kwargs
) -> None:
    """
    Log a deployed contract or library.

    Args:
        module_id: Deployment module identifier
        future_id: Step identifier within the module
        contract_name: Contract or library name
        address: Deployed address
        tx_hash: Deployment transaction hash
        network: Network name
        **kwargs: Additional context
    """
    logger = get_logger("deployment.step")
    logger.info(
        "Deployment step",
        module_id=module_id,
        future_id=future_id,
        contract_name=contract_name,
        address=address,
        tx_hash=tx_hash,
        network=network,
        **kwargs
    )


def log_error(error: Exception, context: Dict[str, Any] = None) -> None:
    """
    Log an error with context.

    Args:
        error: Exception instance
        context: Additional context information
    """
    logger = get_logger("error")
    logger.error(
        "An error occurred",
        error=str(error),
        error_type=type(error).__name__,
        context=context or {},
        exc_info=True
    )
