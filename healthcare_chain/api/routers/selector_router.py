"""
Selector Router.
Endpoints for reverse-mapping custom error selectors.
"""

from fastapi import APIRouter, Query

from healthcare_chain.api.dto.selector_dto import (
    RevertDecodeRequestDTO,
    SelectorMatchRequestDTO,
    SelectorMatchResponseDTO,
    SelectorResponseDTO,
)
from healthcare_chain.api.services.selector_service import selector_service
from healthcare_chain.core.exceptions import InvalidInputError, create_http_exception
from healthcare_chain.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.post("/match", response_model=SelectorMatchResponseDTO)
async def match_selector(request: SelectorMatchRequestDTO) -> SelectorMatchResponseDTO:
    """
    Find the first error signature whose selector equals the target.
    """
    try:
        return selector_service.match(request.target, request.signatures)
    except InvalidInputError as e:
        logger.warning(f"Invalid selector match request: {e.message}")
        raise create_http_exception(e)


@router.post("/revert", response_model=SelectorMatchResponseDTO)
async def decode_revert(request: RevertDecodeRequestDTO) -> SelectorMatchResponseDTO:
    """
    Extract the selector from revert data and match it.
    """
    try:
        return selector_service.decode_revert(request.data, request.signatures)
    except InvalidInputError as e:
        logger.warning(f"Invalid revert decode request: {e.message}")
        raise create_http_exception(e)


@router.get("/selector", response_model=SelectorResponseDTO)
async def get_selector(
    signature: str = Query(..., description="Error or function signature"),
) -> SelectorResponseDTO:
    """
    Derive the 4-byte selector of a signature.
    """
    try:
        return selector_service.selector(signature)
    except InvalidInputError as e:
        raise create_http_exception(e)
