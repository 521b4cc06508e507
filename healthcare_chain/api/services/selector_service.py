"""
Selector Service Layer.
Maps opaque revert selectors to HealthcareRecordSystem error signatures.
"""

from typing import List, Optional

from healthcare_chain.api.dto.selector_dto import (
    SelectorMatchDataDTO,
    SelectorMatchResponseDTO,
    SelectorResponseDTO,
)
from healthcare_chain.core.config import settings
from healthcare_chain.core.logging import get_logger
from healthcare_chain.domain.models.selector import SelectorMatch
from healthcare_chain.infrastructure.blockchain.selectors import (
    find_match,
    selector_from_revert_data,
    selector_of,
)

logger = get_logger(__name__)


class SelectorService:
    """Service class for selector lookups."""

    def _candidates(self, signatures: Optional[List[str]]) -> List[str]:
        if signatures is None:
            return list(settings.ERROR_SIGNATURES)
        return signatures

    def match(
        self, target: str, signatures: Optional[List[str]] = None
    ) -> SelectorMatchResponseDTO:
        """
        Match a selector against candidate signatures.

        Args:
            target: 0x-prefixed selector
            signatures: Candidates, configured defaults when None

        Returns:
            SelectorMatchResponseDTO
        """
        result = find_match(self._candidates(signatures), target)

        if isinstance(result, SelectorMatch):
            return SelectorMatchResponseDTO(
                success=True,
                message=f"Match -> {result.signature}",
                data=SelectorMatchDataDTO(
                    matched=True,
                    target=result.selector,
                    signature=result.signature,
                    selector=result.selector,
                    index=result.index,
                    scanned=result.index + 1,
                ),
            )

        return SelectorMatchResponseDTO(
            success=True,
            message="No matching signature found",
            data=SelectorMatchDataDTO(
                matched=False, target=result.target, scanned=result.scanned
            ),
        )

    def decode_revert(
        self, data: str, signatures: Optional[List[str]] = None
    ) -> SelectorMatchResponseDTO:
        """Match the selector at the head of raw revert data."""
        target = selector_from_revert_data(data)
        logger.info(f"Decoding revert data with selector {target}")
        return self.match(target, signatures)

    def selector(self, signature: str) -> SelectorResponseDTO:
        return SelectorResponseDTO(
            success=True, signature=signature, selector=selector_of(signature)
        )


selector_service = SelectorService()
