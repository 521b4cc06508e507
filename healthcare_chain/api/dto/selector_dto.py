"""
DTOs (Data Transfer Objects) for selector endpoints.
Contains request and response models for API communication.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


# Request DTOs
class SelectorMatchRequestDTO(BaseModel):
    """Request DTO for matching a selector against error signatures."""

    target: str = Field(..., description="0x-prefixed 4-byte selector")
    signatures: Optional[List[str]] = Field(
        None, description="Candidate error signatures (configured defaults when omitted)"
    )


class RevertDecodeRequestDTO(BaseModel):
    """Request DTO for decoding raw revert data."""

    data: str = Field(..., description="0x-prefixed revert data")
    signatures: Optional[List[str]] = Field(
        None, description="Candidate error signatures (configured defaults when omitted)"
    )


# Response DTOs
class SelectorMatchDataDTO(BaseModel):
    """DTO for the 'data' field in selector match responses."""

    matched: bool = Field(..., description="Whether a signature matched")
    target: str = Field(..., description="Normalized target selector")
    signature: Optional[str] = Field(None, description="Matching signature")
    selector: Optional[str] = Field(None, description="Derived selector of the match")
    index: Optional[int] = Field(None, description="Position of the match")
    scanned: int = Field(..., description="Number of signatures hashed")


class SelectorMatchResponseDTO(BaseModel):
    """Response DTO for selector matching."""

    success: bool = Field(..., description="Request success status")
    message: str = Field(..., description="Response message")
    data: SelectorMatchDataDTO = Field(..., description="Match result")


class SelectorResponseDTO(BaseModel):
    """Response DTO for a single derived selector."""

    success: bool = Field(..., description="Request success status")
    signature: str = Field(..., description="Error or function signature")
    selector: str = Field(..., description="Derived 0x-prefixed selector")
