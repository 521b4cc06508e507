"""
Models for 4-byte selector lookups.
"""

from typing import Union

from pydantic import BaseModel, ConfigDict, Field


class SelectorMatch(BaseModel):
    """The first candidate signature whose selector equals the target."""

    model_config = ConfigDict(frozen=True)

    signature: str = Field(..., description="Matching error signature")
    selector: str = Field(..., description="Derived 0x-prefixed selector")
    index: int = Field(..., description="Position of the signature in the candidate list")

    @property
    def matched(self) -> bool:
        return True


class NoMatchFound(BaseModel):
    """No candidate signature produced the target selector."""

    model_config = ConfigDict(frozen=True)

    target: str = Field(..., description="Normalized target selector")
    scanned: int = Field(..., description="Number of signatures hashed")

    @property
    def matched(self) -> bool:
        return False


MatchResult = Union[SelectorMatch, NoMatchFound]
