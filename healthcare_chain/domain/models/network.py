"""
Models for network, compiler and project path configuration.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class NetworkConfig(BaseModel):
    """A JSON-RPC network the contracts can be deployed to."""

    name: str = Field(..., description="Network name")
    url: str = Field(..., description="JSON-RPC endpoint URL")
    accounts: List[str] = Field(
        default_factory=list, description="0x-prefixed signing private keys"
    )
    chain_id: Optional[int] = Field(None, description="Expected chain ID")


class OptimizerConfig(BaseModel):
    """Solidity optimizer settings."""

    enabled: bool = Field(True, description="Optimizer enabled")
    runs: int = Field(200, description="Optimizer runs")


class SolidityConfig(BaseModel):
    """Solidity compiler settings."""

    version: str = Field(..., description="Compiler version")
    optimizer: OptimizerConfig = Field(default_factory=OptimizerConfig)


class ProjectPaths(BaseModel):
    """Source, test, cache and artifact directories."""

    sources: str = Field("./contracts", description="Contract sources")
    tests: str = Field("./test", description="Contract tests")
    cache: str = Field("./cache", description="Compiler cache")
    artifacts: str = Field("./artifacts", description="Compiled artifacts")
