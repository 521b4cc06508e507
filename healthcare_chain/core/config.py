"""
Configuration management for the HealthcareRecordSystem tooling.
Handles environment variables, network definitions and compiler settings.
"""

from typing import Any, Dict, List, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode
from typing_extensions import Annotated

from healthcare_chain.core.exceptions import NetworkConfigurationError
from healthcare_chain.domain.models.network import (
    NetworkConfig,
    OptimizerConfig,
    ProjectPaths,
    SolidityConfig,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "HealthcareRecordSystem Tooling"
    ENVIRONMENT: str = "development"

    # CORS
    ALLOWED_ORIGINS: Annotated[List[str], NoDecode] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://localhost:8000",
    ]

    # Networks
    DEFAULT_NETWORK: str = "crossFi"
    CROSSFI_RPC_URL: str = "https://rpc.testnet.ms"
    CROSSFI_CHAIN_ID: Optional[int] = None

    # Private key for signing deployments (from .env, without 0x prefix)
    CROSSFI_PRIVATE_KEY: Optional[str] = None

    # Alchemy endpoint key, used instead of the public RPC when USE_ALCHEMY is set
    ALCHEMY_API_URL: Optional[str] = None
    USE_ALCHEMY: bool = False

    # Solidity compiler
    SOLIDITY_VERSION: str = "0.8.24"
    OPTIMIZER_ENABLED: bool = True
    OPTIMIZER_RUNS: int = 200

    # Project paths
    SOURCES_PATH: str = "./contracts"
    TESTS_PATH: str = "./test"
    CACHE_PATH: str = "./cache"
    ARTIFACTS_PATH: str = "./artifacts"

    # Contract test runner timeout (milliseconds)
    TEST_TIMEOUT_MS: int = 40000

    # Selector lookup defaults
    ERROR_SIGNATURES: Annotated[List[str], NoDecode] = ["UnauthorizedAccess()", "NotPatientOwner()"]
    TARGET_SELECTOR: str = "0xe2517d3f"

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def ALCHEMY_RPC_URL(self) -> Optional[str]:
        """Alchemy CrossFi testnet endpoint, if a key is configured."""
        if not self.ALCHEMY_API_URL:
            return None
        return f"https://crossfi-testnet.g.alchemy.com/2/{self.ALCHEMY_API_URL}"

    @property
    def ACTIVE_RPC_URL(self) -> str:
        """Get active CrossFi RPC URL (Alchemy takes priority when enabled)."""
        if self.USE_ALCHEMY and self.ALCHEMY_RPC_URL:
            return self.ALCHEMY_RPC_URL
        return self.CROSSFI_RPC_URL

    @field_validator("ALLOWED_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from string or list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",")]
        return v

    @field_validator("ERROR_SIGNATURES", mode="before")
    @classmethod
    def parse_error_signatures(cls, v):
        """Parse error signatures from a semicolon separated string or list."""
        # Signatures contain commas between argument types, so split on ';'
        if isinstance(v, str):
            return [sig.strip() for sig in v.split(";") if sig.strip()]
        return v

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v):
        """Validate environment setting."""
        allowed_envs = ["development", "staging", "production"]
        if v not in allowed_envs:
            raise ValueError(f"Environment must be one of {allowed_envs}")
        return v

    @field_validator("OPTIMIZER_RUNS")
    @classmethod
    def validate_optimizer_runs(cls, v):
        if v < 1:
            raise ValueError("OPTIMIZER_RUNS must be a positive integer")
        return v

    def get_accounts(self) -> List[str]:
        """Signing accounts for the CrossFi network, rendered as 0x-prefixed keys."""
        if not self.CROSSFI_PRIVATE_KEY:
            return []
        key = self.CROSSFI_PRIVATE_KEY.strip()
        if key.startswith("0x"):
            return [key]
        return [f"0x{key}"]

    def get_networks(self) -> Dict[str, NetworkConfig]:
        """All configured networks keyed by name."""
        return {
            "crossFi": NetworkConfig(
                name="crossFi",
                url=self.ACTIVE_RPC_URL,
                accounts=self.get_accounts(),
                chain_id=self.CROSSFI_CHAIN_ID,
            ),
        }

    def get_network_config(self, name: Optional[str] = None) -> NetworkConfig:
        """
        Get a network definition.

        Args:
            name: Network name, defaults to DEFAULT_NETWORK

        Returns:
            NetworkConfig: The resolved network

        Raises:
            NetworkConfigurationError: If the network is not defined
        """
        network_name = name or self.DEFAULT_NETWORK
        networks = self.get_networks()
        if network_name not in networks:
            raise NetworkConfigurationError(
                f"Unknown network: {network_name}",
                details={"available": sorted(networks)},
            )
        return networks[network_name]

    def get_solidity_config(self) -> SolidityConfig:
        return SolidityConfig(
            version=self.SOLIDITY_VERSION,
            optimizer=OptimizerConfig(
                enabled=self.OPTIMIZER_ENABLED, runs=self.OPTIMIZER_RUNS
            ),
        )

    def get_project_paths(self) -> ProjectPaths:
        return ProjectPaths(
            sources=self.SOURCES_PATH,
            tests=self.TESTS_PATH,
            cache=self.CACHE_PATH,
            artifacts=self.ARTIFACTS_PATH,
        )

    def get_toolchain_config(self, redact: bool = True) -> Dict[str, Any]:
        """
        Get the full toolchain configuration object.

        Args:
            redact: Replace signing keys with a placeholder

        Returns:
            Dict with defaultNetwork, networks, solidity, paths and mocha keys
        """
        networks = {}
        for name, network in self.get_networks().items():
            data = network.model_dump(exclude_none=True)
            if redact:
                data["accounts"] = ["<redacted>" for _ in network.accounts]
            networks[name] = data

        return {
            "defaultNetwork": self.DEFAULT_NETWORK,
            "networks": networks,
            "solidity": self.get_solidity_config().model_dump(),
            "paths": self.get_project_paths().model_dump(),
            "mocha": {"timeout": self.TEST_TIMEOUT_MS},
        }

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


# Create global settings instance
settings = Settings()

