"""
Contract Deployer for declarative deployment modules.
Handles Web3 connection, transaction signing and receipts.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from eth_account import Account
from web3 import Web3

from healthcare_chain.core.config import settings
from healthcare_chain.core.exceptions import (
    BlockchainConnectionError,
    DeploymentError,
    NetworkConfigurationError,
)
from healthcare_chain.core.logging import get_logger, log_deployment_step
from healthcare_chain.deployment.artifacts import link_bytecode, load_artifact
from healthcare_chain.deployment.module import ContractStep, DeploymentModule
from healthcare_chain.domain.models.network import NetworkConfig

logger = get_logger(__name__)

DEFAULT_GAS_LIMIT = 5_000_000


class ContractDeployer:
    """Deploys module steps to a configured network."""

    def __init__(
        self,
        network: NetworkConfig,
        artifacts_dir: Union[str, Path, None] = None,
        w3: Optional[Web3] = None,
    ):
        """
        Initialize contract deployer.

        Args:
            network: Target network
            artifacts_dir: Artifacts root (defaults to ARTIFACTS_PATH)
            w3: Preconfigured Web3 instance (defaults to an HTTP provider on network.url)
        """
        if not network.accounts:
            raise NetworkConfigurationError(
                f"No signing account configured for network {network.name}",
                details={"hint": "set CROSSFI_PRIVATE_KEY"},
            )

        self.network = network
        self.artifacts_dir = Path(artifacts_dir or settings.ARTIFACTS_PATH)
        self.w3 = w3 or Web3(Web3.HTTPProvider(network.url))
        logger.info(f"Connecting to RPC: {network.url}")

        if not self.w3.is_connected():
            logger.error("Failed to connect to Web3 provider")
            raise BlockchainConnectionError(network.url)

        if network.chain_id is not None and self.w3.eth.chain_id != network.chain_id:
            raise NetworkConfigurationError(
                f"Chain ID mismatch for network {network.name}",
                details={"expected": network.chain_id, "actual": self.w3.eth.chain_id},
            )

        self.private_key = network.accounts[0]
        try:
            self.account = Account.from_key(self.private_key)
        except Exception as e:
            logger.error(f"Invalid signing key for network {network.name}: {type(e).__name__}")
            raise NetworkConfigurationError(
                f"Invalid signing key for network {network.name}",
                details={"hint": "CROSSFI_PRIVATE_KEY must be 32 bytes of hex"},
            ) from e

    def deploy_contract(
        self,
        contract_name: str,
        args: List[Any],
        libraries: Optional[Dict[str, str]] = None,
        gas_limit: Optional[int] = None,
    ) -> Dict[str, Any]:
        """
        Deploy a single contract.

        Args:
            contract_name: Artifact name
            args: Constructor arguments
            libraries: Fully qualified library name -> deployed address
            gas_limit: Gas limit for the transaction

        Returns:
            Dict with address and tx_hash
        """
        artifact = load_artifact(contract_name, self.artifacts_dir)
        bytecode = link_bytecode(artifact["bytecode"], libraries or {})
        contract = self.w3.eth.contract(abi=artifact["abi"], bytecode=bytecode)
        constructor = contract.constructor(*args)

        from_address = self.account.address
        logger.info(f"Deploying {contract_name}({args}) from {from_address}")

        nonce = self.w3.eth.get_transaction_count(from_address)

        # Estimate gas if not provided
        if not gas_limit:
            try:
                gas_limit = constructor.estimate_gas({"from": from_address})
                # Add 20% buffer
                gas_limit = int(gas_limit * 1.2)
            except Exception as e:
                logger.warning(f"Gas estimation failed: {e}, using default")
                gas_limit = DEFAULT_GAS_LIMIT

        transaction = constructor.build_transaction(
            {
                "from": from_address,
                "nonce": nonce,
                "gas": gas_limit,
                "gasPrice": self.w3.eth.gas_price,
            }
        )

        tx_hash = None
        try:
            signed_txn = self.w3.eth.account.sign_transaction(transaction, self.private_key)
            tx_hash = self.w3.eth.send_raw_transaction(signed_txn.raw_transaction)
            logger.info(f"Transaction sent: {tx_hash.hex()}")

            tx_receipt = self.w3.eth.wait_for_transaction_receipt(tx_hash, timeout=120)
        except Exception as e:
            logger.error(f"Error deploying {contract_name}: {e}", exc_info=True)
            raise DeploymentError(
                f"Deployment of {contract_name} failed: {type(e).__name__}",
                details={"tx_hash": tx_hash.hex() if tx_hash is not None else None},
            ) from e

        if tx_receipt["status"] != 1 or not tx_receipt.get("contractAddress"):
            raise DeploymentError(
                f"Deployment of {contract_name} reverted",
                details={"tx_hash": tx_hash.hex()},
            )

        return {
            "address": tx_receipt["contractAddress"],
            "tx_hash": tx_hash.hex(),
        }

    def deploy_module(self, module: DeploymentModule) -> Dict[str, str]:
        """
        Deploy every step of a module in declaration order.

        Args:
            module: Deployment module

        Returns:
            Dict of step id -> deployed address
        """
        deployed: Dict[str, str] = {}

        for step in module.steps:
            args: List[Any] = []
            libraries: Dict[str, str] = {}
            if isinstance(step, ContractStep):
                args = step.args
                libraries = {
                    fqn: deployed[library.future_id]
                    for fqn, library in step.libraries.items()
                }

            result = self.deploy_contract(step.contract_name, args, libraries)
            deployed[step.future_id] = result["address"]

            log_deployment_step(
                module.module_id,
                step.future_id,
                step.contract_name,
                address=result["address"],
                tx_hash=result["tx_hash"],
                network=self.network.name,
            )

        return deployed
