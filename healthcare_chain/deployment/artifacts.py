"""
Compiled artifact loading and library linking.
"""

import json
import re
from pathlib import Path
from typing import Any, Dict, List, Union

from web3 import Web3

from healthcare_chain.core.exceptions import ArtifactNotFoundError, DeploymentError
from healthcare_chain.core.logging import get_logger

logger = get_logger(__name__)

PLACEHOLDER_PATTERN = re.compile(r"__\$[0-9a-fA-F]{34}\$__")


def load_artifact(contract_name: str, artifacts_dir: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a compiled contract artifact.

    Searches artifacts_dir recursively for <contract_name>.json (the layout is
    artifacts/contracts/<File>.sol/<Contract>.json) and skips debug files.

    Args:
        contract_name: Contract or library name
        artifacts_dir: Artifacts root directory

    Returns:
        Dict with at least "abi" and "bytecode"
    """
    root = Path(artifacts_dir)
    candidates: List[Path] = (
        sorted(root.rglob(f"{contract_name}.json")) if root.is_dir() else []
    )
    if not candidates:
        raise ArtifactNotFoundError(
            contract_name, details={"artifacts_dir": str(root)}
        )
    if len(candidates) > 1:
        logger.warning(
            "Multiple artifacts found, using first",
            contract_name=contract_name,
            candidates=[str(c) for c in candidates],
        )

    with open(candidates[0], "r") as f:
        artifact = json.load(f)

    if "abi" not in artifact or "bytecode" not in artifact:
        raise ArtifactNotFoundError(
            contract_name,
            details={"path": str(candidates[0]), "reason": "missing abi or bytecode"},
        )
    return artifact


def link_placeholder(fully_qualified_name: str) -> str:
    """Placeholder solc emits for an unlinked library reference."""
    return "__$" + Web3.keccak(text=fully_qualified_name).hex().removeprefix("0x")[:34] + "$__"


def link_bytecode(bytecode: str, libraries: Dict[str, str]) -> str:
    """
    Replace library placeholders with deployed addresses.

    Args:
        bytecode: 0x-prefixed creation bytecode
        libraries: Fully qualified library name -> deployed address

    Returns:
        str: Linked bytecode

    Raises:
        DeploymentError: If a placeholder is left unresolved
    """
    linked = bytecode
    for fqn, address in libraries.items():
        linked = linked.replace(
            link_placeholder(fqn), address.lower().removeprefix("0x")
        )

    unresolved = PLACEHOLDER_PATTERN.findall(linked)
    if unresolved:
        raise DeploymentError(
            "Bytecode has unlinked libraries",
            details={"placeholders": sorted(set(unresolved))},
        )
    return linked
