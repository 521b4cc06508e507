"""
Custom error selector lookup for the HealthcareRecordSystem contract.

Reverse-maps an opaque 4-byte revert selector observed on-chain to one of
the contract's custom error signatures. Update KNOWN_ERROR_SIGNATURES when
errors change.
"""

import re
from typing import Iterable, List, Optional

from healthcare_chain.core.exceptions import InvalidInputError
from healthcare_chain.core.logging import log_selector_match
from healthcare_chain.domain.models.selector import (
    MatchResult,
    NoMatchFound,
    SelectorMatch,
)
from healthcare_chain.infrastructure.blockchain.hashing import (
    CryptoHasher,
    TextEncoder,
    default_encoder,
    default_hasher,
)

SELECTOR_PATTERN = re.compile(r"0[xX][0-9a-fA-F]{8}")
HEX_DATA_PATTERN = re.compile(r"0[xX](?:[0-9a-fA-F]{2})*")

# Searched in order; earlier entries win.
KNOWN_ERROR_SIGNATURES: List[str] = [
    # HealthcareRecordSystem
    "UnauthorizedAccess()",
    "NotPatientOwner()",
    # OpenZeppelin AccessControl / Ownable
    "AccessControlUnauthorizedAccount(address,bytes32)",
    "AccessControlBadConfirmation()",
    "OwnableUnauthorizedAccount(address)",
    "OwnableInvalidOwner(address)",
    # Solidity builtins
    "Error(string)",
    "Panic(uint256)",
]


def normalize_selector(value: str) -> str:
    """Return the lowercase form of a 0x-prefixed 4-byte selector.

    Raises InvalidInputError if value is not 0x (or 0X) followed by 8 hex digits.
    """
    if not isinstance(value, str) or not SELECTOR_PATTERN.fullmatch(value):
        raise InvalidInputError(
            f"Invalid selector: {value!r}",
            details={"expected": "0x followed by 8 hexadecimal digits"},
        )
    return "0x" + value[2:].lower()


def _validate_signature(signature: str, index: Optional[int] = None) -> None:
    if not isinstance(signature, str) or not signature.strip():
        details = {} if index is None else {"index": index}
        raise InvalidInputError("Error signature must not be empty", details=details)


def selector_of(
    signature: str,
    hasher: Optional[CryptoHasher] = None,
    encoder: Optional[TextEncoder] = None,
) -> str:
    """
    Derive the 4-byte selector of an error or function signature.

    Args:
        signature: Canonical signature, e.g. "NotPatientOwner()"
        hasher: Keccak-256 provider (web3 by default)
        encoder: Text encoder (UTF-8 by default)

    Returns:
        str: Lowercase 0x-prefixed selector, always 10 characters
    """
    _validate_signature(signature)
    hasher = hasher or default_hasher
    encoder = encoder or default_encoder

    digest = hasher.keccak256(encoder.encode(signature))
    return "0x" + bytes(digest[:4]).hex()


def find_match(
    signatures: Iterable[str],
    target: str,
    hasher: Optional[CryptoHasher] = None,
    encoder: Optional[TextEncoder] = None,
) -> MatchResult:
    """
    Find the first signature whose selector equals target.

    All inputs are validated before anything is hashed. Scanning stops at
    the first hit, so later candidates are never hashed.

    Args:
        signatures: Ordered candidate error signatures
        target: 0x-prefixed selector, any case
        hasher: Keccak-256 provider (web3 by default)
        encoder: Text encoder (UTF-8 by default)

    Returns:
        SelectorMatch for the first hit, NoMatchFound otherwise

    Raises:
        InvalidInputError: If target is malformed or a signature is empty
    """
    normalized = normalize_selector(target)
    candidates = list(signatures)
    for index, signature in enumerate(candidates):
        _validate_signature(signature, index)

    scanned = 0
    for index, signature in enumerate(candidates):
        scanned += 1
        selector = selector_of(signature, hasher=hasher, encoder=encoder)
        if selector == normalized:
            log_selector_match(normalized, signature=signature, scanned=scanned)
            return SelectorMatch(signature=signature, selector=selector, index=index)

    log_selector_match(normalized, scanned=scanned)
    return NoMatchFound(target=normalized, scanned=scanned)


def selector_from_revert_data(data: str) -> str:
    """
    Extract the 4-byte selector from raw revert data.

    Args:
        data: 0x-prefixed hex revert payload (selector followed by ABI-encoded args)

    Returns:
        str: Lowercase 0x-prefixed selector
    """
    if not isinstance(data, str) or not HEX_DATA_PATTERN.fullmatch(data):
        raise InvalidInputError(
            "Revert data must be 0x-prefixed hex with whole bytes",
            details={"data": data if isinstance(data, str) else repr(data)},
        )
    if len(data) < 10:
        raise InvalidInputError(
            "Revert data is shorter than a 4-byte selector",
            details={"length": (len(data) - 2) // 2},
        )
    return "0x" + data[2:10].lower()
