"""
Hashing and text encoding capabilities used for selector derivation.
"""

from typing import Protocol

from web3 import Web3


class CryptoHasher(Protocol):
    """Anything that can produce a 32-byte Keccak-256 digest."""

    def keccak256(self, data: bytes) -> bytes: ...


class TextEncoder(Protocol):
    """Anything that turns signature text into bytes."""

    def encode(self, text: str) -> bytes: ...


class KeccakHasher:
    """Keccak-256 backed by web3 (same digest as ethers.keccak256)."""

    def keccak256(self, data: bytes) -> bytes:
        return bytes(Web3.keccak(data))


class Utf8TextEncoder:
    """UTF-8 encoder (same bytes as ethers.toUtf8Bytes)."""

    def encode(self, text: str) -> bytes:
        return text.encode("utf-8")


default_hasher = KeccakHasher()
default_encoder = Utf8TextEncoder()
