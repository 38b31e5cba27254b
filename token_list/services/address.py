"""Helpers for checking token contract addresses against their chain."""

from __future__ import annotations

import re
from functools import lru_cache

from eth_utils import is_checksum_address

_BASE58_ALPHABET = set("123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz")

_EVM_ADDRESS_RE = re.compile(r"^0x[a-fA-F0-9]{40}$")

# Cluster ids used by Solana token lists (mainnet-beta, testnet, devnet).
SOLANA_CHAIN_IDS = frozenset({101, 102, 103})


def is_solana_chain_id(chain_id: int) -> bool:
    return chain_id in SOLANA_CHAIN_IDS


@lru_cache(maxsize=1024)
def is_valid_solana_address(address: str) -> bool:
    if not address:
        return False
    length = len(address)
    if length < 32 or length > 44:
        return False
    return all(ch in _BASE58_ALPHABET for ch in address)


def is_valid_evm_address(address: str) -> bool:
    return bool(_EVM_ADDRESS_RE.fullmatch(address))


def is_valid_address_for_chain(address: str, chain_id: int) -> bool:
    """Format check only; whether a contract exists at the address is never checked."""

    if not address:
        return False
    if is_solana_chain_id(chain_id):
        return is_valid_solana_address(address)
    # Every other chain id is treated as EVM-compatible.
    return is_valid_evm_address(address)


def is_checksummed_for_chain(address: str, chain_id: int) -> bool:
    """Return True if the address carries a valid EIP-55 checksum.

    Non-EVM chains have no checksum convention and always pass.
    """

    if is_solana_chain_id(chain_id):
        return True
    return is_valid_evm_address(address) and is_checksum_address(address)


__all__ = [
    "SOLANA_CHAIN_IDS",
    "is_solana_chain_id",
    "is_valid_address_for_chain",
    "is_valid_evm_address",
    "is_valid_solana_address",
    "is_checksummed_for_chain",
]
