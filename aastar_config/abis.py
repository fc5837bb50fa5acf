"""
Minimal read-only ABIs.

Only the fragments the shared tooling actually calls are bundled: the
VERSION interface implemented by every V2 contract, plus the ERC-20 view
functions for the token contracts.
"""

from __future__ import annotations

import copy
from types import MappingProxyType
from typing import Dict, List, Mapping

from .errors import AbiNotFoundError


VERSION_ABI: List[Dict] = [
    {
        "inputs": [],
        "name": "VERSION",
        "outputs": [{"name": "", "type": "string"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [],
        "name": "VERSION_CODE",
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
]


ERC20_ABI: List[Dict] = [
    {
        "constant": True,
        "inputs": [{"name": "_owner", "type": "address"}],
        "name": "balanceOf",
        "outputs": [{"name": "", "type": "uint256"}],
        "type": "function",
    },
    {
        "constant": True,
        "inputs": [],
        "name": "symbol",
        "outputs": [{"name": "", "type": "string"}],
        "type": "function",
    },
    {
        "constant": True,
        "inputs": [],
        "name": "decimals",
        "outputs": [{"name": "", "type": "uint8"}],
        "type": "function",
    },
    {
        "constant": True,
        "inputs": [],
        "name": "totalSupply",
        "outputs": [{"name": "", "type": "uint256"}],
        "type": "function",
    },
]


VERSIONED_TOKEN_ABI: List[Dict] = VERSION_ABI + ERC20_ABI


ABIS: Mapping[str, List[Dict]] = MappingProxyType(
    {
        # Core
        "Registry": VERSION_ABI,
        "GToken": VERSIONED_TOKEN_ABI,
        "GTokenStaking": VERSION_ABI,
        "SuperPaymasterV2": VERSION_ABI,
        "PaymasterFactory": VERSION_ABI,
        # Tokens
        "xPNTsToken": VERSIONED_TOKEN_ABI,
        "xPNTsFactory": VERSION_ABI,
        "MySBT": VERSION_ABI,
        # Monitoring
        "DVTValidator": VERSION_ABI,
        "BLSAggregator": VERSION_ABI,
    }
)


def get_abi(contract_name: str) -> List[Dict]:
    """Return a copy of the bundled ABI for ``contract_name``."""
    try:
        return copy.deepcopy(ABIS[contract_name])
    except KeyError:
        raise AbiNotFoundError(f"No ABI bundled for contract '{contract_name}'") from None
