"""
Blockchain network configuration.

Static RPC / explorer metadata for every network the shared config knows
about. RPC URLs here are defaults only; the version tools take their
endpoint from settings (see ``aastar_config.settings``).
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping

from .errors import NetworkNotFoundError


@dataclass(frozen=True)
class NativeCurrency:
    name: str
    symbol: str
    decimals: int


@dataclass(frozen=True)
class NetworkConfig:
    name: str
    chain_id: int
    rpc_url: str
    block_explorer: str
    native_currency: NativeCurrency


SEPOLIA_NETWORK = NetworkConfig(
    name="Sepolia",
    chain_id=11155111,
    rpc_url="https://ethereum-sepolia-rpc.publicnode.com",
    block_explorer="https://sepolia.etherscan.io",
    native_currency=NativeCurrency(name="Sepolia ETH", symbol="ETH", decimals=18),
)


NETWORKS: Mapping[str, NetworkConfig] = MappingProxyType(
    {
        "sepolia": SEPOLIA_NETWORK,
    }
)


def get_network(network: str) -> NetworkConfig:
    """Return the config for ``network`` or raise NetworkNotFoundError."""
    try:
        return NETWORKS[network]
    except KeyError:
        raise NetworkNotFoundError(f"Network '{network}' is not supported") from None


def get_rpc_url(network: str) -> str:
    return get_network(network).rpc_url


def get_block_explorer(network: str) -> str:
    return get_network(network).block_explorer


def is_network_supported(network: str) -> bool:
    return network in NETWORKS


def get_supported_networks() -> List[str]:
    return list(NETWORKS)
