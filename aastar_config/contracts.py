"""
Contract tables grouped by network and category.

Addresses come from ``aastar_config.addresses``; detailed VERSION /
VERSION_CODE data lives in ``aastar_config.contract_versions``.

Lookups are exact: network, category and contract names are never
case-normalized.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional

from .addresses import (
    COMMUNITY_OWNERS,
    CORE_ADDRESSES,
    MONITORING_ADDRESSES,
    OFFICIAL_ADDRESSES,
    PAYMASTER_ADDRESSES,
    TEST_TOKEN_ADDRESSES,
    TOKEN_ADDRESSES,
)
from .errors import CategoryNotFoundError, ContractNotFoundError, NetworkNotFoundError


@dataclass(frozen=True)
class RegisteredCommunity:
    """A community registered in the Registry contract."""

    owner: str
    gas_token: str
    ens_name: str
    name: str
    stake: str  # GToken staked in Registry


# Categories whose values are plain contract addresses
ADDRESS_CATEGORIES = (
    "core",  # SuperPaymaster V2, Registry, GToken, GTokenStaking, PaymasterFactory
    "tokens",  # xPNTsFactory, MySBT
    "testTokens",  # mock USDT, aPNTs, bPNTs
    "paymaster",  # PaymasterV4_1 (AOA mode)
    "monitoring",  # DVT, BLS
    "official",  # EntryPoint
)

CONTRACT_CATEGORIES = ADDRESS_CATEGORIES + ("communities",)


SEPOLIA_COMMUNITIES: Mapping[str, RegisteredCommunity] = MappingProxyType(
    {
        # registered 2025-11-01
        "aastar": RegisteredCommunity(
            owner=COMMUNITY_OWNERS["aastarOwner"],
            gas_token=TEST_TOKEN_ADDRESSES["aPNTs"],
            ens_name="aastar.eth",
            name="AAStar",
            stake="50",
        ),
        # registered 2025-11-03
        "breadCommunity": RegisteredCommunity(
            owner=COMMUNITY_OWNERS["breadCommunityOwner"],
            gas_token=TEST_TOKEN_ADDRESSES["bPNTs"],
            ens_name="bread.eth",
            name="BreadCommunity",
            stake="50",
        ),
    }
)

SEPOLIA_CONTRACTS: Mapping[str, Mapping] = MappingProxyType(
    {
        "core": CORE_ADDRESSES,
        "tokens": TOKEN_ADDRESSES,
        "testTokens": TEST_TOKEN_ADDRESSES,
        "paymaster": PAYMASTER_ADDRESSES,
        "monitoring": MONITORING_ADDRESSES,
        "official": OFFICIAL_ADDRESSES,
        "communities": SEPOLIA_COMMUNITIES,
    }
)

# Future networks are added here
CONTRACTS: Mapping[str, Mapping[str, Mapping]] = MappingProxyType(
    {
        "sepolia": SEPOLIA_CONTRACTS,
    }
)


def get_contracts(network: str) -> Mapping[str, Mapping]:
    """
    Get all contract tables for a network.

    Raises:
        NetworkNotFoundError: If the network has no contracts configured
    """
    try:
        return CONTRACTS[network]
    except KeyError:
        raise NetworkNotFoundError(f"Network '{network}' is not supported") from None


def get_contract(network: str, category: str, name: str) -> str:
    """
    Get a single contract address.

    Example:
        get_contract("sepolia", "core", "superPaymasterV2")

    Raises:
        NetworkNotFoundError: Unknown network
        CategoryNotFoundError: Unknown category, or a category that does not hold addresses
        ContractNotFoundError: Unknown contract name within the category
    """
    contracts = get_contracts(network)
    if category not in ADDRESS_CATEGORIES or category not in contracts:
        raise CategoryNotFoundError(f"Category '{category}' not found in network '{network}'")

    try:
        return contracts[category][name]
    except KeyError:
        raise ContractNotFoundError(
            f"Contract '{name}' not found in category '{category}' for network '{network}'"
        ) from None


def get_core_contracts(network: str) -> Mapping[str, str]:
    return get_contracts(network)["core"]


def get_token_contracts(network: str) -> Mapping[str, str]:
    return get_contracts(network)["tokens"]


def get_test_token_contracts(network: str) -> Mapping[str, str]:
    return get_contracts(network)["testTokens"]


def get_paymaster_v4_1(network: str) -> str:
    return get_contract(network, "paymaster", "paymasterV4_1")


def get_super_paymaster_v2(network: str) -> str:
    return get_contract(network, "core", "superPaymasterV2")


def get_entry_point(network: str) -> str:
    """EntryPoint v0.7 address."""
    return get_contract(network, "official", "entryPoint")


def is_contract_network_supported(network: str) -> bool:
    return network in CONTRACTS


def get_contract_networks() -> List[str]:
    return list(CONTRACTS)


@dataclass(frozen=True)
class DeploymentMetadata:
    last_updated: str
    network_id: int
    deployment_dates: Mapping[str, str]


CONTRACT_METADATA: Mapping[str, DeploymentMetadata] = MappingProxyType(
    {
        "sepolia": DeploymentMetadata(
            last_updated="2025-11-02",
            network_id=11155111,
            deployment_dates=MappingProxyType(
                {
                    # Core
                    "gToken": "2025-11-01",
                    "superPaymasterV2": "2025-11-01",
                    "registry": "2025-11-02",  # v2.1.4, allowPermissionlessMint defaults to true
                    "gTokenStaking": "2025-11-01",
                    "paymasterFactory": "2025-11-01",
                    # Tokens
                    "xPNTsFactory": "2025-11-01",
                    "mySBT": "2025-11-01",
                    "aPNTs": "2025-10-30",
                    # Paymaster
                    "paymasterV4_1": "2025-10-15",
                    # Monitoring
                    "dvtValidator": "2025-11-01",
                    "blsAggregator": "2025-11-01",
                }
            ),
        ),
    }
)


def get_deployment_date(network: str, contract_name: str) -> Optional[str]:
    """Deployment date (YYYY-MM-DD), or None when the network or contract is unknown."""
    metadata = CONTRACT_METADATA.get(network)
    if metadata is None:
        return None
    return metadata.deployment_dates.get(contract_name)


def get_communities(network: str) -> Mapping[str, RegisteredCommunity]:
    return get_contracts(network)["communities"]


def get_community(network: str, community_name: str) -> RegisteredCommunity:
    communities = get_communities(network)
    try:
        return communities[community_name]
    except KeyError:
        raise ContractNotFoundError(
            f"Community '{community_name}' not found for network '{network}'"
        ) from None
