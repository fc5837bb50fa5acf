"""
AAStar shared configuration package.

This package provides:
- Contract addresses and per-network contract tables
- Declared V2 contract versions (VERSION / VERSION_CODE)
- Network, community, branding and common constants
- Minimal ABIs for the VERSION interface and ERC-20 reads
"""

from .abis import ABIS, ERC20_ABI, VERSION_ABI, get_abi
from .addresses import (
    ALL_ADDRESSES,
    COMMUNITY_OWNERS,
    CORE_ADDRESSES,
    MONITORING_ADDRESSES,
    OFFICIAL_ADDRESSES,
    PAYMASTER_ADDRESSES,
    TEST_COMMUNITIES,
    TEST_TOKEN_ADDRESSES,
    TOKEN_ADDRESSES,
)
from .branding import BRANDING, LINKS
from .communities import (
    AASTAR_COMMUNITY,
    BREAD_COMMUNITY,
    COMMUNITIES,
    CommunityConfig,
    NodeType,
    get_all_community_configs,
    get_community_config,
    is_registered_community,
)
from .contract_versions import (
    SEPOLIA_V2_VERSIONS,
    V2_SUMMARY,
    get_all_v2_contracts,
    get_v2_contract_by_address,
    get_v2_contract_by_name,
    get_v2_contracts_by_date,
    get_v2_summary,
    is_v2_contract,
)
from .contracts import (
    CONTRACT_CATEGORIES,
    CONTRACT_METADATA,
    CONTRACTS,
    SEPOLIA_CONTRACTS,
    get_communities,
    get_community,
    get_contract,
    get_contract_networks,
    get_contracts,
    get_core_contracts,
    get_deployment_date,
    get_entry_point,
    get_paymaster_v4_1,
    get_super_paymaster_v2,
    get_test_token_contracts,
    get_token_contracts,
    is_contract_network_supported,
)
from .errors import (
    AbiNotFoundError,
    CategoryNotFoundError,
    ContractNotFoundError,
    NetworkNotFoundError,
    SharedConfigError,
    ToolUnavailableError,
    VersionsFileError,
)
from .networks import (
    NETWORKS,
    NetworkConfig,
    get_block_explorer,
    get_network,
    get_rpc_url,
    get_supported_networks,
    is_network_supported,
)
from .versions.models import ContractVersion

__all__ = [
    # ABIs
    "ABIS",
    "ERC20_ABI",
    "VERSION_ABI",
    "get_abi",
    # Addresses
    "ALL_ADDRESSES",
    "COMMUNITY_OWNERS",
    "CORE_ADDRESSES",
    "MONITORING_ADDRESSES",
    "OFFICIAL_ADDRESSES",
    "PAYMASTER_ADDRESSES",
    "TEST_COMMUNITIES",
    "TEST_TOKEN_ADDRESSES",
    "TOKEN_ADDRESSES",
    # Branding
    "BRANDING",
    "LINKS",
    # Communities
    "AASTAR_COMMUNITY",
    "BREAD_COMMUNITY",
    "COMMUNITIES",
    "CommunityConfig",
    "NodeType",
    "get_all_community_configs",
    "get_community_config",
    "is_registered_community",
    # Contract versions
    "ContractVersion",
    "SEPOLIA_V2_VERSIONS",
    "V2_SUMMARY",
    "get_all_v2_contracts",
    "get_v2_contract_by_address",
    "get_v2_contract_by_name",
    "get_v2_contracts_by_date",
    "get_v2_summary",
    "is_v2_contract",
    # Contracts
    "CONTRACT_CATEGORIES",
    "CONTRACT_METADATA",
    "CONTRACTS",
    "SEPOLIA_CONTRACTS",
    "get_communities",
    "get_community",
    "get_contract",
    "get_contract_networks",
    "get_contracts",
    "get_core_contracts",
    "get_deployment_date",
    "get_entry_point",
    "get_paymaster_v4_1",
    "get_super_paymaster_v2",
    "get_test_token_contracts",
    "get_token_contracts",
    "is_contract_network_supported",
    # Errors
    "AbiNotFoundError",
    "CategoryNotFoundError",
    "ContractNotFoundError",
    "NetworkNotFoundError",
    "SharedConfigError",
    "ToolUnavailableError",
    "VersionsFileError",
    # Networks
    "NETWORKS",
    "NetworkConfig",
    "get_block_explorer",
    "get_network",
    "get_rpc_url",
    "get_supported_networks",
    "is_network_supported",
]
