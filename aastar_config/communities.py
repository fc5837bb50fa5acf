"""
Community configurations (Registry v2.2.0, registered 2025-11-08).

Communities are indexed by the lower-cased community address so that
lookups accept any checksum casing.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

from .addresses import TEST_COMMUNITIES, TEST_TOKEN_ADDRESSES, TOKEN_ADDRESSES


class NodeType(IntEnum):
    """Node type as stored on-chain by the Registry."""

    PAYMASTER_AOA = 0  # AOA independent paymaster
    PAYMASTER_SUPER = 1  # SuperPaymaster v2 shared mode
    ANODE = 2  # community computation node
    KMS = 3  # key management service node


@dataclass(frozen=True)
class CommunityConfig:
    name: str
    ens_name: str
    address: str
    xpnts_token: str
    supported_sbts: Tuple[str, ...]
    node_type: NodeType
    is_active: bool
    allow_permissionless_mint: bool
    staked_amount: str  # GT
    registered_at: int  # unix seconds


# SuperPaymaster shared mode (AOA+), pays gas in aPNTs, MySBT identity
AASTAR_COMMUNITY = CommunityConfig(
    name="AAstar Community",
    ens_name="aastar.eth",
    address=TEST_COMMUNITIES["aastar"],
    xpnts_token=TEST_TOKEN_ADDRESSES["aPNTs"],
    supported_sbts=(TOKEN_ADDRESSES["mySBT"],),
    node_type=NodeType.PAYMASTER_SUPER,
    is_active=True,
    allow_permissionless_mint=True,
    staked_amount="50",
    registered_at=1762588812,
)

# Independent AOA paymaster, pays gas in bPNTs, MySBT identity
BREAD_COMMUNITY = CommunityConfig(
    name="Bread Community",
    ens_name="bread.eth",
    address=TEST_COMMUNITIES["bread"],
    xpnts_token=TEST_TOKEN_ADDRESSES["bPNTs"],
    supported_sbts=(TOKEN_ADDRESSES["mySBT"],),
    node_type=NodeType.PAYMASTER_AOA,
    is_active=True,
    allow_permissionless_mint=False,
    staked_amount="50",
    registered_at=1762588812,
)


COMMUNITIES: Mapping[str, CommunityConfig] = MappingProxyType(
    {community.address.lower(): community for community in (AASTAR_COMMUNITY, BREAD_COMMUNITY)}
)


def get_community_config(address: str) -> Optional[CommunityConfig]:
    return COMMUNITIES.get(address.lower())


def get_all_community_configs() -> List[CommunityConfig]:
    return list(COMMUNITIES.values())


def is_registered_community(address: str) -> bool:
    return address.lower() in COMMUNITIES
