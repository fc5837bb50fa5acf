"""
AAStar V2 contract versions on Sepolia.

All V2 contracts implement the VERSION interface:
- VERSION: string (e.g. "2.0.0")
- VERSION_CODE: uint256 (e.g. 20000)

Records are loaded from the bundled versions file
(``aastar_config/data/contract_versions.json``), which the sync script
keeps in line with the chain.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional

from .versions.models import ContractVersion
from .versions.store import VersionsDocument

_NETWORK = "sepolia"

_DOCUMENT = VersionsDocument.load()

SEPOLIA_V2_VERSIONS: Mapping[str, Mapping[str, ContractVersion]] = MappingProxyType(
    {
        category: MappingProxyType(dict(_DOCUMENT.category(_NETWORK, category)))
        for category in _DOCUMENT.categories(_NETWORK)
    }
)


def get_all_v2_contracts() -> List[ContractVersion]:
    """All V2 contracts with the VERSION interface, in declaration order."""
    return [record for records in SEPOLIA_V2_VERSIONS.values() for record in records.values()]


def get_v2_contract_by_name(name: str) -> Optional[ContractVersion]:
    return next((c for c in get_all_v2_contracts() if c.name == name), None)


def get_v2_contract_by_address(address: str) -> Optional[ContractVersion]:
    """Case-insensitive lookup by contract address."""
    return next((c for c in get_all_v2_contracts() if c.has_address(address)), None)


def is_v2_contract(address: str) -> bool:
    return get_v2_contract_by_address(address) is not None


def get_v2_contracts_by_date(date: str) -> List[ContractVersion]:
    """Contracts deployed on ``date`` (YYYY-MM-DD)."""
    return [c for c in get_all_v2_contracts() if c.deployed_at == date]


@dataclass(frozen=True)
class V2Summary:
    total_contracts: int
    categories: Mapping[str, int]
    latest_deployment: Optional[str]


def get_v2_summary() -> V2Summary:
    contracts = get_all_v2_contracts()
    return V2Summary(
        total_contracts=len(contracts),
        categories=MappingProxyType({name: len(records) for name, records in SEPOLIA_V2_VERSIONS.items()}),
        latest_deployment=max((c.deployed_at for c in contracts), default=None),
    )


V2_SUMMARY = get_v2_summary()
