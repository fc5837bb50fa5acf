"""
Data models for declared and on-chain contract versions.

``ContractVersion`` is the typed form of one record of the versions file;
the other models only live for the duration of a single verify/sync run.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from web3 import Web3


class ContractVersion(BaseModel):
    """Declared version information of one deployed contract."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    name: str
    version: str  # semantic version, e.g. "2.0.0"
    version_code: int = Field(alias="versionCode")  # e.g. 20000
    deployed_at: str = Field(alias="deployedAt")  # YYYY-MM-DD
    address: str
    features: Optional[List[str]] = None

    @field_validator("address")
    @classmethod
    def _validate_address(cls, value: str) -> str:
        # Checksum casing is not enforced; only the hex shape is.
        if not Web3.is_address(value.lower()):
            raise ValueError(f"not a 20-byte hex address: {value!r}")
        return value

    @field_validator("deployed_at")
    @classmethod
    def _validate_deployed_at(cls, value: str) -> str:
        try:
            date.fromisoformat(value)
        except ValueError:
            raise ValueError(f"deployedAt must be YYYY-MM-DD, got {value!r}") from None
        return value

    @property
    def checksum_address(self) -> str:
        return Web3.to_checksum_address(self.address.lower())

    def has_address(self, address: str) -> bool:
        return self.address.lower() == address.lower()

    def to_json_dict(self) -> dict:
        """Serialize with the on-disk (camelCase) keys, omitting absent features."""
        return self.model_dump(by_alias=True, exclude_none=True)


@dataclass(frozen=True)
class VersionKey:
    """Full path of a record in the versions file: network / category / key."""

    network: str
    category: str
    key: str

    def __str__(self) -> str:
        return f"{self.network}.{self.category}.{self.key}"


@dataclass(frozen=True)
class OnChainVersionSample:
    """VERSION / VERSION_CODE as read from chain; None means the read failed."""

    address: str
    version: Optional[str] = None
    version_code: Optional[str] = None

    @property
    def has_version_interface(self) -> bool:
        return bool(self.version) and bool(self.version_code)


@dataclass(frozen=True)
class ComparisonResult:
    contract: ContractVersion
    sample: OnChainVersionSample
    version_matches: bool
    version_code_matches: bool
    key: Optional[VersionKey] = None

    @property
    def needs_update(self) -> bool:
        return not (self.version_matches and self.version_code_matches)


def compare_versions(
    contract: ContractVersion,
    sample: OnChainVersionSample,
    key: Optional[VersionKey] = None,
) -> ComparisonResult:
    """Compare declared values against an on-chain sample (string equality on both fields)."""
    return ComparisonResult(
        contract=contract,
        sample=sample,
        version_matches=sample.version == contract.version,
        version_code_matches=sample.version_code == str(contract.version_code),
        key=key,
    )
