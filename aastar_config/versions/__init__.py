"""
On-chain version tooling.

This package provides:
- Typed records for the versions file and a parse / serialize round trip
- VERSION / VERSION_CODE readers (Foundry cast or web3.py)
- The reconciler used by the sync script and the read-only verification table
"""

from .models import (
    ComparisonResult,
    ContractVersion,
    OnChainVersionSample,
    VersionKey,
    compare_versions,
)
from .reader import (
    CastVersionReader,
    VersionReader,
    Web3VersionReader,
    build_reader,
    ensure_tool_available,
)
from .reconcile import (
    OutcomeStatus,
    ReconcileReport,
    VersionOutcome,
    reconcile,
    sync_versions_file,
)
from .report import format_row, format_table, verify
from .store import DEFAULT_VERSIONS_FILE, VersionsDocument

__all__ = [
    "ComparisonResult",
    "ContractVersion",
    "OnChainVersionSample",
    "VersionKey",
    "compare_versions",
    "CastVersionReader",
    "VersionReader",
    "Web3VersionReader",
    "build_reader",
    "ensure_tool_available",
    "OutcomeStatus",
    "ReconcileReport",
    "VersionOutcome",
    "reconcile",
    "sync_versions_file",
    "format_row",
    "format_table",
    "verify",
    "DEFAULT_VERSIONS_FILE",
    "VersionsDocument",
]
