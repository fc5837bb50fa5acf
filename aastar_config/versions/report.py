"""
Read-only verification table of declared vs. on-chain versions.

Unreachable contracts or missing VERSION functions render as ``ERROR``
cells with a mismatch mark; the report never writes any file.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional

from .models import ComparisonResult, ContractVersion, compare_versions
from .reader import VersionReader

logger = logging.getLogger(__name__)

MATCH = "✅"
MISMATCH = "❌"
ERROR_CELL = "ERROR"

# (header, width)
COLUMNS = (
    ("Contract Name", 18),
    ("Address", 42),
    ("Config", 8),
    ("On-Chain", 8),
    ("✓", 1),
    ("Config Code", 12),
    ("On-Chain Code", 13),
    ("✓", 1),
)


def _row(cells: Iterable[str]) -> str:
    padded = [str(cell).ljust(width) for cell, (_, width) in zip(cells, COLUMNS)]
    return "| " + " | ".join(padded) + " |"


def format_header() -> str:
    return _row(title for title, _ in COLUMNS)


def format_separator() -> str:
    return "|" + "|".join("─" * (width + 2) for _, width in COLUMNS) + "|"


def format_row(result: ComparisonResult) -> str:
    contract = result.contract
    sample = result.sample
    return _row(
        [
            contract.name,
            contract.address,
            contract.version,
            sample.version or ERROR_CELL,
            MATCH if result.version_matches else MISMATCH,
            str(contract.version_code),
            sample.version_code or ERROR_CELL,
            MATCH if result.version_code_matches else MISMATCH,
        ]
    )


def format_table(results: Iterable[ComparisonResult]) -> str:
    lines = [format_header(), format_separator()]
    lines.extend(format_row(result) for result in results)
    return "\n".join(lines)


def verify(
    contracts: Iterable[ContractVersion],
    reader: VersionReader,
    out: Callable[[str], None] = print,
    on_check: Optional[Callable[[ContractVersion], None]] = None,
) -> List[ComparisonResult]:
    """
    Fetch and compare every contract, emitting one table row per contract through ``out``.

    Returns:
        The comparison results in input order
    """
    out(format_header())
    out(format_separator())

    results: List[ComparisonResult] = []
    for contract in contracts:
        if on_check is not None:
            on_check(contract)
        sample = reader.fetch(contract.address)
        result = compare_versions(contract, sample)
        if not sample.has_version_interface:
            logger.debug(f"{contract.name}: VERSION interface unreadable at {contract.address}")
        results.append(result)
        out(format_row(result))

    return results
