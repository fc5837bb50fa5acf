"""
Version reconciliation: bring declared versions in line with the chain.

For every record of a ``VersionsDocument`` (declaration order), the on-chain
sample is fetched and compared. Records without a VERSION interface are
skipped. Records whose VERSION or VERSION_CODE differ are replaced at their
full path with the on-chain values and today's date as ``deployedAt``.
Nothing is written unless at least one record changed; the whole file is
then replaced in one write.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional

from .models import (
    ContractVersion,
    OnChainVersionSample,
    VersionKey,
    compare_versions,
)
from .reader import VersionReader
from .store import DEFAULT_VERSIONS_FILE, PathLike, VersionsDocument

logger = logging.getLogger(__name__)


class OutcomeStatus(Enum):
    SKIPPED = "skipped"  # no VERSION interface (or the read failed)
    UP_TO_DATE = "up_to_date"
    UPDATED = "updated"


@dataclass(frozen=True)
class VersionOutcome:
    key: VersionKey
    before: ContractVersion
    sample: OnChainVersionSample
    status: OutcomeStatus
    after: Optional[ContractVersion] = None


@dataclass
class ReconcileReport:
    outcomes: List[VersionOutcome] = field(default_factory=list)
    path: Optional[Path] = None
    written: bool = False

    def _with_status(self, status: OutcomeStatus) -> List[VersionOutcome]:
        return [outcome for outcome in self.outcomes if outcome.status is status]

    @property
    def updated(self) -> List[VersionOutcome]:
        return self._with_status(OutcomeStatus.UPDATED)

    @property
    def skipped(self) -> List[VersionOutcome]:
        return self._with_status(OutcomeStatus.SKIPPED)

    @property
    def up_to_date(self) -> List[VersionOutcome]:
        return self._with_status(OutcomeStatus.UP_TO_DATE)

    @property
    def has_updates(self) -> bool:
        return bool(self.updated)


def apply_sample(record: ContractVersion, sample: OnChainVersionSample, today: date) -> ContractVersion:
    """Return ``record`` carrying the on-chain version, version code and ``today`` as deployedAt."""
    return record.model_copy(
        update={
            "version": sample.version,
            "version_code": int(sample.version_code),
            "deployed_at": today.isoformat(),
        }
    )


def reconcile(
    document: VersionsDocument,
    reader: VersionReader,
    today: Optional[date] = None,
    on_check: Optional[Callable[[VersionKey, ContractVersion], None]] = None,
    on_outcome: Optional[Callable[[VersionOutcome], None]] = None,
) -> ReconcileReport:
    """
    Reconcile every record of ``document`` against the chain, updating it in place.

    Args:
        document: Parsed versions file; records needing an update are replaced
        reader: Source of on-chain samples
        today: Date stamped into ``deployedAt`` of updated records (defaults to today)
        on_check: Called before each contract is fetched
        on_outcome: Called with each contract's outcome, in order

    Returns:
        ReconcileReport with one outcome per record
    """
    today = today or date.today()
    report = ReconcileReport()

    for key, record in document.entries():
        if on_check is not None:
            on_check(key, record)

        sample = reader.fetch(record.address)

        if not sample.has_version_interface:
            logger.debug(f"{key}: no VERSION interface at {record.address}")
            outcome = VersionOutcome(key, record, sample, OutcomeStatus.SKIPPED)
        elif compare_versions(record, sample, key).needs_update:
            updated = apply_sample(record, sample, today)
            document.replace(key, updated)
            logger.debug(f"{key}: {record.version}/{record.version_code} -> {updated.version}/{updated.version_code}")
            outcome = VersionOutcome(key, record, sample, OutcomeStatus.UPDATED, after=updated)
        else:
            outcome = VersionOutcome(key, record, sample, OutcomeStatus.UP_TO_DATE, after=record)

        report.outcomes.append(outcome)
        if on_outcome is not None:
            on_outcome(outcome)

    return report


def sync_versions_file(
    reader: VersionReader,
    path: PathLike = DEFAULT_VERSIONS_FILE,
    today: Optional[date] = None,
    dry_run: bool = False,
    on_check: Optional[Callable[[VersionKey, ContractVersion], None]] = None,
    on_outcome: Optional[Callable[[VersionOutcome], None]] = None,
) -> ReconcileReport:
    """
    Load the versions file, reconcile it and write it back if anything changed.

    Raises:
        VersionsFileError: If the file cannot be read or parsed
    """
    path = Path(path)
    document = VersionsDocument.load(path)
    report = reconcile(document, reader, today=today, on_check=on_check, on_outcome=on_outcome)
    report.path = path

    if report.has_updates and not dry_run:
        document.save(path)
        report.written = True
        logger.debug(f"Updated {len(report.updated)} record(s) in {path}")

    return report
