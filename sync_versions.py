#!/usr/bin/env python3
"""
Auto-sync contract versions from on-chain data.

Reads VERSION and VERSION_CODE from every deployed V2 contract and updates
the versions file (aastar_config/data/contract_versions.json) where the
declared values differ. Updated records also get today's date as deployedAt.

Configuration comes from the environment (.env.local overrides .env):
    SEPOLIA_RPC_URL       RPC endpoint (default: https://rpc.sepolia.org)
    CAST_BIN              Foundry cast executable (default: cast)
    CAST_TIMEOUT          Per-call timeout in seconds (default: none)
    AASTAR_VERSIONS_FILE  Versions file to sync (default: bundled file)

Usage:
    python sync_versions.py [--rpc-url URL] [--versions-file PATH] [--reader {cast,web3}] [--dry-run]
"""

import argparse
import logging
import sys
from typing import List, Optional

from aastar_config.errors import ToolUnavailableError, VersionsFileError
from aastar_config.settings import SyncSettings
from aastar_config.versions.console import Colors, clear_progress, colored, show_progress
from aastar_config.versions.models import ContractVersion, VersionKey
from aastar_config.versions.reader import READER_KINDS, build_reader, ensure_tool_available
from aastar_config.versions.reconcile import OutcomeStatus, VersionOutcome, sync_versions_file

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Sync declared contract versions with on-chain VERSION / VERSION_CODE",
    )
    parser.add_argument("--rpc-url", type=str, default=None, help="RPC URL (overrides SEPOLIA_RPC_URL)")
    parser.add_argument(
        "--versions-file",
        type=str,
        default=None,
        help="Versions file to sync (overrides AASTAR_VERSIONS_FILE)",
    )
    parser.add_argument(
        "--reader",
        choices=READER_KINDS,
        default="cast",
        help="How to read on-chain values (default: cast)",
    )
    parser.add_argument("--dry-run", action="store_true", help="Report changes without writing the file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show each chain call")
    return parser.parse_args(argv)


def print_check(key: VersionKey, contract: ContractVersion) -> None:
    show_progress(f"Checking {contract.name}...")


def print_outcome(outcome: VersionOutcome) -> None:
    clear_progress()
    name = outcome.before.name

    if outcome.status is OutcomeStatus.SKIPPED:
        print(colored(f"⚠️  {name}: No VERSION interface found", Colors.YELLOW))
    elif outcome.status is OutcomeStatus.UPDATED:
        print(colored(f"🔄 {name}: Update needed", Colors.YELLOW))
        print(f"   Version: {outcome.before.version} → {outcome.after.version}")
        print(f"   Code: {outcome.before.version_code} → {outcome.after.version_code}")
    else:
        print(colored(f"✅ {name}: Up to date", Colors.GREEN))


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(message)s")

    settings = SyncSettings()
    rpc_url = args.rpc_url or settings.sepolia_rpc_url
    versions_file = args.versions_file or settings.versions_file
    logger.debug(f"Versions file: {versions_file} (reader: {args.reader})")

    print("🔄 Auto-syncing contract versions from on-chain data")
    print("==================================================")
    print(f"RPC: {rpc_url}")
    print()

    if args.reader == "cast":
        try:
            ensure_tool_available(settings.cast_bin)
        except ToolUnavailableError as exc:
            print(colored(f"❌ Error: {exc}", Colors.RED), file=sys.stderr)
            return 1

    reader = build_reader(args.reader, rpc_url, cast_bin=settings.cast_bin, timeout=settings.cast_timeout)

    print("Checking contracts for version updates...")
    print()

    try:
        report = sync_versions_file(
            reader,
            versions_file,
            dry_run=args.dry_run,
            on_check=print_check,
            on_outcome=print_outcome,
        )
    except VersionsFileError as exc:
        clear_progress()
        print(colored(f"❌ Error: {exc}", Colors.RED), file=sys.stderr)
        return 1

    print()

    if report.written:
        print(colored("✅ Contract versions updated successfully!", Colors.GREEN))
        print()
        print(f"Updated file: {report.path}")
        print()
        print("Next steps:")
        print(f"1. Review the changes: git diff {report.path}")
        print("2. Run the test suite: pytest")
        print("3. Commit the changes")
    elif report.has_updates:
        print(colored(f"🔄 {len(report.updated)} contract(s) need an update (dry run, nothing written)", Colors.YELLOW))
    else:
        print(colored("✅ All contracts are up to date!", Colors.GREEN))

    if report.skipped:
        print()
        print(f"Skipped {len(report.skipped)} contract(s) without a readable VERSION interface.")

    print()
    print("Note: This script only updates contracts with VERSION interface.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
