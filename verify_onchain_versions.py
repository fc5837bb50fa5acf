#!/usr/bin/env python3
"""
Verify on-chain contract versions against the declared versions.

Read-only: prints one table row per contract comparing the declared
VERSION / VERSION_CODE with what the chain returns. Unreachable contracts
show ERROR instead of aborting. Mismatches do not change the exit code.

Usage:
    python verify_onchain_versions.py [--rpc-url URL] [--versions-file PATH] [--reader {cast,web3}]
"""

import argparse
import logging
import sys
from typing import List, Optional

from aastar_config.errors import ToolUnavailableError, VersionsFileError
from aastar_config.settings import SyncSettings
from aastar_config.versions.console import Colors, clear_progress, colored, show_progress
from aastar_config.versions.models import ContractVersion
from aastar_config.versions.reader import READER_KINDS, build_reader, ensure_tool_available
from aastar_config.versions.report import MATCH, MISMATCH, verify
from aastar_config.versions.store import VersionsDocument

logger = logging.getLogger(__name__)

BANNER_WIDTH = 124


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compare declared contract versions with on-chain values")
    parser.add_argument("--rpc-url", type=str, default=None, help="RPC URL (overrides SEPOLIA_RPC_URL)")
    parser.add_argument(
        "--versions-file",
        type=str,
        default=None,
        help="Versions file to verify (overrides AASTAR_VERSIONS_FILE)",
    )
    parser.add_argument(
        "--reader",
        choices=READER_KINDS,
        default="cast",
        help="How to read on-chain values (default: cast)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Show each chain call")
    return parser.parse_args(argv)


def print_banner() -> None:
    print("╔" + "═" * BANNER_WIDTH + "╗")
    print("║" + "On-Chain Version Verification Table".center(BANNER_WIDTH) + "║")
    print("╚" + "═" * BANNER_WIDTH + "╝")
    print()


def print_row(line: str) -> None:
    clear_progress()
    print(line)


def print_check(contract: ContractVersion) -> None:
    show_progress(f"Checking {contract.name}...")


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(message)s")

    settings = SyncSettings()
    rpc_url = args.rpc_url or settings.sepolia_rpc_url
    versions_file = args.versions_file or settings.versions_file
    logger.debug(f"Versions file: {versions_file} (reader: {args.reader})")

    print_banner()
    print(f"RPC: {rpc_url}")
    print()

    if args.reader == "cast":
        try:
            ensure_tool_available(settings.cast_bin)
        except ToolUnavailableError as exc:
            print(colored(f"❌ Error: {exc}", Colors.RED), file=sys.stderr)
            return 1

    try:
        document = VersionsDocument.load(versions_file)
    except VersionsFileError as exc:
        print(colored(f"❌ Error: {exc}", Colors.RED), file=sys.stderr)
        return 1

    reader = build_reader(args.reader, rpc_url, cast_bin=settings.cast_bin, timeout=settings.cast_timeout)
    results = verify(document.records(), reader, out=print_row, on_check=print_check)

    mismatched = [result for result in results if result.needs_update]
    print()
    print(f"Legend: {MATCH} = Match, {MISMATCH} = Mismatch or Error")
    print()
    if mismatched:
        names = ", ".join(result.contract.name for result in mismatched)
        print(colored(f"{len(mismatched)} of {len(results)} contract(s) differ: {names}", Colors.YELLOW))
    else:
        print(colored(f"All {len(results)} contract(s) match on-chain versions.", Colors.GREEN))
    print()
    print("Note: This verification queries on-chain data and may take a few minutes depending on RPC response time.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
