"""
On-chain VERSION / VERSION_CODE readers.

This module provides:
- CastVersionReader: shells out to Foundry's ``cast call`` (two processes per contract)
- Web3VersionReader: the same two reads through web3.py
- ensure_tool_available: one-time check that ``cast`` can be executed

Readers never raise on a failed read. A revert, missing function, RPC
error, timeout or missing binary all come back as ``None``; the cause is
only logged. Any other exception propagates.
"""

from __future__ import annotations

import logging
import subprocess
from typing import Optional, Protocol

from web3 import Web3
from web3.exceptions import Web3Exception

from ..abis import VERSION_ABI
from ..errors import ToolUnavailableError
from .models import OnChainVersionSample

logger = logging.getLogger(__name__)

DEFAULT_CAST_BIN = "cast"

# Timeout for Web3VersionReader HTTP requests
DEFAULT_WEB3_TIMEOUT = 10  # seconds

VERSION_SIGNATURE = "VERSION()(string)"
VERSION_CODE_SIGNATURE = "VERSION_CODE()(uint256)"

READER_KINDS = ("cast", "web3")

# Revert or missing function (Web3Exception, ValueError) and transport failures (OSError)
READ_ERRORS = (Web3Exception, ValueError, OSError)


class VersionReader(Protocol):
    def fetch(self, address: str) -> OnChainVersionSample: ...


def ensure_tool_available(cast_bin: str = DEFAULT_CAST_BIN) -> str:
    """
    Check that ``cast`` runs, returning its version string.

    Raises:
        ToolUnavailableError: If the binary is missing or ``--version`` fails
    """
    try:
        result = subprocess.run(
            [cast_bin, "--version"],
            capture_output=True,
            text=True,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError) as exc:
        raise ToolUnavailableError(f"'{cast_bin}' command not found. Please install Foundry.") from exc
    return result.stdout.strip()


def _parse_version(output: str) -> Optional[str]:
    value = output.strip().replace('"', "")
    return value or None


def _parse_version_code(output: str) -> Optional[str]:
    # cast prints large integers as "20104 [2.01e4]"; the first token is the value.
    tokens = output.split()
    if not tokens or not tokens[0].isdigit():
        return None
    return tokens[0]


class CastVersionReader:
    """Reads the VERSION interface by running ``cast call`` against an RPC endpoint."""

    def __init__(
        self,
        rpc_url: str,
        cast_bin: str = DEFAULT_CAST_BIN,
        timeout: Optional[float] = None,
    ) -> None:
        self.rpc_url = rpc_url
        self.cast_bin = cast_bin
        self.timeout = timeout

    def _call(self, address: str, signature: str) -> Optional[str]:
        cmd = [self.cast_bin, "call", address, signature, "--rpc-url", self.rpc_url]
        logger.debug(f"Running: {' '.join(cmd)}")
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                check=True,
                timeout=self.timeout,
            )
        except subprocess.CalledProcessError as exc:
            logger.debug(f"cast call {signature} on {address} failed: {(exc.stderr or '').strip()}")
            return None
        except subprocess.TimeoutExpired:
            logger.debug(f"cast call {signature} on {address} timed out after {self.timeout}s")
            return None
        except OSError as exc:
            logger.debug(f"Could not run {self.cast_bin}: {exc}")
            return None
        return result.stdout

    def read_version(self, address: str) -> Optional[str]:
        output = self._call(address, VERSION_SIGNATURE)
        return None if output is None else _parse_version(output)

    def read_version_code(self, address: str) -> Optional[str]:
        output = self._call(address, VERSION_CODE_SIGNATURE)
        return None if output is None else _parse_version_code(output)

    def fetch(self, address: str) -> OnChainVersionSample:
        return OnChainVersionSample(
            address=address,
            version=self.read_version(address),
            version_code=self.read_version_code(address),
        )


class Web3VersionReader:
    """Reads the VERSION interface with eth_call through web3.py."""

    def __init__(
        self,
        rpc_url: Optional[str] = None,
        timeout: Optional[float] = DEFAULT_WEB3_TIMEOUT,
        w3: Optional[Web3] = None,
    ) -> None:
        if w3 is None:
            if not rpc_url:
                raise ValueError("Web3VersionReader needs an rpc_url or a Web3 instance")
            w3 = Web3(Web3.HTTPProvider(rpc_url, request_kwargs={"timeout": timeout}))
        self.w3 = w3

    def _functions(self, address: str):
        contract = self.w3.eth.contract(
            address=Web3.to_checksum_address(address.lower()),
            abi=VERSION_ABI,
        )
        return contract.functions

    def read_version(self, address: str) -> Optional[str]:
        try:
            value = self._functions(address).VERSION().call()
        except READ_ERRORS as exc:
            logger.debug(f"VERSION() on {address} failed: {exc}")
            return None
        return _parse_version(str(value))

    def read_version_code(self, address: str) -> Optional[str]:
        try:
            value = self._functions(address).VERSION_CODE().call()
        except READ_ERRORS as exc:
            logger.debug(f"VERSION_CODE() on {address} failed: {exc}")
            return None
        return _parse_version_code(str(value))

    def fetch(self, address: str) -> OnChainVersionSample:
        return OnChainVersionSample(
            address=address,
            version=self.read_version(address),
            version_code=self.read_version_code(address),
        )


def build_reader(
    kind: str,
    rpc_url: str,
    cast_bin: str = DEFAULT_CAST_BIN,
    timeout: Optional[float] = None,
) -> VersionReader:
    """Create a reader by name ("cast" or "web3")."""
    if kind == "cast":
        return CastVersionReader(rpc_url, cast_bin=cast_bin, timeout=timeout)
    if kind == "web3":
        return Web3VersionReader(rpc_url, timeout=timeout if timeout is not None else DEFAULT_WEB3_TIMEOUT)
    raise ValueError(f"Unknown reader '{kind}'. Expected one of: {', '.join(READER_KINDS)}")
