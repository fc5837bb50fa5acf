"""
Exceptions raised by the shared configuration package and its version tools.
"""

from __future__ import annotations


class SharedConfigError(Exception):
    """Base exception for shared config errors."""

    pass


class NetworkNotFoundError(SharedConfigError, LookupError):
    """Raised when a network name is not configured."""


class CategoryNotFoundError(SharedConfigError, LookupError):
    """Raised when a contract category does not exist for a network."""


class ContractNotFoundError(SharedConfigError, LookupError):
    """Raised when a contract name does not exist in a category."""


class AbiNotFoundError(SharedConfigError, LookupError):
    """Raised when no ABI is bundled for a contract name."""


class ToolUnavailableError(SharedConfigError, RuntimeError):
    """Raised when the external chain query tool (cast) cannot be executed."""


class VersionsFileError(SharedConfigError, ValueError):
    """Raised when the contract versions file cannot be read or parsed."""
