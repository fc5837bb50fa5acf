"""
Settings for the version sync / verify scripts.

Loaded from the environment and dotenv files. ``.env.local`` takes
precedence over ``.env``; real environment variables take precedence over
both. Empty values fall back to the defaults.

Core modules never read these directly: scripts resolve them once and pass
plain values (RPC URL, cast binary, file path) down.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .versions.reader import DEFAULT_CAST_BIN
from .versions.store import DEFAULT_VERSIONS_FILE

# Public Sepolia endpoint used when SEPOLIA_RPC_URL is not set
DEFAULT_SEPOLIA_RPC = "https://rpc.sepolia.org"


class SyncSettings(BaseSettings):
    """Environment configuration for on-chain version tooling."""

    sepolia_rpc_url: str = Field(DEFAULT_SEPOLIA_RPC, description="RPC endpoint passed to cast / web3")
    cast_bin: str = Field(DEFAULT_CAST_BIN, description="Foundry cast executable")
    cast_timeout: Optional[float] = Field(None, description="Per-call subprocess timeout in seconds")
    versions_file: Path = Field(
        DEFAULT_VERSIONS_FILE,
        validation_alias="AASTAR_VERSIONS_FILE",
        description="Versions file read and rewritten by the sync script",
    )

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
    )
