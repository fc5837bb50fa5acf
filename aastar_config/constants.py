"""Common constants shared by AAStar front-ends and tooling."""

from types import MappingProxyType
from typing import Mapping

# Default faucet API for testnet token requests
FAUCET_API_URL = "https://faucet-aastar.vercel.app"

# Fees in basis points
SERVICE_FEE_RATE = 200  # 2%
MAX_SERVICE_FEE = 1000  # 10%
BPS_DENOMINATOR = 10000  # 100%

# Test minting defaults (token units)
DEFAULT_GAS_TOKEN_MINT_AMOUNT = "100"
DEFAULT_USDT_MINT_AMOUNT = "10"

TEST_ACCOUNT_POOL_SIZE = 20

# Minimum stake per node type, in sGT
NODE_STAKE_AMOUNTS: Mapping[str, int] = MappingProxyType(
    {
        "LITE": 30,
        "STANDARD": 100,
        "SUPER": 300,
        "ENTERPRISE": 1000,
    }
)

DEFAULT_APNTS_PRICE_USD = "0.02"


def bps_to_fraction(bps: int) -> float:
    """Convert basis points to a fraction (200 -> 0.02)."""
    return bps / BPS_DENOMINATOR
