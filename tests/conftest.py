import json
from typing import Dict, List, Optional, Tuple

import pytest

from aastar_config.versions.models import OnChainVersionSample

REGISTRY = "0xf384c592D5258c91805128291c5D4c069DD30CA6"
GTOKEN = "0x99cCb70646Be7A5aeE7aF98cE853a1EA1A676DCc"
MYSBT = "0x73E635Fc9eD362b7061495372B6eDFF511D9E18F"


def record(name, version, version_code, deployed_at, address, features=None):
    data = {
        "name": name,
        "version": version,
        "versionCode": version_code,
        "deployedAt": deployed_at,
        "address": address,
    }
    if features is not None:
        data["features"] = features
    return data


SAMPLE_TABLES = {
    "sepolia": {
        "core": {
            "gToken": record("GToken", "2.0.0", 20000, "2025-11-01", GTOKEN, ["VERSION interface", "Ownable"]),
            "registry": record("Registry", "2.1.3", 20103, "2025-11-01", REGISTRY, ["VERSION interface"]),
        },
        "tokens": {
            "mySBT": record("MySBT", "2.4.0", 20400, "2025-11-01", MYSBT),
        },
    }
}


def canonical(tables) -> str:
    return json.dumps(tables, indent=2) + "\n"


class FakeReader:
    """Returns canned samples keyed by lower-cased address; unknown addresses read as failures."""

    def __init__(self, values: Dict[str, Tuple[Optional[str], Optional[str]]]):
        self.values = {address.lower(): value for address, value in values.items()}
        self.calls: List[str] = []

    def fetch(self, address: str) -> OnChainVersionSample:
        self.calls.append(address)
        version, version_code = self.values.get(address.lower(), (None, None))
        return OnChainVersionSample(address=address, version=version, version_code=version_code)


@pytest.fixture
def sample_json() -> str:
    return canonical(SAMPLE_TABLES)


@pytest.fixture
def versions_path(tmp_path, sample_json):
    path = tmp_path / "contract_versions.json"
    path.write_text(sample_json, encoding="utf-8")
    return path


@pytest.fixture
def matching_reader() -> FakeReader:
    return FakeReader(
        {
            GTOKEN: ("2.0.0", "20000"),
            REGISTRY: ("2.1.3", "20103"),
            MYSBT: ("2.4.0", "20400"),
        }
    )
