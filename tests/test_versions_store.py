import json

import pytest

from aastar_config.errors import (
    CategoryNotFoundError,
    ContractNotFoundError,
    NetworkNotFoundError,
    VersionsFileError,
)
from aastar_config.versions.models import ContractVersion, VersionKey
from aastar_config.versions.store import DEFAULT_VERSIONS_FILE, VersionsDocument

from conftest import REGISTRY, SAMPLE_TABLES, canonical, record


def test_bundled_file_is_canonical():
    # The sync script rewrites the whole file; a canonical file keeps untouched records byte-identical.
    text = DEFAULT_VERSIONS_FILE.read_text(encoding="utf-8")
    assert VersionsDocument.from_json(text).to_json() == text


def test_round_trip_keeps_bytes(sample_json):
    assert VersionsDocument.from_json(sample_json).to_json() == sample_json


def test_entries_follow_declaration_order(sample_json):
    document = VersionsDocument.from_json(sample_json)
    keys = [str(key) for key, _ in document.entries()]
    assert keys == ["sepolia.core.gToken", "sepolia.core.registry", "sepolia.tokens.mySBT"]
    assert len(document) == 3


def test_record_fields_parsed(sample_json):
    document = VersionsDocument.from_json(sample_json)
    registry = document.get(VersionKey("sepolia", "core", "registry"))
    assert registry.name == "Registry"
    assert registry.version == "2.1.3"
    assert registry.version_code == 20103
    assert registry.deployed_at == "2025-11-01"
    assert registry.has_address(REGISTRY.lower())


def test_missing_features_stay_absent(sample_json):
    document = VersionsDocument.from_json(sample_json)
    assert "features" not in document.to_dict()["sepolia"]["tokens"]["mySBT"]


def test_lookup_errors(sample_json):
    document = VersionsDocument.from_json(sample_json)
    with pytest.raises(NetworkNotFoundError):
        document.get(VersionKey("mainnet", "core", "registry"))
    with pytest.raises(CategoryNotFoundError):
        document.get(VersionKey("sepolia", "monitoring", "registry"))
    with pytest.raises(ContractNotFoundError):
        document.get(VersionKey("sepolia", "core", "Registry"))


def test_replace_requires_existing_key(sample_json):
    document = VersionsDocument.from_json(sample_json)
    new = ContractVersion.model_validate(record("X", "1.0.0", 10000, "2025-01-01", REGISTRY))
    with pytest.raises(ContractNotFoundError):
        document.replace(VersionKey("sepolia", "core", "unknown"), new)


def test_invalid_json_raises():
    with pytest.raises(VersionsFileError):
        VersionsDocument.from_json("{not json")


def test_unknown_field_rejected():
    tables = json.loads(canonical(SAMPLE_TABLES))
    tables["sepolia"]["core"]["registry"]["owner"] = "someone"
    with pytest.raises(VersionsFileError, match="sepolia.core.registry"):
        VersionsDocument.from_json(canonical(tables))


@pytest.mark.parametrize(
    "field, value",
    [
        ("address", "0x1234"),
        ("deployedAt", "01/11/2025"),
        ("versionCode", "not-a-number"),
    ],
)
def test_invalid_record_values_rejected(field, value):
    tables = json.loads(canonical(SAMPLE_TABLES))
    tables["sepolia"]["core"]["gToken"][field] = value
    with pytest.raises(VersionsFileError):
        VersionsDocument.from_json(canonical(tables))


def test_non_object_category_rejected():
    with pytest.raises(VersionsFileError):
        VersionsDocument.from_json(json.dumps({"sepolia": {"core": []}}))


def test_load_missing_file(tmp_path):
    with pytest.raises(VersionsFileError):
        VersionsDocument.load(tmp_path / "missing.json")


def test_save_replaces_file(versions_path, sample_json):
    document = VersionsDocument.load(versions_path)
    key = VersionKey("sepolia", "core", "registry")
    document.replace(key, document.get(key).model_copy(update={"version": "9.9.9"}))
    document.save(versions_path)

    reloaded = VersionsDocument.load(versions_path)
    assert reloaded.get(key).version == "9.9.9"
    # No temp files left behind
    assert [p.name for p in versions_path.parent.iterdir()] == [versions_path.name]
