import json

import pytest

import sync_versions
import verify_onchain_versions
from aastar_config.errors import ToolUnavailableError

from conftest import GTOKEN, MYSBT, REGISTRY, FakeReader


@pytest.fixture(autouse=True)
def isolated(monkeypatch, tmp_path):
    for name in ("SEPOLIA_RPC_URL", "CAST_BIN", "CAST_TIMEOUT", "AASTAR_VERSIONS_FILE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def _tool_missing(cast_bin="cast"):
    raise ToolUnavailableError("cast not found; install Foundry")


def _use_reader(monkeypatch, module, reader):
    built = {}

    def fake_build_reader(kind, rpc_url, cast_bin="cast", timeout=None):
        built.update(kind=kind, rpc_url=rpc_url)
        return reader

    monkeypatch.setattr(module, "ensure_tool_available", lambda cast_bin="cast": "cast 1.0.0")
    monkeypatch.setattr(module, "build_reader", fake_build_reader)
    return built


def test_sync_exits_when_cast_missing(monkeypatch, versions_path, sample_json, capsys):
    monkeypatch.setattr(sync_versions, "ensure_tool_available", _tool_missing)

    assert sync_versions.main(["--versions-file", str(versions_path)]) == 1
    assert "install Foundry" in capsys.readouterr().err
    assert versions_path.read_text(encoding="utf-8") == sample_json


def test_sync_updates_file(monkeypatch, versions_path, capsys):
    reader = FakeReader(
        {
            GTOKEN: ("2.0.0", "20000"),
            REGISTRY: ("2.1.4", "20104"),
            MYSBT: (None, None),
        }
    )
    built = _use_reader(monkeypatch, sync_versions, reader)

    code = sync_versions.main(["--versions-file", str(versions_path), "--rpc-url", "https://rpc.test"])

    assert code == 0
    assert built == {"kind": "cast", "rpc_url": "https://rpc.test"}
    data = json.loads(versions_path.read_text(encoding="utf-8"))
    assert data["sepolia"]["core"]["registry"]["versionCode"] == 20104

    out = capsys.readouterr().out
    assert "Registry: Update needed" in out
    assert "Version: 2.1.3 → 2.1.4" in out
    assert "GToken: Up to date" in out
    assert "MySBT: No VERSION interface found" in out
    assert "Contract versions updated successfully!" in out


def test_sync_all_up_to_date(monkeypatch, versions_path, sample_json, matching_reader, capsys):
    _use_reader(monkeypatch, sync_versions, matching_reader)

    assert sync_versions.main(["--versions-file", str(versions_path)]) == 0
    assert "All contracts are up to date!" in capsys.readouterr().out
    assert versions_path.read_text(encoding="utf-8") == sample_json


def test_sync_dry_run(monkeypatch, versions_path, sample_json, capsys):
    _use_reader(monkeypatch, sync_versions, FakeReader({REGISTRY: ("2.1.4", "20104")}))

    assert sync_versions.main(["--versions-file", str(versions_path), "--dry-run"]) == 0
    assert "dry run" in capsys.readouterr().out
    assert versions_path.read_text(encoding="utf-8") == sample_json


def test_sync_web3_reader_skips_cast_check(monkeypatch, versions_path, matching_reader):
    built = _use_reader(monkeypatch, sync_versions, matching_reader)
    monkeypatch.setattr(sync_versions, "ensure_tool_available", _tool_missing)

    assert sync_versions.main(["--versions-file", str(versions_path), "--reader", "web3"]) == 0
    assert built["kind"] == "web3"


def test_sync_bad_versions_file(monkeypatch, tmp_path, matching_reader, capsys):
    _use_reader(monkeypatch, sync_versions, matching_reader)
    broken = tmp_path / "broken.json"
    broken.write_text("{", encoding="utf-8")

    assert sync_versions.main(["--versions-file", str(broken)]) == 1
    assert "invalid JSON" in capsys.readouterr().err


def test_verify_prints_table_and_never_writes(monkeypatch, versions_path, sample_json, capsys):
    _use_reader(monkeypatch, verify_onchain_versions, FakeReader({GTOKEN: ("2.0.0", "20000")}))

    assert verify_onchain_versions.main(["--versions-file", str(versions_path)]) == 0

    out = capsys.readouterr().out
    assert "On-Chain Version Verification Table" in out
    assert "| GToken " in out
    assert "ERROR" in out
    assert "2 of 3 contract(s) differ: Registry, MySBT" in out
    assert versions_path.read_text(encoding="utf-8") == sample_json


def test_verify_exits_when_cast_missing(monkeypatch, versions_path):
    monkeypatch.setattr(verify_onchain_versions, "ensure_tool_available", _tool_missing)
    assert verify_onchain_versions.main(["--versions-file", str(versions_path)]) == 1
