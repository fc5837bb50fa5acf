from aastar_config.versions.models import ContractVersion, OnChainVersionSample, compare_versions
from aastar_config.versions.report import (
    ERROR_CELL,
    MATCH,
    MISMATCH,
    format_header,
    format_row,
    format_separator,
    format_table,
    verify,
)
from aastar_config.versions.store import VersionsDocument

from conftest import GTOKEN, MYSBT, REGISTRY, FakeReader, record

REGISTRY_RECORD = ContractVersion.model_validate(record("Registry", "2.1.3", 20103, "2025-11-01", REGISTRY))


def test_mismatch_row():
    sample = OnChainVersionSample(REGISTRY, version="2.1.4", version_code="20104")
    row = format_row(compare_versions(REGISTRY_RECORD, sample))

    cells = [cell.strip() for cell in row.strip("|").split("|")]
    assert cells == ["Registry", REGISTRY, "2.1.3", "2.1.4", MISMATCH, "20103", "20104", MISMATCH]


def test_match_row():
    sample = OnChainVersionSample(REGISTRY, version="2.1.3", version_code="20103")
    result = compare_versions(REGISTRY_RECORD, sample)

    assert result.version_matches and result.version_code_matches
    assert not result.needs_update
    assert format_row(result).count(MATCH) == 2


def test_unreachable_contract_renders_error_cells():
    result = compare_versions(REGISTRY_RECORD, OnChainVersionSample(REGISTRY))
    cells = [cell.strip() for cell in format_row(result).strip("|").split("|")]

    assert cells[3] == ERROR_CELL
    assert cells[6] == ERROR_CELL
    assert cells[4] == cells[7] == MISMATCH
    assert result.needs_update


def test_rows_are_fixed_width():
    short = compare_versions(REGISTRY_RECORD, OnChainVersionSample(REGISTRY))
    full = compare_versions(REGISTRY_RECORD, OnChainVersionSample(REGISTRY, "2.1.3", "20103"))
    assert len(format_row(short)) == len(format_row(full)) == len(format_header())


def test_table_layout():
    table = format_table([compare_versions(REGISTRY_RECORD, OnChainVersionSample(REGISTRY))])
    lines = table.splitlines()
    assert lines[0] == format_header()
    assert lines[1] == format_separator()
    assert lines[2].startswith("| Registry ")


def test_verify_never_raises_and_prints_every_row(sample_json, versions_path):
    document = VersionsDocument.from_json(sample_json)
    reader = FakeReader({GTOKEN: ("2.0.0", "20000"), MYSBT: ("2.5.0", "20500")})
    before = versions_path.read_text(encoding="utf-8")
    lines = []

    results = verify(document.records(), reader, out=lines.append)

    assert len(lines) == 2 + 3
    assert [r.contract.name for r in results] == ["GToken", "Registry", "MySBT"]
    assert [r.needs_update for r in results] == [False, True, True]
    assert ERROR_CELL in lines[3]
    # read-only
    assert versions_path.read_text(encoding="utf-8") == before
