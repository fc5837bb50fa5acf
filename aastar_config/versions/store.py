"""
Reading and writing the contract versions file.

The file is JSON laid out as ``{network: {category: {key: record}}}``.
It is parsed into typed ``ContractVersion`` records, updated by full path
(``VersionKey``) and serialized back in canonical form: 2-space indent,
declaration order preserved, trailing newline. A file already in canonical
form round-trips byte-for-byte.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Iterator, List, Mapping, Optional, Tuple, Union

from pydantic import ValidationError

from ..errors import (
    CategoryNotFoundError,
    ContractNotFoundError,
    NetworkNotFoundError,
    VersionsFileError,
)
from .models import ContractVersion, VersionKey

logger = logging.getLogger(__name__)

DEFAULT_VERSIONS_FILE = Path(__file__).resolve().parent.parent / "data" / "contract_versions.json"

PathLike = Union[str, os.PathLike]

_Tables = Dict[str, Dict[str, Dict[str, ContractVersion]]]


def _expect_object(value: object, where: str, source: str) -> dict:
    if not isinstance(value, dict):
        raise VersionsFileError(f"{source}: expected an object at '{where}', got {type(value).__name__}")
    return value


class VersionsDocument:
    """In-memory, typed form of the versions file."""

    def __init__(self, tables: _Tables, source: Optional[str] = None) -> None:
        self._tables = tables
        self.source = source

    # --- Parsing / serialization -------------------------------------------------

    @classmethod
    def from_json(cls, text: str, source: str = "<string>") -> "VersionsDocument":
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as exc:
            raise VersionsFileError(f"{source}: invalid JSON: {exc}") from exc

        tables: _Tables = {}
        for network, categories in _expect_object(raw, "<root>", source).items():
            tables[network] = {}
            for category, records in _expect_object(categories, network, source).items():
                where = f"{network}.{category}"
                tables[network][category] = {}
                for key, record in _expect_object(records, where, source).items():
                    try:
                        tables[network][category][key] = ContractVersion.model_validate(record)
                    except ValidationError as exc:
                        raise VersionsFileError(f"{source}: invalid record '{where}.{key}': {exc}") from exc
        return cls(tables, source=source)

    @classmethod
    def load(cls, path: PathLike = DEFAULT_VERSIONS_FILE) -> "VersionsDocument":
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise VersionsFileError(f"Cannot read versions file {path}: {exc}") from exc
        return cls.from_json(text, source=str(path))

    def to_dict(self) -> Dict[str, Dict[str, Dict[str, dict]]]:
        return {
            network: {
                category: {key: record.to_json_dict() for key, record in records.items()}
                for category, records in categories.items()
            }
            for network, categories in self._tables.items()
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False) + "\n"

    def save(self, path: PathLike) -> None:
        """Write the whole document to ``path`` in a single atomic replace."""
        path = Path(path)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as handle:
                handle.write(self.to_json())
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug(f"Wrote versions file {path}")

    # --- Access -------------------------------------------------------------------

    def networks(self) -> List[str]:
        return list(self._tables)

    def _network(self, network: str) -> Dict[str, Dict[str, ContractVersion]]:
        try:
            return self._tables[network]
        except KeyError:
            raise NetworkNotFoundError(f"Network '{network}' has no declared versions") from None

    def categories(self, network: str) -> List[str]:
        return list(self._network(network))

    def category(self, network: str, category: str) -> Mapping[str, ContractVersion]:
        try:
            return dict(self._network(network)[category])
        except KeyError:
            raise CategoryNotFoundError(f"Category '{category}' not found in network '{network}'") from None

    def get(self, key: VersionKey) -> ContractVersion:
        records = self.category(key.network, key.category)
        try:
            return records[key.key]
        except KeyError:
            raise ContractNotFoundError(f"No declared version at '{key}'") from None

    def replace(self, key: VersionKey, record: ContractVersion) -> None:
        """Replace the record at ``key``; the key must already exist."""
        self.get(key)
        self._tables[key.network][key.category][key.key] = record

    def entries(self, network: Optional[str] = None) -> List[Tuple[VersionKey, ContractVersion]]:
        """All records with their full paths, in declaration order."""
        return list(self._iter_entries(network))

    def _iter_entries(self, network: Optional[str]) -> Iterator[Tuple[VersionKey, ContractVersion]]:
        networks = [network] if network is not None else self.networks()
        for net in networks:
            for category, records in self._network(net).items():
                for key, record in records.items():
                    yield VersionKey(net, category, key), record

    def records(self, network: Optional[str] = None) -> List[ContractVersion]:
        return [record for _, record in self._iter_entries(network)]

    def __len__(self) -> int:
        return sum(1 for _ in self._iter_entries(None))
