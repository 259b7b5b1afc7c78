"""Tests for catalogue loading and validation."""

import json
from pathlib import Path

import pytest

from neighbourhood_match.application.catalogue import find_record, load_catalogue
from neighbourhood_match.domain.neighbourhoods import CatalogueRecord
from neighbourhood_match.exceptions import (
    CatalogueFileNotFoundError,
    CatalogueValidationError,
    NeighbourhoodNotFoundError,
)
from tests.fakes import InMemoryFileSystem
from tests.support.neighbourhoods import record_payload, write_catalogue

CATALOGUE = Path("catalogue.json")


def test_load_catalogue_preserves_file_order(in_memory_fs: InMemoryFileSystem) -> None:
    write_catalogue(
        fs=in_memory_fs,
        path=CATALOGUE,
        records=[record_payload("b"), record_payload("a"), record_payload("c")],
    )

    catalogue = load_catalogue(path=CATALOGUE, fs=in_memory_fs)

    assert [record.id for record in catalogue] == ["b", "a", "c"]
    assert catalogue[0].housing.median_rent == 2000.0
    assert catalogue[0].lifestyle.bike == 50.0


def test_load_catalogue_missing_file(in_memory_fs: InMemoryFileSystem) -> None:
    with pytest.raises(CatalogueFileNotFoundError, match="CATALOGUE_PATH"):
        load_catalogue(path=CATALOGUE, fs=in_memory_fs)


def test_load_catalogue_rejects_invalid_json(in_memory_fs: InMemoryFileSystem) -> None:
    in_memory_fs.write_text("{not json", CATALOGUE)

    with pytest.raises(CatalogueValidationError):
        load_catalogue(path=CATALOGUE, fs=in_memory_fs)


def test_load_catalogue_rejects_unknown_schema_version(in_memory_fs: InMemoryFileSystem) -> None:
    in_memory_fs.write_text(
        json.dumps({"schema_version": 2, "neighbourhoods": [record_payload()]}), CATALOGUE
    )

    with pytest.raises(CatalogueValidationError, match="schema_version"):
        load_catalogue(path=CATALOGUE, fs=in_memory_fs)


def test_load_catalogue_rejects_out_of_range_sub_score(
    in_memory_fs: InMemoryFileSystem,
) -> None:
    record = record_payload()
    record["lifestyle"] = {**record["lifestyle"], "walkability": 120}  # type: ignore[dict-item]
    write_catalogue(fs=in_memory_fs, path=CATALOGUE, records=[record])

    with pytest.raises(CatalogueValidationError, match="walkability"):
        load_catalogue(path=CATALOGUE, fs=in_memory_fs)


def test_load_catalogue_rejects_unknown_fields(in_memory_fs: InMemoryFileSystem) -> None:
    record = record_payload()
    record["rating"] = 5
    write_catalogue(fs=in_memory_fs, path=CATALOGUE, records=[record])

    with pytest.raises(CatalogueValidationError, match="rating"):
        load_catalogue(path=CATALOGUE, fs=in_memory_fs)


def test_load_catalogue_rejects_blank_id(in_memory_fs: InMemoryFileSystem) -> None:
    write_catalogue(fs=in_memory_fs, path=CATALOGUE, records=[record_payload("  ")])

    with pytest.raises(CatalogueValidationError, match="id"):
        load_catalogue(path=CATALOGUE, fs=in_memory_fs)


def test_load_catalogue_rejects_duplicate_ids(in_memory_fs: InMemoryFileSystem) -> None:
    write_catalogue(
        fs=in_memory_fs, path=CATALOGUE, records=[record_payload("a"), record_payload("a")]
    )

    with pytest.raises(CatalogueValidationError, match="unique"):
        load_catalogue(path=CATALOGUE, fs=in_memory_fs)


def test_load_catalogue_accepts_empty_list(in_memory_fs: InMemoryFileSystem) -> None:
    write_catalogue(fs=in_memory_fs, path=CATALOGUE, records=[])

    assert load_catalogue(path=CATALOGUE, fs=in_memory_fs) == ()


def test_reference_catalogue_has_eight_neighbourhoods(
    reference_catalogue: tuple[CatalogueRecord, ...],
) -> None:
    assert len(reference_catalogue) == 8
    assert reference_catalogue[0].id == "brooklyn-williamsburg"
    assert reference_catalogue[-1].id == "boston-north-end"


def test_find_record_by_id(reference_catalogue: tuple[CatalogueRecord, ...]) -> None:
    record = find_record(reference_catalogue, " denver-highlands ")

    assert record.name == "Highlands"
    assert record.city == "Denver"


def test_find_record_unknown_id(reference_catalogue: tuple[CatalogueRecord, ...]) -> None:
    with pytest.raises(NeighbourhoodNotFoundError) as excinfo:
        find_record(reference_catalogue, "atlantis")

    assert excinfo.value.record_id == "atlantis"
