"""Tests for filesystem infrastructure components."""

from pathlib import Path

import pandas as pd
import pytest

from neighbourhood_match.infrastructure import JsonObjectError, LocalFileSystem


class TestLocalFileSystemCsv:
    """Tests for LocalFileSystem CSV round-trips."""

    def test_write_csv_creates_parent_and_reads_back_as_text(self, tmp_path: Path) -> None:
        fs = LocalFileSystem()
        path = tmp_path / "nested" / "out.csv"

        fs.write_csv(pd.DataFrame({"neighbourhood_id": ["sf-mission"], "rank": [1]}), path)

        out = fs.read_csv(path)
        assert out["neighbourhood_id"].tolist() == ["sf-mission"]
        assert out["rank"].tolist() == ["1"]


class TestLocalFileSystemJson:
    """Tests for LocalFileSystem JSON handling."""

    def test_write_json_is_readable(self, tmp_path: Path) -> None:
        fs = LocalFileSystem()
        path = tmp_path / "explain.json"

        fs.write_json({"matches": [{"neighbourhood_id": "denver-highlands"}]}, path)

        assert fs.read_json(path) == {"matches": [{"neighbourhood_id": "denver-highlands"}]}

    def test_read_json_rejects_non_object(self, tmp_path: Path) -> None:
        fs = LocalFileSystem()
        path = tmp_path / "list.json"
        fs.write_text("[1, 2]", path)

        with pytest.raises(JsonObjectError):
            fs.read_json(path)


class TestLocalFileSystemText:
    """Tests for LocalFileSystem text and directory helpers."""

    def test_exists_and_mkdir(self, tmp_path: Path) -> None:
        fs = LocalFileSystem()
        target = tmp_path / "a" / "b"

        assert not fs.exists(target)
        fs.mkdir(target)
        fs.mkdir(target)
        assert fs.exists(target)

    def test_write_text_round_trip(self, tmp_path: Path) -> None:
        fs = LocalFileSystem()
        path = tmp_path / "config" / "matcher.toml"

        fs.write_text("schema_version = 1\n", path)

        assert fs.read_text(path) == "schema_version = 1\n"
