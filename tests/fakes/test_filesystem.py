"""Tests for the in-memory filesystem fake."""

from pathlib import Path

import pandas as pd
import pytest

from tests.fakes import InMemoryFileSystem
from tests.support.errors import FakeFileNotFoundError, FakeFileTypeError


class TestInMemoryFileSystem:
    """Validate payload storage in the in-memory filesystem."""

    def test_write_csv_stores_a_copy(self) -> None:
        fs = InMemoryFileSystem()
        path = Path("out/matches.csv")
        df = pd.DataFrame({"rank": [1]})

        fs.write_csv(df, path)
        df.loc[0, "rank"] = 2

        assert fs.read_csv(path)["rank"].tolist() == [1]

    def test_missing_path_raises(self) -> None:
        fs = InMemoryFileSystem()

        with pytest.raises(FakeFileNotFoundError):
            fs.read_text(Path("missing.txt"))

    def test_wrong_payload_type_raises(self) -> None:
        fs = InMemoryFileSystem()
        path = Path("data.json")
        fs.write_json({"matches": []}, path)

        with pytest.raises(FakeFileTypeError):
            fs.read_text(path)

    def test_mkdir_records_directories(self) -> None:
        fs = InMemoryFileSystem()

        fs.mkdir(Path("out"))

        assert fs.created_dirs == ["out"]
