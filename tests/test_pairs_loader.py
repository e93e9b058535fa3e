"""
Tests for text pair loading from CSV and Excel files.
"""

import pytest
from pathlib import Path

from typo_matcher.pairs_loader import (
    PairsLoadError,
    TextPair,
    load_pairs,
    load_pairs_from_csv,
)


class TestLoadPairsFromCsv:
    """Tests for CSV loading."""

    def test_load_sample(self, sample_pairs_csv):
        pairs = load_pairs(sample_pairs_csv)
        assert pairs == [
            TextPair("hola", "hello", 1),
            TextPair("hello", "hello", 2),
            TextPair("cde", "abc", 3),
        ]

    def test_column_variants(self, tmp_path: Path):
        path = tmp_path / "answers.csv"
        path.write_text("Typed,Expected\nhola,hello\n")
        assert load_pairs_from_csv(path) == [TextPair("hola", "hello", 1)]

        path.write_text("Compared Text,Target\nhola,hello\n")
        assert load_pairs_from_csv(path) == [TextPair("hola", "hello", 1)]

    def test_keeps_text_as_is(self, tmp_path: Path):
        path = tmp_path / "codes.csv"
        path.write_text("answer,reference\n007,0070\nNA,\n")
        pairs = load_pairs(path)
        assert pairs[0] == TextPair("007", "0070", 1)
        assert pairs[1] == TextPair("NA", "", 2)

    def test_skips_fully_empty_rows(self, tmp_path: Path):
        path = tmp_path / "pairs.csv"
        path.write_text("compared,exemplary\n,\nabc,abd\n")
        assert load_pairs(path) == [TextPair("abc", "abd", 2)]

    def test_missing_compared_column(self, tmp_path: Path):
        path = tmp_path / "pairs.csv"
        path.write_text("foo,exemplary\nabc,abc\n")
        with pytest.raises(PairsLoadError, match="No compared column"):
            load_pairs(path)

    def test_header_only(self, tmp_path: Path):
        path = tmp_path / "pairs.csv"
        path.write_text("compared,exemplary\n")
        with pytest.raises(PairsLoadError, match="empty"):
            load_pairs(path)

    def test_no_pairs(self, tmp_path: Path):
        path = tmp_path / "pairs.csv"
        path.write_text("compared,exemplary\n,\n")
        with pytest.raises(PairsLoadError, match="No text pairs"):
            load_pairs(path)


class TestLoadPairsFromExcel:
    """Tests for Excel loading."""

    def test_load_sample(self, sample_pairs_excel):
        pairs = load_pairs(sample_pairs_excel)
        assert pairs == [
            TextPair("hola", "hello", 1),
            TextPair("007", "0070", 2),
            TextPair("abc", "", 3),
        ]


class TestLoadPairs:
    """Tests for load_pairs dispatch."""

    def test_file_not_found(self, tmp_path: Path):
        with pytest.raises(PairsLoadError, match="File not found"):
            load_pairs(tmp_path / "missing.csv")

    def test_unsupported_format(self, tmp_path: Path):
        path = tmp_path / "pairs.txt"
        path.write_text("hola hello")
        with pytest.raises(PairsLoadError, match="Unsupported file format"):
            load_pairs(path)
