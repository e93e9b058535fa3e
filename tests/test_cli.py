"""
Tests for the command-line interface.
"""

from pathlib import Path

from click.testing import CliRunner

from typo_matcher.cli import main


class TestSingleText:
    """Classifying one compared text."""

    def test_plain_output(self):
        result = CliRunner().invoke(main, ["hola", "hello", "--plain"])
        assert result.exit_code == 0
        assert "h(e)[o]l(lo)[a]" in result.output
        assert "Classification Summary" in result.output

    def test_colored_output(self):
        result = CliRunner().invoke(main, ["hello", "hello"])
        assert result.exit_code == 0
        assert "hello" in result.output
        assert "Yes" in result.output

    def test_threshold_rejects_text(self):
        result = CliRunner().invoke(main, ["1abc", "1234", "--min-matched", "50%", "--plain"])
        assert result.exit_code == 0
        assert "[1abc]" in result.output

    def test_letter_case(self):
        result = CliRunner().invoke(main, ["hola", "hello", "--letter-case", "uppercase", "--plain"])
        assert result.exit_code == 0
        assert "H(E)[O]L(LO)[A]" in result.output

    def test_missing_exemplary(self):
        result = CliRunner().invoke(main, ["hola"])
        assert result.exit_code == 1
        assert "Provide COMPARED and EXEMPLARY" in result.output

    def test_invalid_threshold(self):
        result = CliRunner().invoke(main, ["hola", "hello", "--max-wrong", "lots"])
        assert result.exit_code == 1
        assert "Input error" in result.output

    def test_invalid_letter_case(self):
        result = CliRunner().invoke(main, ["hola", "hello", "--letter-case", "title"])
        assert result.exit_code == 2

    def test_text_over_max_length(self):
        result = CliRunner().invoke(main, ["ababababababx", "ybababababab"])
        assert result.exit_code == 1
        assert "exceeds --max-length 12" in result.output

    def test_max_length_zero_disables_limit(self):
        text = "the quick brown fox"
        result = CliRunner().invoke(main, [text, text, "--max-length", "0", "--plain"])
        assert result.exit_code == 0
        assert text in result.output


class TestPairsFile:
    """Classifying a file of text pairs."""

    def test_batch(self, sample_pairs_csv):
        result = CliRunner().invoke(main, ["--pairs", str(sample_pairs_csv), "--plain"])
        assert result.exit_code == 0
        assert "h(e)[o]l(lo)[a]" in result.output
        assert "(ab)c[de]" in result.output
        assert "1/3 texts typed exactly" in result.output

    def test_pairs_and_texts_together(self, sample_pairs_csv):
        result = CliRunner().invoke(main, ["hola", "hello", "--pairs", str(sample_pairs_csv)])
        assert result.exit_code == 1
        assert "Provide only one" in result.output

    def test_bad_pairs_file(self, tmp_path: Path):
        path = tmp_path / "pairs.csv"
        path.write_text("foo,bar\n1,2\n")
        result = CliRunner().invoke(main, ["--pairs", str(path)])
        assert result.exit_code == 1
        assert "Pairs loading error" in result.output

    def test_long_row_stops_before_classifying(self, tmp_path: Path):
        path = tmp_path / "pairs.csv"
        path.write_text("compared,exemplary\nhola,hello\nabcdefghijklm,abc\n")
        result = CliRunner().invoke(main, ["--pairs", str(path), "--plain"])
        assert result.exit_code == 1
        assert "Row 2" in result.output
        assert "h(e)[o]l(lo)[a]" not in result.output

    def test_verbose(self, sample_pairs_csv):
        result = CliRunner().invoke(main, ["--pairs", str(sample_pairs_csv), "-v"])
        assert result.exit_code == 0
        assert "Loaded 3 pairs" in result.output
