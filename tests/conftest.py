"""
Pytest fixtures and configuration for Typo Matcher tests.
"""

import pytest
from pathlib import Path

from typo_matcher.config import MatchingConfig
from typo_matcher.models import ClassifiedText


@pytest.fixture
def default_config() -> MatchingConfig:
    """Configuration with no letter-case action and no thresholds."""
    return MatchingConfig()


@pytest.fixture
def sample_pairs_csv(tmp_path: Path) -> Path:
    """Create a sample text pairs CSV file."""
    csv_path = tmp_path / "pairs.csv"
    csv_content = """compared,exemplary
hola,hello
hello,hello
cde,abc
"""
    csv_path.write_text(csv_content)
    return csv_path


@pytest.fixture
def sample_pairs_excel(tmp_path: Path) -> Path:
    """Create a sample text pairs Excel file."""
    import pandas as pd

    xlsx_path = tmp_path / "pairs.xlsx"
    data = {
        "Input": ["hola", "007", "abc"],
        "Expected": ["hello", "0070", None],
    }
    df = pd.DataFrame(data)
    df.to_excel(xlsx_path, index=False)
    return xlsx_path


def kinds(classified: ClassifiedText) -> list[tuple[str, str]]:
    """Reduce a classified text to (value, kind) pairs for comparisons."""
    return [(char.value, char.kind.value) for char in classified]
