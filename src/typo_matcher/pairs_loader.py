"""
Text pair loading from CSV and Excel files.

Each row of the file holds a compared text and the exemplary text it should
be checked against.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import pandas as pd


class PairsLoadError(Exception):
    """Raised when text pair loading fails."""
    pass


# Common column name variations for text pair data
COMPARED_COLUMN_VARIANTS = ["compared", "compared_text", "input", "answer", "actual", "typed"]
EXEMPLARY_COLUMN_VARIANTS = ["exemplary", "exemplary_text", "expected", "reference", "pattern", "target"]


@dataclass
class TextPair:
    """A compared text with the exemplary text it is checked against."""
    compared: str
    exemplary: str
    row_number: int = 0  # 1-indexed data row, for messages


def _normalize_column_name(name: str) -> str:
    """Normalize column name for matching."""
    return str(name).lower().strip().replace(" ", "_").replace("-", "_")


def _find_column(df: pd.DataFrame, variants: list[str]) -> Optional[str]:
    """
    Find a column in the DataFrame matching one of the variant names.

    Args:
        df: The DataFrame to search.
        variants: List of possible column name variants.

    Returns:
        The actual column name if found, None otherwise.
    """
    normalized_columns = {_normalize_column_name(col): col for col in df.columns}

    for variant in variants:
        normalized = _normalize_column_name(variant)
        if normalized in normalized_columns:
            return normalized_columns[normalized]

    return None


def _cell_text(value) -> str:
    """Convert a cell to text, treating empty cells as empty strings."""
    if pd.isna(value):
        return ""
    return str(value)


def load_pairs_from_csv(file_path: Union[str, Path]) -> list[TextPair]:
    """
    Load text pairs from a CSV file.

    All cells are read as strings, so values like "007" keep their zeros.

    Raises:
        PairsLoadError: If the file cannot be read or parsed.
    """
    path = Path(file_path)

    if not path.exists():
        raise PairsLoadError(f"File not found: {file_path}")

    try:
        df = pd.read_csv(path, encoding="utf-8", dtype=str, keep_default_na=False)
    except UnicodeDecodeError:
        # Try alternative encoding
        try:
            df = pd.read_csv(path, encoding="latin-1", dtype=str, keep_default_na=False)
        except Exception as e:
            raise PairsLoadError(f"Failed to read CSV file: {e}")
    except Exception as e:
        raise PairsLoadError(f"Failed to read CSV file: {e}")

    return _parse_pairs_dataframe(df)


def load_pairs_from_excel(file_path: Union[str, Path], sheet_name: Optional[str] = None) -> list[TextPair]:
    """
    Load text pairs from an Excel file.

    Args:
        file_path: Path to the Excel file (.xlsx or .xls).
        sheet_name: Optional sheet name to read from. Defaults to first sheet.

    Raises:
        PairsLoadError: If the file cannot be read or parsed.
    """
    path = Path(file_path)

    if not path.exists():
        raise PairsLoadError(f"File not found: {file_path}")

    try:
        if sheet_name:
            df = pd.read_excel(path, sheet_name=sheet_name, dtype=str)
        else:
            df = pd.read_excel(path, dtype=str)
    except Exception as e:
        raise PairsLoadError(f"Failed to read Excel file: {e}")

    return _parse_pairs_dataframe(df)


def _parse_pairs_dataframe(df: pd.DataFrame) -> list[TextPair]:
    """
    Parse a DataFrame into a list of TextPair objects.

    Raises:
        PairsLoadError: If required columns are missing or no rows remain.
    """
    if df.empty:
        raise PairsLoadError("Pairs file is empty")

    compared_col = _find_column(df, COMPARED_COLUMN_VARIANTS)
    if compared_col is None:
        raise PairsLoadError(
            f"No compared column found. Expected one of: {', '.join(COMPARED_COLUMN_VARIANTS)}. "
            f"Found columns: {', '.join(map(str, df.columns))}"
        )

    exemplary_col = _find_column(df, EXEMPLARY_COLUMN_VARIANTS)
    if exemplary_col is None:
        raise PairsLoadError(
            f"No exemplary column found. Expected one of: {', '.join(EXEMPLARY_COLUMN_VARIANTS)}. "
            f"Found columns: {', '.join(map(str, df.columns))}"
        )

    pairs: list[TextPair] = []

    for row_number, (_, row) in enumerate(df.iterrows(), start=1):
        compared = _cell_text(row[compared_col])
        exemplary = _cell_text(row[exemplary_col])

        if not compared and not exemplary:
            continue

        pairs.append(TextPair(compared=compared, exemplary=exemplary, row_number=row_number))

    if not pairs:
        raise PairsLoadError("No text pairs found in file")

    return pairs


def load_pairs(file_path: Union[str, Path], sheet_name: Optional[str] = None) -> list[TextPair]:
    """
    Load text pairs from a CSV or Excel file.

    Automatically detects file type based on extension.

    Args:
        file_path: Path to the pairs file.
        sheet_name: Optional sheet name for Excel files.

    Returns:
        List of TextPair objects.

    Raises:
        PairsLoadError: If the file cannot be read or is invalid.
    """
    path = Path(file_path)
    suffix = path.suffix.lower()

    if suffix == ".csv":
        return load_pairs_from_csv(path)
    elif suffix in (".xlsx", ".xls"):
        return load_pairs_from_excel(path, sheet_name)
    else:
        raise PairsLoadError(
            f"Unsupported file format: {suffix}. Supported formats: .csv, .xlsx, .xls"
        )
