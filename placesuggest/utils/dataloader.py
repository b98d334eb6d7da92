"""Shared data loading utilities for place catalogs.

This module locates bundled data files and reads delimited or parquet
tables into string-typed DataFrames ready for row validation.
"""

import csv
from pathlib import Path
from typing import Callable, List, Optional, Tuple

import pandas as pd


def find_data_file(module_file: str, filenames: List[str]) -> Optional[Path]:
    """Find a data file shipped beside a module.

    Looks in {module_dir}/data/ for each candidate filename in order.

    Args:
        module_file: __file__ from the calling module
        filenames: List of candidate filenames to search for

    Returns:
        Path to found file, or None if not found

    Examples:
        >>> # From places/placegazetteer.py (data is in places/data/)
        >>> path = find_data_file(__file__, ['cities_sample.tsv'])
    """
    data_dir = Path(module_file).parent / "data"
    for filename in filenames:
        p = data_dir / filename
        if p.exists():
            return p
    return None


def read_place_table(
    file_path: Path,
    on_bad_line: Optional[Callable[[List[str]], None]] = None,
) -> pd.DataFrame:
    """Load a place table as an all-string DataFrame.

    Format is chosen by extension:
      - .parquet: read with pyarrow
      - .csv: comma separated, standard quoting
      - anything else (.tsv, .txt): tab separated, no quoting (GeoNames dumps)

    The first line is the header; header names are lower-cased and stripped.
    Missing values become "". Lines with more fields than the header are
    handed to ``on_bad_line`` and dropped, whichever line they are on.

    Args:
        file_path: Path to the table
        on_bad_line: Called with the split fields of each dropped line

    Returns:
        DataFrame with str cells

    Raises:
        OSError: If the file cannot be opened
        ValueError: If the file is empty, undecodable, or unparseable
    """
    def _drop(fields: List[str]) -> None:
        if on_bad_line is not None:
            on_bad_line(fields)
        return None

    if file_path.suffix == ".parquet":
        df = pd.read_parquet(file_path, engine="pyarrow")
    else:
        delimited = {
            "sep": "," if file_path.suffix == ".csv" else "\t",
            "dtype": str,
            "keep_default_na": False,
            "encoding": "utf-8",
            "engine": "python",
            "on_bad_lines": _drop,
            # Header read as a plain row, so a long first data row is not
            # taken as an index column
            "header": None,
        }
        if file_path.suffix != ".csv":
            delimited["quoting"] = csv.QUOTE_NONE
        rows = pd.read_csv(file_path, **delimited)
        df = rows.iloc[1:].reset_index(drop=True)
        df.columns = rows.iloc[0].tolist()

    df.columns = [str(col).strip().lower() for col in df.columns]
    df = df.astype(object).where(pd.notna(df), "")
    return df.astype(str)


def format_not_found_error(
    subdirectory: str,
    searched_locations: List[Tuple[str, Path]],
    fix_instructions: List[str],
) -> str:
    """Format a helpful not-found error message.

    Args:
        subdirectory: Data subdirectory name (e.g., 'places')
        searched_locations: List of (description, path) tuples for locations searched
        fix_instructions: List of commands/instructions to fix the issue

    Returns:
        Formatted error message string
    """
    lines = [f"No {subdirectory} data found in standard locations.\n"]

    lines.append("Searched:")
    for i, (desc, path) in enumerate(searched_locations, 1):
        lines.append(f"  {i}. {desc}: {path}")

    lines.append("\nTo fix:")
    for instruction in fix_instructions:
        lines.append(f"  • {instruction}")

    return "\n".join(lines)


__all__ = [
    "find_data_file",
    "read_place_table",
    "format_not_found_error",
]
