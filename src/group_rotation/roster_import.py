"""Roster import from Excel or CSV files."""

import re
from pathlib import Path

import pandas as pd


def _read_table(path: str | Path, nrows: int | None = None) -> pd.DataFrame:
    path = Path(path)
    if path.suffix.lower() == ".csv":
        return pd.read_csv(path, nrows=nrows)
    return pd.read_excel(path, nrows=nrows)


def read_roster_columns(path: str | Path) -> list[str]:
    """Read column names from a roster file."""
    df = _read_table(path, nrows=0)
    return [str(c) for c in df.columns]


def _clean_names(values) -> list[str]:
    names: list[str] = []
    seen: set[str] = set()
    for value in values:
        if pd.isna(value):
            continue
        name = str(value).strip()
        if not name or name in seen:
            continue
        seen.add(name)
        names.append(name)
    return names


def read_roster(path: str | Path, column: str | None = None) -> list[str]:
    """Read participant names from one column of a roster file.

    Uses the first column when ``column`` is not given. Blank cells are
    skipped and repeated names keep their first occurrence.
    """
    df = _read_table(path)
    if df.columns.empty:
        return []
    if column is None:
        column = df.columns[0]
    elif column not in df.columns:
        raise KeyError(f"Column {column!r} not found in {Path(path).name}")
    return _clean_names(df[column])


def parse_roster_text(text: str | None) -> list[str]:
    """Parse a comma- or newline-separated list of names."""
    if not text:
        return []
    return _clean_names(re.split(r"[,\n]", text))
