"""
CSV loading for csvviz.

Wraps ``pandas.read_csv`` and turns a delimited-text file into a ``Dataset``.
Every cell is read as text, blank lines are skipped and cells missing from
short rows become ``None``. The delimiter is sniffed from the first lines.

``load_csv`` never raises for unreadable or malformed files; it reports one
outcome through ``LoadResult``.
"""

from __future__ import annotations

import csv
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import pandas as pd

from csvviz.core.domain.dataset import Dataset
from csvviz.core.utils.logger import log_error, log_file_operation, log_warning

CANDIDATE_DELIMITERS = ",;\t|"
DEFAULT_DELIMITER = ","
SNIFF_BYTES = 64 * 1024
ENCODING = "utf-8-sig"


@dataclass(frozen=True)
class LoadResult:
    """Outcome of one load: a dataset on success, an error message otherwise."""

    success: bool
    dataset: Optional[Dataset] = None
    error: Optional[str] = None
    source: Optional[str] = None


def sniff_delimiter(sample: str) -> str:
    """Guess the delimiter of ``sample``; comma when nothing fits."""
    if not sample.strip():
        return DEFAULT_DELIMITER
    try:
        return csv.Sniffer().sniff(sample, delimiters=CANDIDATE_DELIMITERS).delimiter
    except csv.Error:
        return DEFAULT_DELIMITER


def frame_to_records(frame: pd.DataFrame) -> list[dict[str, Any]]:
    """Row dicts from a text-typed frame, with NaN cells turned into None."""
    cleaned = frame.astype(object).where(frame.notna(), None)
    return cleaned.to_dict(orient="records")


def load_csv(path: str | Path, delimiter: Optional[str] = None) -> LoadResult:
    """
    Load a delimited-text file into a Dataset.

    Args:
        path: File to read
        delimiter: Field delimiter; sniffed from the file when omitted

    Returns:
        LoadResult with ``success`` set and either ``dataset`` or ``error``
    """
    source = str(path)
    try:
        if delimiter is None:
            with open(path, encoding=ENCODING, newline="") as handle:
                delimiter = sniff_delimiter(handle.read(SNIFF_BYTES))
        frame = pd.read_csv(
            path,
            sep=delimiter,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            encoding=ENCODING,
        )
    except pd.errors.EmptyDataError:
        log_warning("LOADER", "File has no header or rows", source)
        log_file_operation("load", source, True)
        return LoadResult(success=True, dataset=Dataset(source=source), source=source)
    except (OSError, UnicodeDecodeError, pd.errors.ParserError, ValueError) as e:
        log_error("LOADER", f"Failed to load {source}: {e}", exception=e)
        log_file_operation("load", source, False, str(e))
        return LoadResult(success=False, error=str(e), source=source)

    dataset = Dataset.from_records(frame_to_records(frame), source=source)
    log_file_operation("load", source, True)
    return LoadResult(success=True, dataset=dataset, source=source)
