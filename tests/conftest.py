"""
Shared pytest fixtures and configuration for csvviz tests.

This module provides common fixtures used across the test suite, including
sample datasets, temporary CSV files and a Typer test client.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict, List

import pytest

# Put `src/` first so `import csvviz` uses workspace code.
_REPO_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_REPO_ROOT / "src"))

from csvviz.core.domain.dataset import Dataset  # noqa: E402
from csvviz.core.utils.config import reset_config  # noqa: E402
from csvviz.core.utils.logger import reset_logging  # noqa: E402


# ============================================================================
# Dataset Fixtures
# ============================================================================

@pytest.fixture
def sales_records() -> List[Dict[str, Any]]:
    """Region/product/amount rows with a repeated region key."""
    return [
        {"date": "2023-01-03", "region": "North", "product": "A", "amount": "10"},
        {"date": "2023-01-01", "region": "South", "product": "B", "amount": "20"},
        {"date": "2023-01-02", "region": "North", "product": "A", "amount": "5"},
        {"date": "2023-01-04", "region": "East", "product": "C", "amount": "n/a"},
        {"date": "2023-01-05", "region": "South", "product": "B", "amount": "7.5"},
    ]


@pytest.fixture
def sales_dataset(sales_records: List[Dict[str, Any]]) -> Dataset:
    return Dataset.from_records(sales_records, source="sales")


@pytest.fixture
def single_column_dataset() -> Dataset:
    return Dataset.from_records([{"name": "a"}, {"name": "b"}])


@pytest.fixture
def empty_dataset() -> Dataset:
    """Dataset with columns but no rows."""
    return Dataset(rows=(), columns=("category", "amount"))


# ============================================================================
# Temporary File Fixtures
# ============================================================================

@pytest.fixture
def sales_csv(tmp_path: Path) -> Path:
    path = tmp_path / "sales.csv"
    path.write_text(
        "date,region,product,amount\n"
        "2023-01-03,North,A,10\n"
        "2023-01-01,South,B,20\n"
        "\n"
        "2023-01-02,North,A,5\n"
        "2023-01-04,East,C,n/a\n"
        "2023-01-05,South,B,7.5\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def single_column_csv(tmp_path: Path) -> Path:
    path = tmp_path / "names.csv"
    path.write_text("name\nAlice\nBob\n", encoding="utf-8")
    return path


# ============================================================================
# Global State
# ============================================================================

@pytest.fixture(autouse=True)
def isolated_state(monkeypatch):
    """Fresh config and logger per test, unaffected by CSVVIZ_* variables."""
    for name in list(os.environ):
        if name.startswith("CSVVIZ_"):
            monkeypatch.delenv(name, raising=False)
    reset_config()
    reset_logging()
    yield
    reset_config()
    reset_logging()


# ============================================================================
# CLI Fixtures
# ============================================================================

@pytest.fixture
def typer_test_client():
    """Typer test client for CLI testing."""
    from typer.testing import CliRunner
    return CliRunner()
