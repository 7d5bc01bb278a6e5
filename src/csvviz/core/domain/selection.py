"""
Per-chart column selections.

Selections are frozen: a user re-selection produces a new value via
``dataclasses.replace`` and a new dataset produces a fresh
``default_selection``. Nothing is carried over between datasets.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from csvviz.core.analysis.roles import RoleClassification, classify_columns, default_columns
from csvviz.core.domain.dataset import Dataset

CHART_NAMES = ("bar", "line", "pie")

# Selection fields that must name a dataset column when set
COLUMN_FIELDS: dict[str, tuple[str, ...]] = {
    "bar": ("x_column", "y_column"),
    "line": ("x_column", "y_column", "group_column"),
    "pie": ("label_column", "value_column", "group_column"),
}


@dataclass(frozen=True)
class BarSelection:
    x_column: Optional[str] = None
    y_column: Optional[str] = None


@dataclass(frozen=True)
class LineSelection:
    x_column: Optional[str] = None
    y_column: Optional[str] = None
    group_column: Optional[str] = None
    selected_group: Optional[str] = None
    show_all_groups: bool = True


@dataclass(frozen=True)
class PieSelection:
    label_column: Optional[str] = None
    value_column: Optional[str] = None
    group_column: Optional[str] = None
    selected_group: Optional[str] = None
    group_by_region: bool = False


@dataclass(frozen=True)
class SelectionState:
    bar: BarSelection = field(default_factory=BarSelection)
    line: LineSelection = field(default_factory=LineSelection)
    pie: PieSelection = field(default_factory=PieSelection)

    def for_chart(self, chart: str):
        if chart not in CHART_NAMES:
            raise ValueError(f"Unknown chart: {chart!r} (expected one of {CHART_NAMES})")
        return getattr(self, chart)


def default_selection(
    dataset: Dataset, roles: RoleClassification | None = None
) -> SelectionState:
    """Selections derived from inferred roles for a freshly loaded dataset."""
    if roles is None:
        roles = classify_columns(dataset)
    defaults = default_columns(dataset, roles)
    return SelectionState(
        bar=BarSelection(x_column=defaults.category, y_column=defaults.measure),
        line=LineSelection(
            x_column=defaults.sequence,
            y_column=defaults.measure,
            group_column=defaults.group,
        ),
        pie=PieSelection(
            label_column=defaults.category,
            value_column=defaults.measure,
            group_column=defaults.group,
        ),
    )
