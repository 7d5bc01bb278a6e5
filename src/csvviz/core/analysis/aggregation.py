"""
Grouped aggregation for bar and pie charts.

Rows are grouped by the display label of a key column and the numeric cells
of a value column are summed per group. Non-numeric or missing values add
nothing to the sum and are not counted. Groups come out in first-seen order;
``aggregate_pie`` additionally filters and sorts.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional

from csvviz.core.analysis.values import label_for, to_number
from csvviz.core.utils.config.base import BAR_MAX_GROUPS, PIE_MAX_SLICES
from csvviz.core.utils.logger import log_debug


@dataclass(frozen=True)
class AggregatedPoint:
    label: str
    value: float
    count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"label": self.label, "value": self.value, "count": self.count}


def rows_in_group(
    rows: Iterable[Mapping[str, Any]],
    group_column: Optional[str],
    selected_group: Optional[str],
) -> list[Mapping[str, Any]]:
    """Keep rows whose group label equals ``selected_group``.

    Without a grouping column or a selected group every row is kept.
    """
    if not group_column or not selected_group:
        return list(rows)
    return [row for row in rows if label_for(row.get(group_column)) == selected_group]


def aggregate(
    rows: Iterable[Mapping[str, Any]],
    key_column: str,
    value_column: str,
) -> tuple[AggregatedPoint, ...]:
    """Sum ``value_column`` per distinct label of ``key_column``."""
    totals: dict[str, float] = {}
    counts: dict[str, int] = {}
    for row in rows:
        label = label_for(row.get(key_column))
        if label not in totals:
            totals[label] = 0.0
            counts[label] = 0
        number = to_number(row.get(value_column))
        if number is not None:
            totals[label] += number
            counts[label] += 1
    return tuple(
        AggregatedPoint(label=label, value=total, count=counts[label])
        for label, total in totals.items()
    )


def aggregate_bar(
    rows: Iterable[Mapping[str, Any]],
    key_column: str,
    value_column: str,
    max_groups: int = BAR_MAX_GROUPS,
) -> tuple[AggregatedPoint, ...]:
    """First ``max_groups`` groups in first-seen order."""
    points = aggregate(rows, key_column, value_column)
    if len(points) > max_groups:
        log_debug(
            "AGGREGATION",
            f"Bar groups truncated from {len(points)} to {max_groups}",
            f"key={key_column}",
        )
    return points[:max_groups]


def aggregate_pie(
    rows: Iterable[Mapping[str, Any]],
    key_column: str,
    value_column: str,
    max_slices: int = PIE_MAX_SLICES,
) -> tuple[AggregatedPoint, ...]:
    """Positive groups, largest first, at most ``max_slices`` of them.

    Ties keep their first-seen order.
    """
    positive = [point for point in aggregate(rows, key_column, value_column) if point.value > 0]
    positive.sort(key=lambda point: point.value, reverse=True)
    if len(positive) > max_slices:
        log_debug(
            "AGGREGATION",
            f"Pie slices truncated from {len(positive)} to {max_slices}",
            f"key={key_column}",
        )
    return tuple(positive[:max_slices])
