"""
Ordered point series for line charts.

The x axis ordering is chosen from the data itself:

1. "date" if any x value parses as a date
2. "numeric" if any x value is numeric
3. "original" otherwise (file order)

Sorting is stable, and values that cannot be converted under the chosen
rule are placed after every convertible value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Literal, Mapping, Optional, Sequence

from csvviz.core.analysis.aggregation import rows_in_group
from csvviz.core.analysis.values import is_numeric, label_for, parse_date, to_number
from csvviz.core.utils.config.base import LINE_MAX_POINTS
from csvviz.core.utils.logger import log_debug

XOrdering = Literal["date", "numeric", "original"]


@dataclass(frozen=True)
class SeriesPoint:
    x: Any
    y: float
    group: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y, "group": self.group}


def detect_x_ordering(values: Iterable[Any]) -> XOrdering:
    values = list(values)
    if any(parse_date(value) is not None for value in values):
        return "date"
    if any(is_numeric(value) for value in values):
        return "numeric"
    return "original"


def _sort_key(ordering: XOrdering) -> Callable[[Any], float | None]:
    if ordering == "date":
        return parse_date
    return to_number


def sort_rows(
    rows: Sequence[Mapping[str, Any]], x_column: str
) -> tuple[list[Mapping[str, Any]], XOrdering]:
    """Sort rows by ``x_column`` using the detected ordering."""
    ordering = detect_x_ordering(row.get(x_column) for row in rows)
    if ordering == "original":
        return list(rows), ordering

    convert = _sort_key(ordering)

    def key(row: Mapping[str, Any]) -> tuple[int, float]:
        converted = convert(row.get(x_column))
        if converted is None:
            return (1, 0.0)
        return (0, converted)

    return sorted(rows, key=key), ordering


def build_series(
    rows: Sequence[Mapping[str, Any]],
    x_column: str,
    y_column: str,
    group_column: Optional[str] = None,
    selected_group: Optional[str] = None,
    show_all_groups: bool = True,
    max_points: int = LINE_MAX_POINTS,
) -> tuple[SeriesPoint, ...]:
    """Build the ordered, truncated point series for one line chart.

    Args:
        rows: Dataset rows in file order
        x_column: Column for the x axis
        y_column: Column for the y axis; non-numeric cells become 0.0
        group_column: Optional grouping column; its raw value is attached
        selected_group: Group label to keep when ``show_all_groups`` is off
        show_all_groups: Keep every group (True) or only ``selected_group``
        max_points: Maximum number of points returned

    Returns:
        Tuple of SeriesPoint, at most ``max_points`` long
    """
    ordered, ordering = sort_rows(rows, x_column)

    if group_column and not show_all_groups and selected_group:
        ordered = rows_in_group(ordered, group_column, selected_group)

    points: list[SeriesPoint] = []
    for row in ordered:
        x = row.get(x_column)
        if x is None:
            continue
        y = to_number(row.get(y_column))
        points.append(
            SeriesPoint(
                x=x,
                y=y if y is not None else 0.0,
                group=row.get(group_column) if group_column else None,
            )
        )

    log_debug(
        "SERIES",
        f"Built {min(len(points), max_points)} points ({ordering} order)",
        f"x={x_column}, y={y_column}, dropped={max(len(points) - max_points, 0)}",
    )
    return tuple(points[:max_points])


def split_series(
    points: Iterable[SeriesPoint], group_labels: Sequence[str]
) -> dict[str, tuple[SeriesPoint, ...]]:
    """Split one series into a sub-series per group label, in label order."""
    points = list(points)
    return {
        label: tuple(point for point in points if label_for(point.group) == label)
        for label in group_labels
    }
