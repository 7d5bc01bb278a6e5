"""
Chart builders.

Each builder takes a dataset and an optional selection and returns a
``ChartResult``: either a validated chart spec ready for a renderer, or a
status explaining why nothing can be drawn. Builders never raise for data
problems; the two reportable conditions are

- INSUFFICIENT_COLUMNS: the dataset has fewer than two columns
- NO_DATA: the dataset is empty or the selection produced no points

Selections naming columns that no longer exist are replaced by the inferred
defaults and reported as ``stale_selection`` warnings.
"""

from __future__ import annotations

import random
import time
from dataclasses import asdict, dataclass, field, replace
from enum import Enum
from typing import Any, Optional, Union

from csvviz.core.analysis.aggregation import aggregate_bar, aggregate_pie, rows_in_group
from csvviz.core.analysis.roles import RoleClassification, classify_columns, group_options
from csvviz.core.analysis.series import build_series, detect_x_ordering, split_series
from csvviz.core.analysis.values import label_for
from csvviz.core.analysis.warnings import ChartWarning, build_warning
from csvviz.core.domain.dataset import Dataset
from csvviz.core.domain.selection import (
    COLUMN_FIELDS,
    BarSelection,
    LineSelection,
    PieSelection,
    default_selection,
)
from csvviz.core.utils.config.analysis import ChartLimitsConfig, InferenceConfig
from csvviz.core.utils.logger import log_debug, log_performance
from csvviz.core.viz.palette import (
    BAR_PALETTE,
    LINE_PALETTE,
    PIE_PALETTE,
    color_for,
    random_color,
)
from csvviz.core.viz.specs import (
    BarChartSpec,
    ChartSpec,
    LineChartSpec,
    LineSeries,
    PieChartSpec,
    PieSlice,
)

MIN_COLUMNS = 2

INSUFFICIENT_COLUMNS_MESSAGE = (
    "Not enough columns for a {chart} chart. "
    "Please upload a CSV with at least two columns."
)
NO_DATA_MESSAGE = (
    "No valid data for the selected columns. Try selecting different columns."
)

ChartSelection = Union[BarSelection, LineSelection, PieSelection]


class ChartStatus(str, Enum):
    OK = "ok"
    INSUFFICIENT_COLUMNS = "insufficient_columns"
    NO_DATA = "no_data"


@dataclass
class ChartResult:
    """Outcome of building one chart."""

    chart: str
    status: ChartStatus
    spec: Optional[ChartSpec] = None
    roles: Optional[RoleClassification] = None
    selection: Optional[ChartSelection] = None
    message: Optional[str] = None
    warnings: list[ChartWarning] = field(default_factory=list)
    group_options: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status is ChartStatus.OK

    def to_dict(self) -> dict[str, Any]:
        return {
            "chart": self.chart,
            "status": self.status.value,
            "message": self.message,
            "selection": asdict(self.selection) if self.selection is not None else None,
            "group_options": list(self.group_options),
            "warnings": list(self.warnings),
            "spec": self.spec.to_dict() if self.spec is not None else None,
        }


def _resolve_selection(
    dataset: Dataset,
    chart: str,
    selection: Optional[ChartSelection],
    defaults: ChartSelection,
    warnings: list[ChartWarning],
) -> ChartSelection:
    """Fill unset columns from defaults and replace columns missing from the dataset."""
    if selection is None:
        return defaults
    changes: dict[str, Any] = {}
    for name in COLUMN_FIELDS[chart]:
        value = getattr(selection, name)
        default = getattr(defaults, name)
        if value is None:
            # An unset grouping column means "no grouping"
            if name != "group_column":
                changes[name] = default
        elif not dataset.has_column(value):
            warnings.append(
                build_warning(
                    code="stale_selection",
                    message=f"Column '{value}' is not in the dataset; using '{default}'",
                    chart=chart,
                    column=value,
                    details={"field": name, "replacement": default},
                )
            )
            changes[name] = default
    return replace(selection, **changes) if changes else selection


def _check_group(
    chart: str,
    selected_group: Optional[str],
    options: list[str],
    warnings: list[ChartWarning],
) -> None:
    if selected_group and selected_group not in options:
        warnings.append(
            build_warning(
                code="unknown_group",
                message=f"Group '{selected_group}' does not occur in the dataset",
                chart=chart,
                details={"selected_group": selected_group},
            )
        )


def _start(
    chart: str, dataset: Dataset, inference: InferenceConfig | None
) -> tuple[RoleClassification, Optional[ChartResult]]:
    roles = classify_columns(dataset, inference)
    if dataset.column_count < MIN_COLUMNS:
        log_debug("CHARTS", f"{chart}: only {dataset.column_count} column(s)")
        return roles, ChartResult(
            chart=chart,
            status=ChartStatus.INSUFFICIENT_COLUMNS,
            roles=roles,
            message=INSUFFICIENT_COLUMNS_MESSAGE.format(chart=chart),
        )
    return roles, None


def _no_data(
    chart: str,
    roles: RoleClassification,
    selection: ChartSelection,
    warnings: list[ChartWarning],
    options: Optional[list[str]] = None,
) -> ChartResult:
    log_debug("CHARTS", f"{chart}: no data for selection", str(selection))
    return ChartResult(
        chart=chart,
        status=ChartStatus.NO_DATA,
        roles=roles,
        selection=selection,
        message=NO_DATA_MESSAGE,
        warnings=warnings,
        group_options=options or [],
    )


def _bar_colors(
    count: int, limits: ChartLimitsConfig, rng: random.Random | None
) -> list[str]:
    if limits.bar_color_strategy == "random":
        rng = rng or random.Random(limits.random_seed)
        return [random_color(rng, BAR_PALETTE) for _ in range(count)]
    return [color_for(index, BAR_PALETTE) for index in range(count)]


def build_bar_chart(
    dataset: Dataset,
    selection: BarSelection | None = None,
    limits: ChartLimitsConfig | None = None,
    inference: InferenceConfig | None = None,
    rng: random.Random | None = None,
) -> ChartResult:
    """Build a bar chart: sum of the y column per x label, first-seen order.

    Args:
        dataset: Loaded dataset
        selection: Column choice; inferred defaults fill unset columns
        limits: Output limits and color strategy
        inference: Role inference thresholds
        rng: Random source for the "random" color strategy

    Returns:
        ChartResult with a BarChartSpec when status is OK
    """
    start = time.perf_counter()
    limits = limits or ChartLimitsConfig()
    roles, early = _start("bar", dataset, inference)
    if early is not None:
        return early

    warnings: list[ChartWarning] = []
    defaults = default_selection(dataset, roles).bar
    selection = _resolve_selection(dataset, "bar", selection, defaults, warnings)
    x_column, y_column = selection.x_column, selection.y_column

    points = aggregate_bar(dataset.rows, x_column, y_column, limits.bar_max_groups)
    if not points:
        return _no_data("bar", roles, selection, warnings)

    spec = BarChartSpec(
        chart_type="bar",
        title=f"{y_column} by {x_column}",
        x_label=x_column,
        y_label=y_column,
        categories=[point.label for point in points],
        values=[point.value for point in points],
        counts=[point.count for point in points],
        colors=_bar_colors(len(points), limits, rng),
    )
    spec.validate()
    log_performance("build_bar_chart", time.perf_counter() - start, f"{len(points)} bars")
    return ChartResult(
        chart="bar",
        status=ChartStatus.OK,
        spec=spec,
        roles=roles,
        selection=selection,
        warnings=warnings,
    )


def build_line_chart(
    dataset: Dataset,
    selection: LineSelection | None = None,
    limits: ChartLimitsConfig | None = None,
    inference: InferenceConfig | None = None,
    rng: random.Random | None = None,
) -> ChartResult:
    """Build a line chart of the y column over the sorted x column.

    With a grouping column and "show all groups" on, the series is split into
    one line per group label present in the points. With a single group
    selected, only that group's rows are plotted.
    """
    start = time.perf_counter()
    limits = limits or ChartLimitsConfig()
    roles, early = _start("line", dataset, inference)
    if early is not None:
        return early

    warnings: list[ChartWarning] = []
    defaults = default_selection(dataset, roles).line
    selection = _resolve_selection(dataset, "line", selection, defaults, warnings)
    x_column, y_column = selection.x_column, selection.y_column
    group_column = selection.group_column

    options = group_options(dataset, group_column)
    if group_column and not selection.show_all_groups:
        _check_group("line", selection.selected_group, options, warnings)

    points = build_series(
        dataset.rows,
        x_column,
        y_column,
        group_column=group_column,
        selected_group=selection.selected_group,
        show_all_groups=selection.show_all_groups,
        max_points=limits.line_max_points,
    )
    if not points:
        return _no_data("line", roles, selection, warnings, options)

    if not group_column:
        series = [LineSeries(name=y_column, color=color_for(0, LINE_PALETTE), points=points)]
    elif selection.show_all_groups:
        labels = list(dict.fromkeys(label_for(point.group) for point in points))
        split = split_series(points, labels)
        series = [
            LineSeries(name=label, color=color_for(index, LINE_PALETTE), points=split[label])
            for index, label in enumerate(labels)
        ]
    else:
        series = [
            LineSeries(
                name=f"{selection.selected_group or 'All'} - {y_column}",
                color=color_for(0, LINE_PALETTE),
                points=points,
            )
        ]

    spec = LineChartSpec(
        chart_type="line",
        title=f"{y_column} over {x_column}",
        x_label=x_column,
        y_label=y_column,
        series=series,
        x_ordering=detect_x_ordering(dataset.values(x_column)),
        group_column=group_column,
    )
    spec.validate()
    log_performance("build_line_chart", time.perf_counter() - start, f"{len(points)} points")
    return ChartResult(
        chart="line",
        status=ChartStatus.OK,
        spec=spec,
        roles=roles,
        selection=selection,
        warnings=warnings,
        group_options=options,
    )


def build_pie_chart(
    dataset: Dataset,
    selection: PieSelection | None = None,
    limits: ChartLimitsConfig | None = None,
    inference: InferenceConfig | None = None,
    rng: random.Random | None = None,
) -> ChartResult:
    """Build a pie chart of the largest positive groups.

    ``group_by_region`` slices by the grouping column instead of the label
    column; otherwise a selected group filters the rows first.
    """
    start = time.perf_counter()
    limits = limits or ChartLimitsConfig()
    roles, early = _start("pie", dataset, inference)
    if early is not None:
        return early

    warnings: list[ChartWarning] = []
    defaults = default_selection(dataset, roles).pie
    selection = _resolve_selection(dataset, "pie", selection, defaults, warnings)
    group_column = selection.group_column
    options = group_options(dataset, group_column)

    if selection.group_by_region and group_column:
        label_column = group_column
        rows = list(dataset.rows)
    else:
        label_column = selection.label_column
        if group_column:
            _check_group("pie", selection.selected_group, options, warnings)
        rows = rows_in_group(dataset.rows, group_column, selection.selected_group)

    points = aggregate_pie(rows, label_column, selection.value_column, limits.pie_max_slices)
    if not points:
        return _no_data("pie", roles, selection, warnings, options)

    spec = PieChartSpec(
        chart_type="pie",
        title=f"{selection.value_column} by {label_column}",
        x_label=label_column,
        y_label=selection.value_column,
        slices=[
            PieSlice(label=point.label, value=point.value, color=color_for(index, PIE_PALETTE))
            for index, point in enumerate(points)
        ],
    )
    spec.validate()
    log_performance("build_pie_chart", time.perf_counter() - start, f"{len(points)} slices")
    return ChartResult(
        chart="pie",
        status=ChartStatus.OK,
        spec=spec,
        roles=roles,
        selection=selection,
        warnings=warnings,
        group_options=options,
    )


BUILDERS = {
    "bar": build_bar_chart,
    "line": build_line_chart,
    "pie": build_pie_chart,
}
