"""
Visualizer session.

Holds the currently loaded dataset and the user's chart selections. Loading a
dataset is the only transition that touches selections wholesale: it always
replaces them with fresh defaults for the new data.
"""

from __future__ import annotations

import random
from dataclasses import replace
from typing import Any

from csvviz.core.analysis.roles import RoleClassification, classify_columns, group_options
from csvviz.core.domain.dataset import Dataset
from csvviz.core.domain.selection import (
    CHART_NAMES,
    COLUMN_FIELDS,
    SelectionState,
    default_selection,
)
from csvviz.core.utils.config.analysis import ChartLimitsConfig, InferenceConfig
from csvviz.core.utils.logger import log_info
from csvviz.core.viz.charts import (
    ChartResult,
    build_bar_chart,
    build_line_chart,
    build_pie_chart,
)


class VisualizerSession:
    """Current dataset plus per-chart selections."""

    def __init__(
        self,
        limits: ChartLimitsConfig | None = None,
        inference: InferenceConfig | None = None,
        rng: random.Random | None = None,
    ):
        self.limits = limits or ChartLimitsConfig()
        self.inference = inference or InferenceConfig()
        self.rng = rng
        self.dataset = Dataset()
        self.roles = RoleClassification()
        self.selection = SelectionState()

    @classmethod
    def from_config(cls, config: Any, rng: random.Random | None = None) -> "VisualizerSession":
        return cls(limits=config.charts, inference=config.inference, rng=rng)

    def load(self, dataset: Dataset) -> SelectionState:
        """Replace the dataset and reset every selection to its default."""
        self.dataset = dataset
        self.roles = classify_columns(dataset, self.inference)
        self.selection = default_selection(dataset, self.roles)
        log_info(
            "SESSION",
            f"Loaded dataset with {dataset.row_count} rows, {dataset.column_count} columns",
            dataset.source or "",
        )
        return self.selection

    def update_selection(self, chart: str, **changes: Any) -> SelectionState:
        """Replace one chart's selection with ``changes`` applied.

        Raises:
            ValueError: If the chart name, a field name or a column is unknown
        """
        current = self.selection.for_chart(chart)
        for name, value in changes.items():
            if not hasattr(current, name):
                raise ValueError(f"Unknown {chart} selection field: {name!r}")
            if name in COLUMN_FIELDS[chart] and value is not None:
                if not self.dataset.has_column(value):
                    raise ValueError(f"Unknown column for {chart} {name}: {value!r}")
        self.selection = replace(self.selection, **{chart: replace(current, **changes)})
        return self.selection

    def group_options(self, chart: str = "line") -> list[str]:
        """Labels offered by the single-group chooser of ``chart``."""
        selection = self.selection.for_chart(chart)
        return group_options(self.dataset, getattr(selection, "group_column", None))

    def chart(self, chart: str) -> ChartResult:
        if chart not in CHART_NAMES:
            raise ValueError(f"Unknown chart: {chart!r} (expected one of {CHART_NAMES})")
        return getattr(self, f"{chart}_chart")()

    def bar_chart(self) -> ChartResult:
        return build_bar_chart(
            self.dataset, self.selection.bar, self.limits, self.inference, self.rng
        )

    def line_chart(self) -> ChartResult:
        return build_line_chart(
            self.dataset, self.selection.line, self.limits, self.inference, self.rng
        )

    def pie_chart(self) -> ChartResult:
        return build_pie_chart(
            self.dataset, self.selection.pie, self.limits, self.inference, self.rng
        )
