"""Chart specification models for rendering."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Literal, Sequence

from csvviz.core.analysis.series import SeriesPoint


@dataclass
class ChartSpec:
    """Base chart spec shared by all chart types."""

    chart_type: Literal["bar", "line", "pie"]
    title: str
    x_label: str | None = None
    y_label: str | None = None
    notes: str | None = None

    def validate(self) -> None:
        if self.chart_type not in ("bar", "line", "pie"):
            raise ValueError(f"unknown chart_type: {self.chart_type!r}")
        if not self.title:
            raise ValueError("title is required")

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class BarChartSpec(ChartSpec):
    """Spec for categorical bar charts."""

    categories: Sequence[str] = ()
    values: Sequence[float] = ()
    counts: Sequence[int] = ()
    colors: Sequence[str] = ()

    def validate(self) -> None:
        super().validate()
        if not self.categories or not self.values:
            raise ValueError("categories and values are required for bar charts")
        if len(self.categories) != len(self.values):
            raise ValueError("categories and values must have the same length")
        if self.colors and len(self.colors) != len(self.categories):
            raise ValueError("colors must match categories")
        if self.counts and len(self.counts) != len(self.categories):
            raise ValueError("counts must match categories")


@dataclass
class LineSeries:
    """One named line of a line chart."""

    name: str
    color: str
    points: Sequence[SeriesPoint] = ()


@dataclass
class LineChartSpec(ChartSpec):
    """Spec for line charts (one or more series over a shared x axis)."""

    series: Sequence[LineSeries] = ()
    x_ordering: Literal["date", "numeric", "original"] = "original"
    group_column: str | None = None

    def point_count(self) -> int:
        return sum(len(line.points) for line in self.series)

    def validate(self) -> None:
        super().validate()
        if not self.series:
            raise ValueError("series is required for line charts")
        if self.point_count() == 0:
            raise ValueError("line charts need at least one point")


@dataclass
class PieSlice:
    label: str
    value: float
    color: str


@dataclass
class PieChartSpec(ChartSpec):
    """Spec for pie charts."""

    slices: Sequence[PieSlice] = ()

    def validate(self) -> None:
        super().validate()
        if not self.slices:
            raise ValueError("slices are required for pie charts")
        for item in self.slices:
            if item.value <= 0:
                raise ValueError(f"pie slice {item.label!r} must be positive")
