"""Rich rendering of column profiles and chart results for the CLI."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from csvviz.core.analysis.roles import ColumnDefaults, RoleClassification
from csvviz.core.domain.dataset import Dataset
from csvviz.core.viz.charts import ChartResult
from csvviz.core.viz.palette import hex_for_slot
from csvviz.core.viz.specs import BarChartSpec, LineChartSpec, PieChartSpec


def _swatch(slot: str) -> str:
    return f"[{hex_for_slot(slot)}]■[/] {slot}"


def _number(value: float) -> str:
    return f"{value:,.2f}".rstrip("0").rstrip(".")


def show_dataset_header(console: Console, dataset: Dataset) -> None:
    source = dataset.source or "<records>"
    console.print(
        f"[bold cyan]{source}[/bold cyan]: "
        f"{dataset.row_count} rows, {dataset.column_count} columns"
    )


def show_profile(
    console: Console,
    dataset: Dataset,
    roles: RoleClassification,
    defaults: ColumnDefaults,
) -> None:
    show_dataset_header(console, dataset)
    table = Table(title="Column roles")
    table.add_column("Column", style="bold")
    table.add_column("Roles")
    table.add_column("Numeric", justify="right")
    table.add_column("Distinct", justify="right")
    for column, info in roles.to_dict().items():
        table.add_row(
            column,
            ", ".join(info["roles"]) or "-",
            f"{info['numeric_count']}/{dataset.row_count}",
            str(info["distinct_count"]),
        )
    console.print(table)

    console.print("\n[bold]Defaults:[/bold]")
    console.print(f"  • Category (bar x, pie label): {defaults.category or '-'}")
    console.print(f"  • Sequence (line x): {defaults.sequence or '-'}")
    console.print(f"  • Measure (y / value): {defaults.measure or '-'}")
    console.print(f"  • Group: {defaults.group or '-'}")


def show_warnings(console: Console, result: ChartResult) -> None:
    for warning in result.warnings:
        console.print(f"[yellow]⚠ {warning['message']}[/yellow]")


def show_bar(console: Console, spec: BarChartSpec) -> None:
    table = Table(title=spec.title)
    table.add_column(spec.x_label or "Label", style="bold")
    table.add_column(spec.y_label or "Value", justify="right")
    table.add_column("Rows", justify="right")
    table.add_column("Color")
    for label, value, count, color in zip(
        spec.categories, spec.values, spec.counts, spec.colors
    ):
        table.add_row(label, _number(value), str(count), _swatch(color))
    console.print(table)


def show_line(console: Console, spec: LineChartSpec) -> None:
    for line in spec.series:
        table = Table(title=f"{spec.title}: {line.name}", caption=_swatch(line.color))
        table.add_column(spec.x_label or "x", style="bold")
        table.add_column(spec.y_label or "y", justify="right")
        if spec.group_column:
            table.add_column(spec.group_column)
        for point in line.points:
            row = [str(point.x), _number(point.y)]
            if spec.group_column:
                row.append("" if point.group is None else str(point.group))
            table.add_row(*row)
        console.print(table)
    console.print(f"[dim]x order: {spec.x_ordering}[/dim]")


def show_pie(console: Console, spec: PieChartSpec) -> None:
    total = sum(item.value for item in spec.slices)
    table = Table(title=spec.title)
    table.add_column(spec.x_label or "Label", style="bold")
    table.add_column(spec.y_label or "Value", justify="right")
    table.add_column("Share", justify="right")
    table.add_column("Color")
    for item in spec.slices:
        share = item.value / total * 100 if total else 0.0
        table.add_row(item.label, _number(item.value), f"{share:.1f}%", _swatch(item.color))
    console.print(table)


def show_chart(console: Console, result: ChartResult) -> None:
    show_warnings(console, result)
    spec = result.spec
    if isinstance(spec, BarChartSpec):
        show_bar(console, spec)
    elif isinstance(spec, LineChartSpec):
        show_line(console, spec)
    elif isinstance(spec, PieChartSpec):
        show_pie(console, spec)
    if result.group_options:
        console.print(f"[dim]Groups: {', '.join(result.group_options)}[/dim]")
