"""
csvviz - Column-Role Inference and Chart Series Toolkit

Turns an untyped delimited-text dataset into render-ready chart series.
Every column is classified from its values and name, sensible default axes
are chosen from that classification, and rows are grouped, summed, sorted,
truncated and colored for bar, line and pie charts.

Key Features:
- Value classification for text cells (numeric or not)
- Column role inference (numeric, categorical, sequential, geographic key)
- Grouped aggregation for bar and pie charts
- Date/numeric aware series building for line charts
- Deterministic palette assignment
- Typer-based command-line interface with Rich output

Package Structure:
- core/analysis/: Classification, aggregation and series building
- core/viz/: Palette assignment, chart specs and chart builders
- core/domain/: Dataset, selection state and session transitions
- core/utils/: Configuration and logging
- io/: CSV loading adapter
- cli/: Command-line interface

"""

__version__ = "0.1.0"
