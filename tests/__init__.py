"""
Test package marker.

This file prevents Python from treating `tests` as a namespace package across multiple
checkouts on `sys.path`, which can cause pytest to import and execute the wrong test
modules when another `tests/` directory exists elsewhere on the machine.
"""

"""
Test suite for csvviz.

Tests mirror the package layout:

- core/analysis/: value classification, role inference, aggregation, series
- core/viz/: palette, chart specs and chart builders
- core/domain/: selections and the visualizer session
- core/utils/: logging and configuration
- io/: CSV loading
- cli/: Typer commands and exit codes
"""
