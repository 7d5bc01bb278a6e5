"""
Core engine for csvviz.

The engine is organized into:
- analysis: Value classification, role inference, aggregation, series building
- viz: Palette assignment, chart specs and the per-chart builders
- domain: Dataset, selection state and the session that ties them together
- utils: Configuration and logging

Every chart-facing function is a pure function of its inputs; configuration
is passed in explicitly rather than read from global state.
"""
