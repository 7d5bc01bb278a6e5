"""
Analysis components for csvviz.

- values: cell-level numeric/date classification
- roles: column role inference and default column selection
- aggregation: grouped sums for bar and pie charts
- series: ordered points for line charts
- warnings: structured chart warnings
"""
