"""
Domain model for csvviz: the loaded dataset, per-chart selections and the
session tying them together.
"""
