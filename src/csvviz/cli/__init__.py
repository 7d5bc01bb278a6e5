"""Command-line interface for csvviz."""
