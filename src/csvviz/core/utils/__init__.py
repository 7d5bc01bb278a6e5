"""Shared utilities: configuration and logging."""
