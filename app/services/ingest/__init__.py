"""Tabular input adapters."""
