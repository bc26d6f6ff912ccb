"""Shared helpers - pure math used by the analysis services."""
