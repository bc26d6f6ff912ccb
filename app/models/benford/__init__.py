"""Benford domain."""

from app.models.benford.entities import BenfordResult, DigitDeviation

__all__ = ["BenfordResult", "DigitDeviation"]
