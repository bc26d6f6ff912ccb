"""Benford second-digit entities."""

from dataclasses import dataclass

from app.models.common import BaseEntity


@dataclass(frozen=True)
class DigitDeviation(BaseEntity):
    digit: int
    expected: float
    observed: float
    deviation: float


@dataclass(frozen=True)
class BenfordResult(BaseEntity):
    """Second-digit distribution test of a batch of vote counts."""

    observed_counts: list[int]
    observed_freq: list[float]
    expected_freq: list[float]
    chi_square: float
    p_value: float
    total: int
    is_suspicious: bool

    @property
    def deviations(self) -> list[DigitDeviation]:
        return [
            DigitDeviation(d, exp, obs, obs - exp)
            for d, (exp, obs) in enumerate(zip(self.expected_freq, self.observed_freq))
        ]
