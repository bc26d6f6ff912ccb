"""Per-item isolation for batch runs.

One bad station must not sink the batch: each item runs on its own and
failures are collected beside the successes.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from loguru import logger

from app.errors import AnalysisError

T = TypeVar("T")
R = TypeVar("R")

# Errors an analyzer raises on bad input. Anything else is a bug and propagates.
ISOLATED_ERRORS = (AnalysisError, ArithmeticError, ValueError, TypeError)


@dataclass(frozen=True)
class BatchResult(Generic[R]):
    key: str
    value: R


@dataclass(frozen=True)
class BatchFailure:
    key: str
    error: str
    error_type: str


@dataclass
class BatchReport(Generic[R]):
    # In input order; keys may repeat
    results: list[BatchResult[R]] = field(default_factory=list)
    failures: list[BatchFailure] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return len(self.results)

    @property
    def failed(self) -> int:
        return len(self.failures)

    def for_key(self, key: str) -> list[R]:
        return [r.value for r in self.results if r.key == key]


def run_isolated(items: Iterable[T], fn: Callable[[T], R], key: Callable[[T], str]) -> BatchReport[R]:
    """Apply fn to every item, keyed by key(item)."""
    report: BatchReport[R] = BatchReport()

    for item in items:
        item_key = key(item)
        try:
            report.results.append(BatchResult(key=item_key, value=fn(item)))
        except ISOLATED_ERRORS as e:
            message = getattr(e, "message", None) or str(e)
            logger.warning("Batch item {} failed: {}", item_key, message)
            report.failures.append(BatchFailure(key=item_key, error=message, error_type=type(e).__name__))

    if report.failures:
        logger.info("Batch done: {} ok, {} failed", report.succeeded, report.failed)
    return report
