"""Tests for per-item batch isolation."""

import pytest

from app.errors import InsufficientDataError
from app.services.batch import run_isolated


def invert(x):
    if x < 0:
        raise InsufficientDataError(f"negative input {x}")
    return 1 / x


class TestRunIsolated:
    def test_all_succeed(self):
        report = run_isolated([1, 2, 4], invert, key=str)
        assert [(r.key, r.value) for r in report.results] == [("1", 1.0), ("2", 0.5), ("4", 0.25)]
        assert report.failed == 0

    def test_failures_collected(self):
        report = run_isolated([1, 0, -3, 2], invert, key=str)
        assert report.succeeded == 2
        assert [(f.key, f.error_type) for f in report.failures] == [
            ("0", "ZeroDivisionError"),
            ("-3", "InsufficientDataError"),
        ]
        assert report.failures[1].error == "negative input -3"

    def test_unexpected_errors_propagate(self):
        def broken(_):
            raise RuntimeError("bug")

        with pytest.raises(RuntimeError):
            run_isolated([1], broken, key=str)

    def test_repeated_keys_all_kept(self):
        report = run_isolated([2, 4, 0], invert, key=lambda _: "S1")
        assert report.succeeded == 2
        assert report.failed == 1
        assert report.for_key("S1") == [0.5, 0.25]
