"""
Common helpers for measure tests.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Any

from pysatl_measure.measures.measure import Measure


class BaseMeasureTest:
    """Base class for measure test suites."""

    # Exact sums only suffer from rounding
    CALCULATION_PRECISION = 1e-12
    # Smooth observables under the default 1025-node trapezoid rule
    QUADRATURE_PRECISION = 1e-6
    # Indicator observables converge linearly in the panel width 2**-10
    INDICATOR_PRECISION = 1e-3

    @staticmethod
    def indicator(value: Any) -> Any:
        return lambda x: 1.0 if x == value else 0.0

    @staticmethod
    def observables() -> list[Any]:
        return [
            lambda x: float(x),
            lambda x: float(x) ** 2,
            lambda x: 1.0 if x else 0.0,
        ]

    def assert_observationally_equal(
        self, left: Measure[Any], right: Measure[Any], precision: float | None = None
    ) -> None:
        """Check that both measures integrate every test observable alike."""
        if precision is None:
            precision = self.CALCULATION_PRECISION
        for f in self.observables():
            assert abs(left.observe(f) - right.observe(f)) < precision
