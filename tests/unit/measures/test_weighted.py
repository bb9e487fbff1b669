"""
Tests for log-weighted measures, scoring primitives and normalization.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest

from pysatl_measure.errors import DegenerateNormalizationError, MeasureError
from pysatl_measure.measures.constructors import (
    bernoulli,
    from_mass_function,
    uniform,
    uniform_discrete,
)
from pysatl_measure.measures.weighted import WeightedMeasure, condition, factor, score
from pysatl_measure.statistics import expectation, normalize, volume

from .base import BaseMeasureTest


class TestWeightedMeasure(BaseMeasureTest):
    def test_lift_attaches_zero_log_weight(self):
        weighted = WeightedMeasure.lift(uniform_discrete([1, 2]))
        assert weighted.pairs.observe(lambda aw: aw[1]) == 0.0
        assert weighted.pairs.observe(lambda aw: float(aw[0])) == 1.5

    def test_pure(self):
        weighted = WeightedMeasure.pure("x")
        assert weighted.pairs.observe(lambda aw: 1.0 if aw == ("x", 0.0) else 0.0) == 1.0

    def test_prior_ignores_weights(self):
        weighted = WeightedMeasure.lift(uniform_discrete([1, 2, 3])).reweight(math.log)
        assert abs(expectation(weighted.prior) - 2.0) < self.CALCULATION_PRECISION

    def test_bind_adds_log_weights(self):
        weighted = WeightedMeasure.lift(uniform_discrete([1, 2])).bind(
            lambda x: score(math.log(x)).map(lambda _: x)
        )
        # masses 1/2 * 1 and 1/2 * 2
        total = weighted.pairs.observe(lambda aw: math.exp(aw[1]))
        assert abs(total - 1.5) < self.CALCULATION_PRECISION

    def test_bind_lifts_plain_measures(self):
        weighted = WeightedMeasure.pure(0.5).bind(bernoulli)
        assert abs(weighted.pairs.observe(lambda aw: 1.0 if aw[0] else 0.0) - 0.5) < 1e-12
        assert weighted.pairs.observe(lambda aw: aw[1]) == 0.0

    def test_map_keeps_weights(self):
        weighted = WeightedMeasure.lift(uniform_discrete([1, 2])).reweight(float).map(str)
        assert weighted.pairs.observe(lambda aw: aw[1] if aw[0] == "2" else 0.0) == 1.0

    def test_factor(self):
        assert factor(2.0).pairs.observe(lambda aw: aw[1]) == pytest.approx(math.log(2.0))
        assert factor(0.0).pairs.observe(lambda aw: math.exp(aw[1])) == 0.0
        for weight in (-1.0, math.nan):
            with pytest.raises(ValueError, match="weight >= 0"):
                factor(weight)


class TestNormalize(BaseMeasureTest):
    def test_normalization_idempotence(self):
        m = uniform_discrete([1, 2, 3, 4])
        self.assert_observationally_equal(normalize(WeightedMeasure.lift(m)), m)

    def test_normalization_idempotence_continuous(self):
        u = uniform()
        self.assert_observationally_equal(
            normalize(WeightedMeasure.lift(u)), u, self.QUADRATURE_PRECISION
        )

    def test_reweighted_discrete_measure(self):
        weighted = WeightedMeasure.lift(uniform_discrete([1, 2, 3])).reweight(math.log)
        posterior = normalize(weighted)
        assert abs(volume(posterior) - 1.0) < self.CALCULATION_PRECISION
        assert abs(posterior.observe(self.indicator(3)) - 0.5) < self.CALCULATION_PRECISION
        assert abs(expectation(posterior) - 14 / 6) < self.CALCULATION_PRECISION

    def test_normalized_measure_composes(self):
        posterior = normalize(WeightedMeasure.lift(uniform_discrete([1, 2, 3])).reweight(math.log))
        coin = posterior.bind(lambda x: bernoulli(x / 4))
        assert abs(coin.observe(self.indicator(True)) - 14 / 24) < self.CALCULATION_PRECISION

    def test_conditioning(self):
        flips = WeightedMeasure.lift(bernoulli(0.5)).bind(
            lambda a: WeightedMeasure.lift(bernoulli(0.5)).bind(
                lambda b: condition(a or b).map(lambda _: (a, b))
            )
        )
        posterior = normalize(flips)
        assert abs(posterior.observe(lambda ab: 1.0 if ab[0] else 0.0) - 2 / 3) < 1e-12

    def test_condition_method(self):
        evens = WeightedMeasure.lift(uniform_discrete(range(6))).condition(lambda x: x % 2 == 0)
        posterior = normalize(evens)
        assert posterior.observe(self.indicator(1)) == 0.0
        assert abs(expectation(posterior) - 2.0) < self.CALCULATION_PRECISION

    def test_continuous_posterior(self):
        # Uniform prior with likelihood p has posterior density 2p
        weighted = WeightedMeasure.lift(uniform()).bind(lambda p: factor(p).map(lambda _: p))
        posterior = normalize(weighted)
        assert abs(expectation(posterior) - 2 / 3) < self.QUADRATURE_PRECISION

    def test_raw_pair_measure(self):
        pairs = from_mass_function(lambda _: 0.5, [("a", 0.0), ("b", math.log(3.0))])
        posterior = normalize(pairs)
        assert abs(posterior.observe(self.indicator("b")) - 0.75) < self.CALCULATION_PRECISION

    def test_zero_mass_fails_fast(self):
        weighted = WeightedMeasure.lift(bernoulli(0.5)).condition(lambda _: False)
        with pytest.raises(DegenerateNormalizationError) as excinfo:
            normalize(weighted)
        assert excinfo.value.total_mass == 0.0
        assert isinstance(excinfo.value, ZeroDivisionError)
        assert isinstance(excinfo.value, MeasureError)

    def test_tiny_uniform_weights(self):
        prior = uniform_discrete([1, 2, 3, 4])
        posterior = normalize(WeightedMeasure.lift(prior).reweight(lambda _: -800.0))
        self.assert_observationally_equal(posterior, prior)
        assert abs(expectation(posterior) - 2.5) < self.CALCULATION_PRECISION

    def test_tiny_relative_weights(self):
        pairs = from_mass_function(
            lambda _: 0.5, [("a", -800.0), ("b", -800.0 + math.log(3.0))]
        )
        posterior = normalize(pairs)
        assert abs(posterior.observe(self.indicator("b")) - 0.75) < self.CALCULATION_PRECISION

    def test_huge_weight(self):
        posterior = normalize(score(1000.0).map(lambda _: "x"))
        assert posterior.observe(self.indicator("x")) == 1.0

    @pytest.mark.parametrize("log_weight", [math.inf, math.nan], ids=["inf", "nan"])
    def test_non_finite_log_weight_fails(self, log_weight):
        with pytest.raises(DegenerateNormalizationError):
            normalize(score(log_weight))
