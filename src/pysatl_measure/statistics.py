"""
Statistics of Measures
======================

Quantitative queries expressed purely through
:meth:`~pysatl_measure.measures.measure.Measure.observe`:

- moments: :func:`expectation`, :func:`variance`, :func:`moment`,
  :func:`central_moment`;
- generating functions: :func:`moment_generating_function`,
  :func:`cumulant_generating_function`;
- probabilities: :func:`probability` (half-open interval), :func:`cdf`;
- mass: :func:`volume` and :func:`normalize` for log-weighted measures.

Notes
-----
For density-based measures every query inherits the quadrature error of the
measure. Indicator observables (:func:`probability`, :func:`cdf`) are
discontinuous and converge slower than smooth ones.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from typing import TYPE_CHECKING, Any, TypeVar

from pysatl_measure.errors import DegenerateNormalizationError
from pysatl_measure.measures.measure import Measure
from pysatl_measure.measures.weighted import WeightedMeasure

if TYPE_CHECKING:
    from pysatl_measure.types import LogWeight

A = TypeVar("A")

logger = logging.getLogger(__name__)


def expectation(measure: Measure[float]) -> float:
    """Expected value of the outcome."""
    return measure.observe(lambda x: x)


def variance(measure: Measure[float]) -> float:
    """Variance ``E[X²] - E[X]²`` of the outcome."""
    return measure.observe(lambda x: x**2) - expectation(measure) ** 2


def moment(measure: Measure[float], order: int) -> float:
    """Raw moment ``E[Xᵏ]`` of the given order."""
    if order < 0:
        raise ValueError("order >= 0")
    return measure.observe(lambda x: x**order)


def central_moment(measure: Measure[float], order: int) -> float:
    """Central moment ``E[(X - E[X])ᵏ]`` of the given order."""
    if order < 0:
        raise ValueError("order >= 0")
    mean = expectation(measure)
    return measure.observe(lambda x: (x - mean) ** order)


def moment_generating_function(measure: Measure[float], t: float) -> float:
    """Moment generating function ``E[exp(t·X)]``."""
    return measure.observe(lambda x: math.exp(t * x))


def cumulant_generating_function(measure: Measure[float], t: float) -> float:
    """Cumulant generating function ``log E[exp(t·X)]``."""
    return math.log(moment_generating_function(measure, t))


def probability(measure: Measure[Any], lower: Any, upper: Any) -> float:
    """
    Mass of the half-open interval ``[lower, upper)``.

    Parameters
    ----------
    measure : Measure
        Measure over ordered outcomes.
    lower, upper
        Interval bounds; ``lower`` is included, ``upper`` is not.

    Returns
    -------
    float
        ``observe(1[lower <= x < upper])``.
    """
    return measure.observe(lambda x: 1.0 if lower <= x < upper else 0.0)


def cdf(measure: Measure[float], x: float) -> float:
    """
    Cumulative distribution function ``P(X <= x)``.

    Notes
    -----
    ``cdf(m, -inf) == 0`` and, for finite outcomes, ``cdf(m, inf) == volume(m)``.
    """
    return measure.observe(lambda y: 1.0 if -math.inf < y <= x else 0.0)


def volume(measure: Measure[Any]) -> float:
    """Total mass; ``1`` for a normalized measure."""
    return measure.observe(lambda _: 1.0)


def normalize(weighted: WeightedMeasure[A] | Measure[tuple[A, LogWeight]]) -> Measure[A]:
    """
    Turn a log-weighted measure into a measure of total mass one.

    Parameters
    ----------
    weighted : WeightedMeasure[A] or Measure[tuple[A, float]]
        Measure over ``(outcome, log_weight)`` pairs.

    Returns
    -------
    Measure[A]
        Measure with
        ``observe(f) == weighted.observe((a, w) -> f(a)·exp(w - c)) / z`` where
        ``z = weighted.observe((a, w) -> exp(w - c))``.

    Raises
    ------
    DegenerateNormalizationError
        If no outcome carries weight, or the weights cannot be brought to a
        finite total. The check is made here, before any observable is
        evaluated on the result.

    Notes
    -----
    Weights are exponentiated relative to the mean finite log-weight ``c``,
    so ``z`` and the result use ``exp(w - c)``. The common factor ``exp(c)``
    cancels, which keeps uniformly tiny or huge weights away from underflow
    and overflow.
    """
    pairs = weighted.pairs if isinstance(weighted, WeightedMeasure) else weighted
    carried = pairs.observe(lambda aw: 1.0 if aw[1] > -math.inf else 0.0)
    if carried == 0.0:
        raise DegenerateNormalizationError(0.0)
    shift = pairs.observe(lambda aw: aw[1] if aw[1] > -math.inf else 0.0) / carried
    if not math.isfinite(shift):
        raise DegenerateNormalizationError(math.inf)

    z = pairs.observe(lambda aw: _weight(aw[1] - shift))
    if z == 0.0 or not math.isfinite(z):
        raise DegenerateNormalizationError(z)
    logger.debug("Normalizing weighted measure with log total mass %.6g", shift + math.log(z))

    integral = pairs.integral
    return Measure(lambda f: integral(lambda aw: f(aw[0]) * _weight(aw[1] - shift)) / z)


def _weight(log_weight: LogWeight) -> float:
    """``exp(log_weight)`` that saturates to ``inf`` instead of overflowing."""
    try:
        return math.exp(log_weight)
    except OverflowError:
        return math.inf


__all__ = [
    "expectation",
    "variance",
    "moment",
    "central_moment",
    "moment_generating_function",
    "cumulant_generating_function",
    "probability",
    "cdf",
    "volume",
    "normalize",
]
