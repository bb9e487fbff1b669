"""
Reporting
=========

Discretized summaries of measures as ordered ``(key, value)`` pairs, ready to
be printed or plotted by the caller:

- :func:`enumerate_over` — point masses of a finite set of outcomes.
- :func:`histogram` — probabilities of contiguous bins centred around zero.
- :func:`plot_cdf` — CDF values on a grid centred around a midpoint.

Bin edges follow a single scheme: for ``k = 1..n_bins``
``edge(k) = (k - n_bins / 2) · bin_size`` (plus ``midpoint`` for
:func:`plot_cdf`). Mass outside ``[edge(1), edge(n_bins + 1))`` is not
reported, so histogram probabilities may sum to less than one.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any, TypeVar

import numpy as np

from pysatl_measure.measures.measure import Measure
from pysatl_measure.measures.weighted import WeightedMeasure
from pysatl_measure.statistics import cdf, normalize, probability

if TYPE_CHECKING:
    from collections.abc import Iterable

    import numpy.typing as npt

    from pysatl_measure.types import Bin

A = TypeVar("A")


def enumerate_over(values: Iterable[A], measure: Measure[A]) -> list[tuple[A, float]]:
    """
    Point masses of the given outcomes.

    Parameters
    ----------
    values : Iterable[A]
        Outcomes to report; duplicates are dropped and the rest sorted.
    measure : Measure[A]
        Measure with genuinely discrete support. Continuous measures report
        (near) zero for every point.

    Returns
    -------
    list[tuple[A, float]]
        ``(value, observe(1[x == value]))`` in ascending order of ``value``.
    """
    return [
        (value, measure.observe(lambda x, value=value: 1.0 if x == value else 0.0))
        for value in sorted(set(values))
    ]


def _grid(n_bins: int, bin_size: float, offset: float = 0.0) -> npt.NDArray[np.float64]:
    """Return the ``n_bins + 1`` edges ``(k - n_bins / 2) · bin_size + offset``."""
    if n_bins < 0:
        raise ValueError("n_bins >= 0")
    if bin_size <= 0:
        raise ValueError("bin_size > 0")
    k = np.arange(1, n_bins + 2, dtype=np.float64)
    return (k - n_bins / 2.0) * bin_size + offset


def histogram(
    n_bins: int, bin_size: float, model: WeightedMeasure[Any] | Measure[Any]
) -> list[tuple[Bin, float]]:
    """
    Bin the normalized model into contiguous half-open bins.

    Parameters
    ----------
    n_bins : int
        Number of bins.
    bin_size : float
        Width of every bin.
    model : WeightedMeasure or Measure
        Model to normalize; a plain :class:`Measure` is given log-weight ``0``.

    Returns
    -------
    list[tuple[tuple[float, float], float]]
        ``((left, right), P(left <= X < right))`` for each bin in order.

    Raises
    ------
    ValueError
        If ``n_bins < 0`` or ``bin_size <= 0``.
    DegenerateNormalizationError
        If the model has zero total weight.
    """
    edges = _grid(n_bins, bin_size)
    if n_bins == 0:
        return []
    if isinstance(model, Measure):
        model = WeightedMeasure.lift(model)
    normalized = normalize(model)

    bins = []
    for left, right in zip(edges[:-1].tolist(), edges[1:].tolist(), strict=True):
        bins.append(((left, right), probability(normalized, left, right)))
    return bins


def plot_cdf(
    n_bins: int, bin_size: float, midpoint: float, measure: Measure[float]
) -> list[tuple[float, float]]:
    """
    Sample the CDF of ``measure`` on a regular grid around ``midpoint``.

    Returns
    -------
    list[tuple[float, float]]
        ``(x, cdf(measure, x))`` for ``x = (k - n_bins / 2) · bin_size + midpoint``,
        ``k = 1..n_bins``.
    """
    points = _grid(n_bins, bin_size, midpoint)[:-1]
    return [(x, cdf(measure, x)) for x in points.tolist()]


__all__ = [
    "enumerate_over",
    "histogram",
    "plot_cdf",
]
