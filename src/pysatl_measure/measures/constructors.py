"""
Primitive Constructors
======================

Builders of :class:`~pysatl_measure.measures.measure.Measure` instances from
simple descriptions:

- :func:`from_density` — density on the unit interval, integrated by
  quadrature.
- :func:`from_mass_function` — probability mass function over an explicit
  finite support (exact sum).
- :func:`from_empirical` — empirical average over observed samples.
- :func:`bernoulli`, :func:`uniform_discrete`, :func:`categorical` —
  finite distributions written directly as weighted sums.
- :func:`uniform`, :func:`uniform_on`, :func:`beta` — continuous
  distributions built on :func:`from_density`.

Notes
-----
- Quadrature always runs over the fixed interval ``[0, 1]``. Other supports
  are obtained by transforming the outcome (see :func:`uniform_on`), never by
  changing the interval.
- Density-based measures capture the quadrature configuration that is active
  when they are built.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, TypeVar

import numpy as np
from scipy import stats as _sp_stats

from pysatl_measure.configuration import get_quadrature_config
from pysatl_measure.errors import EmptyInputError
from pysatl_measure.measures.measure import Measure
from pysatl_measure.quadrature import integrate

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

    from pysatl_measure.configuration import QuadratureConfig
    from pysatl_measure.types import ScalarFunc

A = TypeVar("A")

UNIT_INTERVAL = (0.0, 1.0)
"""Fixed integration domain of density-based measures."""

PROBABILITY_SUM_TOLERANCE = 1e-9


def from_density(density: ScalarFunc, *, config: QuadratureConfig | None = None) -> Measure[float]:
    """
    Build a measure on ``[0, 1]`` from a density function.

    Parameters
    ----------
    density : Callable[[float], float]
        Scalar density; it is only evaluated on ``[0, 1]``.
    config : QuadratureConfig, optional
        Quadrature parameters; defaults to the configuration active now.

    Returns
    -------
    Measure[float]
        Measure with ``observe(f) ≈ ∫₀¹ f(x) · density(x) dx``.

    Notes
    -----
    The result is only as good as the trapezoidal refinement allows: sharp
    peaks, discontinuities and endpoint singularities of ``density`` reduce
    accuracy silently or with a
    :class:`~pysatl_measure.errors.NumericAccuracyWarning`.
    """
    captured = config if config is not None else get_quadrature_config()
    lower, upper = UNIT_INTERVAL

    def _integral(f: Callable[[float], float]) -> float:
        return integrate(lambda x: f(x) * density(x), lower, upper, config=captured)

    return Measure(_integral)


def from_mass_function(pmf: Callable[[A], float], support: Iterable[A]) -> Measure[A]:
    """
    Build a measure from a mass function over an explicit support.

    Parameters
    ----------
    pmf : Callable[[A], float]
        Mass of a single support point.
    support : Iterable[A]
        Finite support. Duplicates are kept and their masses summed.

    Returns
    -------
    Measure[A]
        Measure with ``observe(f) == Σ pmf(x) · f(x)`` over ``support``.
    """
    points = tuple(support)

    def _integral(f: Callable[[A], float]) -> float:
        return math.fsum(pmf(x) * f(x) for x in points)

    return Measure(_integral)


def from_empirical(samples: Iterable[A]) -> Measure[A]:
    """
    Build the empirical measure of a collection of observations.

    Parameters
    ----------
    samples : Iterable[A]
        Observed outcomes, each with mass ``1 / n``.

    Returns
    -------
    Measure[A]
        Measure with ``observe(f) == (1 / n) · Σ f(xᵢ)``.

    Raises
    ------
    EmptyInputError
        If ``samples`` is empty.
    """
    points = tuple(samples)
    if not points:
        raise EmptyInputError("Empirical measure requires at least one sample.")
    n = len(points)

    def _integral(f: Callable[[A], float]) -> float:
        return math.fsum(f(x) for x in points) / n

    return Measure(_integral)


def bernoulli(p: float) -> Measure[bool]:
    """
    Bernoulli measure: ``True`` with probability ``p``.

    Raises
    ------
    ValueError
        If ``p`` is outside ``[0, 1]``.
    """
    if not 0.0 <= p <= 1.0:
        raise ValueError("0 <= p <= 1")
    return Measure(lambda f: p * f(True) + (1.0 - p) * f(False))


def uniform_discrete(values: Iterable[A]) -> Measure[A]:
    """
    Uniform measure over a finite collection (duplicates count repeatedly).

    Raises
    ------
    EmptyInputError
        If ``values`` is empty.
    """
    points = tuple(values)
    if not points:
        raise EmptyInputError("Discrete uniform measure requires at least one value.")
    mass = 1.0 / len(points)

    def _integral(f: Callable[[A], float]) -> float:
        return math.fsum(mass * f(x) for x in points)

    return Measure(_integral)


def categorical(probabilities: Sequence[float]) -> Measure[int]:
    """
    Measure over the indices ``0..n-1`` with the given probabilities.

    Parameters
    ----------
    probabilities : Sequence[float]
        Non-negative masses summing to one.

    Raises
    ------
    EmptyInputError
        If ``probabilities`` is empty.
    ValueError
        If a mass is negative or NaN, or the masses do not sum to one.
    """
    masses = np.asarray(probabilities, dtype=np.float64)
    if masses.size == 0:
        raise EmptyInputError("Categorical measure requires at least one category.")
    if not np.all(masses >= 0):
        raise ValueError("probabilities >= 0")
    if not abs(float(masses.sum()) - 1.0) <= PROBABILITY_SUM_TOLERANCE:
        raise ValueError("sum(probabilities) == 1")
    weights = tuple(float(m) for m in masses)

    def _integral(f: Callable[[int], float]) -> float:
        return math.fsum(mass * f(index) for index, mass in enumerate(weights))

    return Measure(_integral)


def _unit_density(x: float) -> float:
    return 1.0 if 0.0 <= x <= 1.0 else 0.0


def uniform(*, config: QuadratureConfig | None = None) -> Measure[float]:
    """Standard continuous uniform measure on ``[0, 1]``."""
    return from_density(_unit_density, config=config)


def uniform_on(
    lower: float, upper: float, *, config: QuadratureConfig | None = None
) -> Measure[float]:
    """
    Continuous uniform measure on ``[lower, upper]``.

    The standard uniform outcome is mapped affinely; quadrature still runs
    over ``[0, 1]``.

    Raises
    ------
    ValueError
        If ``lower >= upper``.
    """
    if not lower < upper:
        raise ValueError("lower < upper")
    width = upper - lower
    return uniform(config=config).map(lambda u: lower + width * u)


def beta(a: float, b: float, *, config: QuadratureConfig | None = None) -> Measure[float]:
    """
    Beta(a, b) measure on ``[0, 1]``.

    Notes
    -----
    For ``a < 1`` or ``b < 1`` the density is unbounded at an endpoint and
    quadrature returns a non-finite or inaccurate value.

    Raises
    ------
    ValueError
        If ``a <= 0`` or ``b <= 0``.
    """
    if a <= 0:
        raise ValueError("a > 0")
    if b <= 0:
        raise ValueError("b > 0")
    return from_density(_sp_stats.beta(a, b).pdf, config=config)


__all__ = [
    "UNIT_INTERVAL",
    "from_density",
    "from_mass_function",
    "from_empirical",
    "bernoulli",
    "uniform_discrete",
    "categorical",
    "uniform",
    "uniform_on",
    "beta",
]
