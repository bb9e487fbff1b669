"""
Quadrature Engine
=================

Numerical integration over a finite interval by trapezoidal refinement.

- :class:`QuadratureResult` — one estimate of the refinement sequence.
- :func:`trapezoid_refinements` — lazily produced sequence of estimates,
  each doubling the number of panels of the previous one.
- :func:`integrate` — the estimate selected by a :class:`QuadratureConfig`.

Notes
-----
- No tolerance is guaranteed. By default the last estimate of a fixed number
  of refinements is returned.
- Accuracy degrades for integrands with sharp peaks, discontinuities or
  singular endpoints. Discontinuous integrands (e.g. indicator observables)
  converge only linearly in the panel width ``h = (b - a) / 2**levels``.
- Nothing is raised for pathological integrands. A non-finite result, or an
  error estimate above ``warn_threshold``, issues
  :class:`~pysatl_measure.errors.NumericAccuracyWarning`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
import warnings
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from pysatl_measure.configuration import get_quadrature_config
from pysatl_measure.errors import NumericAccuracyWarning

if TYPE_CHECKING:
    from collections.abc import Iterator

    from pysatl_measure.configuration import QuadratureConfig
    from pysatl_measure.types import ScalarFunc

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class QuadratureResult:
    """
    Single estimate of the refinement sequence.

    Parameters
    ----------
    value : float
        Trapezoid-rule estimate of the integral.
    error_estimate : float
        Absolute difference from the previous estimate (``inf`` for the
        first one).
    evaluations : int
        Cumulative number of integrand evaluations.
    """

    value: float
    error_estimate: float
    evaluations: int


def trapezoid_refinements(
    g: ScalarFunc, a: float, b: float, levels: int
) -> Iterator[QuadratureResult]:
    """
    Yield successively refined trapezoid-rule estimates of ``∫ₐᵇ g(x) dx``.

    The first estimate uses a single panel; each of the following ``levels``
    estimates halves the panel width and only evaluates ``g`` at the new
    midpoints.

    Parameters
    ----------
    g : Callable[[float], float]
        Scalar integrand.
    a, b : float
        Integration bounds.
    levels : int
        Number of doublings after the one-panel estimate.

    Yields
    ------
    QuadratureResult
        ``levels + 1`` estimates in order of increasing resolution.
    """
    h = b - a
    estimate = 0.5 * h * (float(g(a)) + float(g(b)))
    evaluations = 2
    yield QuadratureResult(estimate, math.inf, evaluations)

    panels = 1
    for _ in range(levels):
        h *= 0.5
        midpoints = a + h * (2.0 * np.arange(panels) + 1.0)
        refined = 0.5 * estimate + h * math.fsum(float(g(float(x))) for x in midpoints)
        evaluations += panels
        yield QuadratureResult(refined, abs(refined - estimate), evaluations)
        estimate = refined
        panels *= 2


def integrate(
    g: ScalarFunc, a: float, b: float, *, config: QuadratureConfig | None = None
) -> float:
    """
    Approximate ``∫ₐᵇ g(x) dx`` by trapezoidal refinement.

    Parameters
    ----------
    g : Callable[[float], float]
        Scalar integrand.
    a, b : float
        Finite integration bounds. ``a > b`` yields the negated integral.
    config : QuadratureConfig, optional
        Refinement parameters; the process-wide default is used if omitted.

    Returns
    -------
    float
        The last estimate of the refinement sequence, or the first estimate
        whose error estimate meets ``config.tolerance`` once
        ``config.min_levels`` doublings have been made.
    """
    if config is None:
        config = get_quadrature_config()
    if a == b:
        return 0.0

    refinements = trapezoid_refinements(g, a, b, config.levels)
    result = next(refinements)
    for level, result in enumerate(refinements, start=1):
        if (
            config.tolerance is not None
            and level >= config.min_levels
            and result.error_estimate <= config.tolerance
        ):
            logger.debug(
                "Quadrature converged at level %d after %d evaluations (error %.3e)",
                level,
                result.evaluations,
                result.error_estimate,
            )
            break

    _check_accuracy(result, config)
    return result.value


def _check_accuracy(result: QuadratureResult, config: QuadratureConfig) -> None:
    """Warn about non-finite or insufficiently converged estimates."""
    if not math.isfinite(result.value):
        warnings.warn(
            f"Quadrature produced a non-finite value {result.value!r}; "
            "the integrand is likely singular on the integration interval.",
            NumericAccuracyWarning,
            stacklevel=3,
        )
    elif (
        config.warn_threshold is not None
        and config.levels > 0
        and result.error_estimate > config.warn_threshold
    ):
        warnings.warn(
            f"Quadrature error estimate {result.error_estimate:.3e} exceeds "
            f"{config.warn_threshold:.3e} after {result.evaluations} evaluations.",
            NumericAccuracyWarning,
            stacklevel=3,
        )


__all__ = [
    "QuadratureResult",
    "trapezoid_refinements",
    "integrate",
]
