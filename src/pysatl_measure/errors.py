"""
Errors and Warnings
===================

Exception taxonomy of the measure integrator:

- :class:`MeasureError` — base class for hard failures.
- :class:`EmptyInputError` — a measure was requested over an empty collection.
- :class:`DegenerateNormalizationError` — a weighted measure has no mass to
  normalize by.
- :class:`NumericAccuracyWarning` — advisory quadrature warning.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class MeasureError(Exception):
    """Base class for errors raised by the measure integrator."""


class EmptyInputError(MeasureError, ValueError):
    """
    Raised when a measure is built from an empty collection.

    The empirical average divides by the number of samples, so an empty
    collection has no meaningful measure.
    """


class DegenerateNormalizationError(MeasureError, ZeroDivisionError):
    """
    Raised when the total weight of a weighted measure is zero or not finite.

    Attributes
    ----------
    total_mass : float
        The offending normalizing constant.
    """

    def __init__(self, total_mass: float) -> None:
        super().__init__(
            f"Cannot normalize a weighted measure with total mass {total_mass!r}; "
            "every outcome carries zero weight."
            if total_mass == 0.0
            else f"Cannot normalize a weighted measure with total mass {total_mass!r}."
        )
        self.total_mass = total_mass


class NumericAccuracyWarning(RuntimeWarning):
    """
    Issued when quadrature produced a result that is likely inaccurate.

    Notes
    -----
    This is advisory only. Densities with sharp peaks, discontinuities or
    singularities at the interval ends are integrated with reduced accuracy,
    and the integrator never raises for them.
    """


__all__ = [
    "MeasureError",
    "EmptyInputError",
    "DegenerateNormalizationError",
    "NumericAccuracyWarning",
]
