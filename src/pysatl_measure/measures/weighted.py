"""
Weighted Measures
=================

Measures whose outcomes carry an unnormalized weight in log-space.

A :class:`WeightedMeasure` over ``A`` wraps a :class:`~.measure.Measure` over
pairs ``(a, w)`` where ``exp(w)`` is the weight of outcome ``a``. Its
:attr:`WeightedMeasure.prior` is the measure over ``A`` that ignores the
weights. Weighted measures are turned back into ordinary measures by
:func:`pysatl_measure.statistics.normalize`.

Scoring primitives for use inside :meth:`WeightedMeasure.bind`:

- :func:`score` — multiply the weight by ``exp(log_weight)``.
- :func:`factor` — multiply the weight by a non-negative factor.
- :func:`condition` — keep or reject the current branch.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from operator import itemgetter
from typing import TYPE_CHECKING, Generic, TypeVar

from pysatl_measure.measures.measure import Measure

if TYPE_CHECKING:
    from collections.abc import Callable

    from pysatl_measure.types import LogWeight

A = TypeVar("A")
B = TypeVar("B")
T = TypeVar("T")


@dataclass(frozen=True, slots=True, eq=False)
class WeightedMeasure(Generic[A]):
    """
    Measure over outcomes paired with log-weights.

    Parameters
    ----------
    pairs : Measure[tuple[A, float]]
        Joint measure over ``(outcome, log_weight)``.
    """

    pairs: Measure[tuple[A, LogWeight]]

    @staticmethod
    def lift(measure: Measure[T]) -> WeightedMeasure[T]:
        """Attach log-weight ``0`` to every outcome of ``measure``."""
        return WeightedMeasure(measure.map(lambda a: (a, 0.0)))

    @staticmethod
    def pure(value: T) -> WeightedMeasure[T]:
        """Dirac measure at ``value`` with log-weight ``0``."""
        return WeightedMeasure(Measure.pure((value, 0.0)))

    @property
    def prior(self) -> Measure[A]:
        """The measure over outcomes with the weights dropped."""
        return self.pairs.map(itemgetter(0))

    def bind(
        self, continuation: Callable[[A], WeightedMeasure[B] | Measure[B]]
    ) -> WeightedMeasure[B]:
        """
        Sequentially compose, adding the log-weights of both stages.

        Parameters
        ----------
        continuation : Callable[[A], WeightedMeasure[B] | Measure[B]]
            Next stage. A plain :class:`Measure` is lifted with log-weight ``0``.

        Returns
        -------
        WeightedMeasure[B]
        """

        def _step(pair: tuple[A, LogWeight]) -> Measure[tuple[B, LogWeight]]:
            outcome, log_weight = pair
            following = continuation(outcome)
            if isinstance(following, Measure):
                following = WeightedMeasure.lift(following)
            return following.pairs.map(lambda bw: (bw[0], log_weight + bw[1]))

        return WeightedMeasure(self.pairs.bind(_step))

    def map(self, fn: Callable[[A], B]) -> WeightedMeasure[B]:
        """Push outcomes forward through ``fn``, keeping their weights."""
        return WeightedMeasure(self.pairs.map(lambda aw: (fn(aw[0]), aw[1])))

    def reweight(self, log_weight: Callable[[A], LogWeight]) -> WeightedMeasure[A]:
        """Add ``log_weight(a)`` to the log-weight of every outcome ``a``."""
        return WeightedMeasure(self.pairs.map(lambda aw: (aw[0], aw[1] + log_weight(aw[0]))))

    def condition(self, predicate: Callable[[A], bool]) -> WeightedMeasure[A]:
        """Give zero weight to outcomes not satisfying ``predicate``."""
        return self.reweight(lambda a: 0.0 if predicate(a) else -math.inf)


def score(log_weight: LogWeight) -> WeightedMeasure[None]:
    """Multiply the weight of the current branch by ``exp(log_weight)``."""
    return WeightedMeasure(Measure.pure((None, float(log_weight))))


def factor(weight: float) -> WeightedMeasure[None]:
    """
    Multiply the weight of the current branch by ``weight``.

    Raises
    ------
    ValueError
        If ``weight`` is negative or NaN.
    """
    if not weight >= 0:
        raise ValueError("weight >= 0")
    return score(math.log(weight) if weight > 0 else -math.inf)


def condition(flag: bool) -> WeightedMeasure[None]:
    """Reject the current branch unless ``flag`` holds."""
    return score(0.0 if flag else -math.inf)


__all__ = [
    "WeightedMeasure",
    "score",
    "factor",
    "condition",
]
