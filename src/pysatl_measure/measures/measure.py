"""
Measure Core
============

Continuation-based representation of (possibly unnormalized) measures.

A :class:`Measure` over outcomes of type ``A`` does not store outcomes or
probabilities. It stores a single callable that maps an observable
``A -> float`` to its integral under the measure. Everything else in the
package is expressed through :meth:`Measure.observe`.

Composition:

- :meth:`Measure.pure` — Dirac measure at a point.
- :meth:`Measure.bind` — sequential (dependent) composition.
- :meth:`Measure.map` — push-forward of a measure through a function.
- :func:`lift2` and the arithmetic operators — pointwise combination of
  independently drawn outcomes.

Notes
-----
- Composition is by substitution. Intermediate outcomes are never cached, so
  the identity and associativity laws of ``pure``/``bind`` hold exactly.
- Evaluating a composed measure nests one Python call per ``bind``; very long
  chains are limited by :func:`sys.getrecursionlimit`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import operator
from dataclasses import dataclass
from functools import reduce
from numbers import Number
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

    from pysatl_measure.types import Integral, Observable

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
T = TypeVar("T")


@dataclass(frozen=True, slots=True, eq=False)
class Measure(Generic[A]):
    """
    Measure represented by the way it integrates observables.

    Parameters
    ----------
    integral : Callable[[Callable[[A], float]], float]
        Continuation returning ``∫ f dμ`` for an observable ``f``.

    Examples
    --------
    >>> coin = Measure(lambda f: 0.5 * f(True) + 0.5 * f(False))
    >>> coin.observe(lambda x: 1.0 if x else 0.0)
    0.5
    """

    integral: Integral[A]

    def observe(self, observable: Observable[A]) -> float:
        """
        Integrate ``observable`` against the measure.

        Parameters
        ----------
        observable : Callable[[A], float]
            Real-valued function of an outcome.

        Returns
        -------
        float
            The expectation of ``observable``.
        """
        return float(self.integral(observable))

    __call__ = observe

    @staticmethod
    def pure(value: T) -> Measure[T]:
        """Dirac measure at ``value``: ``pure(v).observe(f) == f(v)``."""
        return Measure(lambda f: f(value))

    def bind(self, continuation: Callable[[A], Measure[B]]) -> Measure[B]:
        """
        Sequentially compose with a measure-valued continuation.

        Parameters
        ----------
        continuation : Callable[[A], Measure[B]]
            Builds the measure of the next stage from an outcome of this one.

        Returns
        -------
        Measure[B]
            Measure with ``observe(f) == self.observe(a -> continuation(a).observe(f))``.
        """
        integral = self.integral
        return Measure(lambda f: integral(lambda a: continuation(a).integral(f)))

    def map(self, fn: Callable[[A], B]) -> Measure[B]:
        """Push the measure forward through ``fn``."""
        integral = self.integral
        return Measure(lambda f: integral(lambda a: f(fn(a))))

    def chain(self, *continuations: Callable[[Any], Measure[Any]]) -> Measure[Any]:
        """Bind ``continuations`` from left to right."""
        return reduce(Measure.bind, continuations, self)

    def __add__(self, other: object) -> Measure[Any]:
        return _lift_operator(operator.add, self, other)

    def __radd__(self, other: object) -> Measure[Any]:
        return _lift_operator(operator.add, other, self)

    def __sub__(self, other: object) -> Measure[Any]:
        return _lift_operator(operator.sub, self, other)

    def __rsub__(self, other: object) -> Measure[Any]:
        return _lift_operator(operator.sub, other, self)

    def __mul__(self, other: object) -> Measure[Any]:
        return _lift_operator(operator.mul, self, other)

    def __rmul__(self, other: object) -> Measure[Any]:
        return _lift_operator(operator.mul, other, self)

    def __neg__(self) -> Measure[Any]:
        return self.map(operator.neg)

    def __abs__(self) -> Measure[Any]:
        return self.map(abs)

    def signum(self) -> Measure[int]:
        """Measure of the sign (``-1``, ``0`` or ``1``) of the outcome."""
        return self.map(_signum)


def observe(measure: Measure[A], observable: Observable[A]) -> float:
    """Integrate ``observable`` against ``measure``."""
    return measure.observe(observable)


def pure(value: A) -> Measure[A]:
    """Dirac measure at ``value``."""
    return Measure.pure(value)


def bind(measure: Measure[A], continuation: Callable[[A], Measure[B]]) -> Measure[B]:
    """Sequential composition, see :meth:`Measure.bind`."""
    return measure.bind(continuation)


def lift2(op: Callable[[A, B], C], first: Measure[A], second: Measure[B]) -> Measure[C]:
    """
    Combine independent outcomes of two measures pointwise.

    Parameters
    ----------
    op : Callable[[A, B], C]
        Combining function applied to an outcome of each measure.
    first, second : Measure
        Measures drawn independently of each other.

    Returns
    -------
    Measure[C]
        Measure with ``observe(f) == first.observe(a -> second.observe(b -> f(op(a, b))))``.
    """
    outer, inner = first.integral, second.integral
    return Measure(lambda f: outer(lambda a: inner(lambda b: f(op(a, b)))))


def _signum(x: Any) -> int:
    return (x > 0) - (x < 0)


def _lift_operator(op: Callable[[Any, Any], Any], left: object, right: object) -> Any:
    """Apply ``op`` pointwise, lifting plain numbers with :func:`pure`."""
    lifted = []
    for operand in (left, right):
        if isinstance(operand, Measure):
            lifted.append(operand)
        elif isinstance(operand, Number):
            lifted.append(Measure.pure(operand))
        else:
            return NotImplemented
    return lift2(op, lifted[0], lifted[1])


__all__ = [
    "Measure",
    "observe",
    "pure",
    "bind",
    "lift2",
]
