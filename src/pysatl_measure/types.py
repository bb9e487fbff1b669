"""
Core Type Definitions
=====================

Fundamental type aliases shared by the measure, statistics and reporting
layers.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable
from typing import TypeAlias, TypeVar

A = TypeVar("A")

ScalarFunc = Callable[[float], float]
"""Type alias for scalar functions (float -> float)."""

Observable: TypeAlias = Callable[[A], float]
"""Real-valued function of an outcome used to query a measure."""

Integral: TypeAlias = Callable[[Observable[A]], float]
"""Continuation turning an observable into its expectation."""

LogWeight: TypeAlias = float
"""Unnormalized weight stored in log-space (``exp(w)`` is the weight)."""

Bin: TypeAlias = tuple[float, float]
"""Half-open histogram bin ``[left, right)``."""


__all__ = [
    "ScalarFunc",
    "Observable",
    "Integral",
    "LogWeight",
    "Bin",
]
