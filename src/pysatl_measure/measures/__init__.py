"""
Measures subpackage

Continuation-based measures and their constructors:

- measure core with ``pure``/``bind``/``map`` and pointwise arithmetic
  (:mod:`.measure`);
- log-weighted measures and scoring primitives (:mod:`.weighted`);
- primitive constructors from densities, mass functions and samples
  (:mod:`.constructors`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .constructors import (
    bernoulli,
    beta,
    categorical,
    from_density,
    from_empirical,
    from_mass_function,
    uniform,
    uniform_discrete,
    uniform_on,
)
from .measure import Measure, bind, lift2, observe, pure
from .weighted import WeightedMeasure, condition, factor, score

__all__ = [
    # core
    "Measure",
    "observe",
    "pure",
    "bind",
    "lift2",
    # weighted
    "WeightedMeasure",
    "score",
    "factor",
    "condition",
    # constructors
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
