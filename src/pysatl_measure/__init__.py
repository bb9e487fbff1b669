"""
PySATL Measure
==============

Measure integrator for probability distributions: a distribution is
represented by the way it integrates observables, composed with
``pure``/``bind`` and queried for expectations, moments, probabilities and
binned summaries.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .configuration import *
from .configuration import __all__ as _config_all
from .errors import *
from .errors import __all__ as _errors_all
from .measures import *
from .measures import __all__ as _measures_all
from .quadrature import *
from .quadrature import __all__ as _quadrature_all
from .reporting import *
from .reporting import __all__ as _reporting_all
from .statistics import *
from .statistics import __all__ as _statistics_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-measure")
__all__ = [
    "__version__",
    *_config_all,
    *_errors_all,
    *_measures_all,
    *_quadrature_all,
    *_reporting_all,
    *_statistics_all,
    *_types_all,
]

del _config_all
del _errors_all
del _measures_all
del _quadrature_all
del _reporting_all
del _statistics_all
del _types_all
