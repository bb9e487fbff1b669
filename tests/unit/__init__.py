"""
PySATL Measure
==============

Unit tests for the measure core, constructors, quadrature, statistics and
reporting layers.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
