"""
Quadrature Configuration
========================

Process-wide defaults for the quadrature engine:

- :class:`QuadratureConfig` — immutable set of refinement parameters.
- :class:`QuadratureConfigRegister` — singleton holding the active default.
- :func:`configure_quadrature` / :func:`reset_quadrature_config` /
  :func:`quadrature_config` — helpers to change the default.

Notes
-----
- Density-based measures read the default once, when they are constructed.
  Changing the default afterwards does not affect measures built earlier.
- An explicit ``config=`` argument always takes precedence over the default.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any, ClassVar

DEFAULT_LEVELS = 10
"""Default number of interval doublings (1025 nodes on the finest grid)."""


@dataclass(frozen=True, slots=True)
class QuadratureConfig:
    """
    Parameters of the trapezoidal refinement sequence.

    Parameters
    ----------
    levels : int, default 10
        Number of interval doublings after the initial one-panel estimate.
        The finest grid has ``2**levels + 1`` nodes.
    tolerance : float or None, default None
        If set, stop refining as soon as the difference between two
        consecutive estimates is at most ``tolerance``.
    min_levels : int, default 3
        Number of doublings always performed before ``tolerance`` is checked.
    warn_threshold : float or None, default None
        If set, a :class:`~pysatl_measure.errors.NumericAccuracyWarning` is
        issued when the final error estimate exceeds it.

    Raises
    ------
    ValueError
        If any of the parameters is out of range.
    """

    levels: int = DEFAULT_LEVELS
    tolerance: float | None = None
    min_levels: int = 3
    warn_threshold: float | None = None

    def __post_init__(self) -> None:
        if self.levels < 0:
            raise ValueError("levels >= 0")
        if self.min_levels < 0:
            raise ValueError("min_levels >= 0")
        if self.tolerance is not None and self.tolerance < 0:
            raise ValueError("tolerance >= 0")
        if self.warn_threshold is not None and self.warn_threshold < 0:
            raise ValueError("warn_threshold >= 0")


class QuadratureConfigRegister:
    """
    Singleton holder of the default :class:`QuadratureConfig`.
    """

    _instance: ClassVar[QuadratureConfigRegister | None] = None
    _current: QuadratureConfig

    def __new__(cls) -> QuadratureConfigRegister:
        """Create or return the singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._current = QuadratureConfig()
        return cls._instance

    @classmethod
    def get(cls) -> QuadratureConfig:
        """Return the active default configuration."""
        return cls()._current

    @classmethod
    def set(cls, config: QuadratureConfig) -> None:
        """Replace the active default configuration."""
        cls()._current = config

    @classmethod
    def _reset(cls) -> None:
        cls._instance = None


def get_quadrature_config() -> QuadratureConfig:
    """Return the default quadrature configuration."""
    return QuadratureConfigRegister.get()


def configure_quadrature(**changes: Any) -> QuadratureConfig:
    """
    Update fields of the default quadrature configuration.

    Parameters
    ----------
    **changes
        Field values for :class:`QuadratureConfig`.

    Returns
    -------
    QuadratureConfig
        The new default configuration.

    Raises
    ------
    TypeError
        If an unknown field is given.
    ValueError
        If a value is out of range.
    """
    config = replace(QuadratureConfigRegister.get(), **changes)
    QuadratureConfigRegister.set(config)
    return config


def reset_quadrature_config() -> None:
    """
    Restore the built-in default quadrature configuration.
    """
    QuadratureConfigRegister._reset()


@contextmanager
def quadrature_config(**changes: Any) -> Iterator[QuadratureConfig]:
    """
    Temporarily override fields of the default quadrature configuration.

    Examples
    --------
    >>> from pysatl_measure.configuration import quadrature_config
    >>> with quadrature_config(levels=6) as config:
    ...     config.levels
    6
    """
    previous = QuadratureConfigRegister.get()
    try:
        yield configure_quadrature(**changes)
    finally:
        QuadratureConfigRegister.set(previous)


__all__ = [
    "DEFAULT_LEVELS",
    "QuadratureConfig",
    "QuadratureConfigRegister",
    "get_quadrature_config",
    "configure_quadrature",
    "reset_quadrature_config",
    "quadrature_config",
]
