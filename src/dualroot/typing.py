"""
################################
Typing (:mod:`dualroot.typing`)
################################

This module provides type definitions commonly used between modules.

.. autoclass:: RealScalar
    :show-inheritance:
    :no-members:

"""

from typing import Protocol, Self, SupportsAbs


class RealScalar(SupportsAbs, Protocol):
    """Protocol for the bounds, estimates, and roots handled by
    :mod:`dualroot.optimize`.

    A bracket scan needs subtraction, division by the resolution, and ordering; a
    Newton step needs the four arithmetic operations and :func:`abs`. ``float``,
    NumPy floating scalars, and mpmath real numbers satisfy it.
    """

    __slots__ = ()

    def __add__(self, rhs: Self | int, /) -> Self: ...

    def __sub__(self, rhs: Self | int, /) -> Self: ...

    def __mul__(self, rhs: Self | int, /) -> Self: ...

    def __truediv__(self, rhs: Self | int, /) -> Self: ...

    def __lt__(self, rhs: Self | int, /) -> bool: ...

    def __gt__(self, rhs: Self | int, /) -> bool: ...
