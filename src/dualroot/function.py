"""
#################################################
Mathematical functions (:mod:`dualroot.function`)
#################################################

.. currentmodule:: dualroot.function

This module provides elementary functions that accept plain floats, NumPy floating
scalars and arrays, mpmath numbers, and :class:`~dualroot.autodiff.Dual`. Applied to a
dual number, each function propagates the derivative by the chain rule.

Power, exponents, and logarithmic functions
===========================================

.. autosummary::
    :toctree: generated/

    exp
    log
    pow
    sqrt

Trigonometric and hyperbolic functions
======================================

.. autosummary::
    :toctree: generated/

    sin
    cos
    tan
    atan
    sinh
    cosh
    tanh

"""

import math

import mpmath
import mpmath.ctx_mp_python
import numpy as np

from dualroot.autodiff.autodiff import _defderiv, _primitive


@_primitive
def exp(x, /):
    """Exponential.

    Examples
    --------
    >>> print(format(exp(2), ".6f"))
    7.389056
    """
    match x:
        case mpmath.ctx_mp_python.mpnumeric():
            return mpmath.exp(x)

        case np.ndarray() | np.floating():
            return np.exp(x)

        case float() | int():
            return math.exp(x)

        case _:
            raise TypeError(f"unsupported type: {type(x).__name__}")


@_primitive
def log(x, /):
    """Natural logarithm.

    Examples
    --------
    >>> print(format(log(5), ".6f"))
    1.609438
    """
    match x:
        case mpmath.ctx_mp_python.mpnumeric():
            return mpmath.log(x)

        case np.ndarray() | np.floating():
            return np.log(x)

        case float() | int():
            return math.log(x)

        case _:
            raise TypeError(f"unsupported type: {type(x).__name__}")


@_primitive
def pow(x, y, /):
    """`x` raised to the power `y`.

    Examples
    --------
    >>> print(format(pow(3.25, 1.25), ".6f"))
    4.363693
    """
    mpnumeric = mpmath.ctx_mp_python.mpnumeric

    match x, y:
        case (mpnumeric(), _) | (_, mpnumeric()):
            return mpmath.power(x, y)

        case (np.ndarray() | np.floating(), _) | (_, np.ndarray() | np.floating()):
            return np.power(x, y)

        case (float() | int(), float() | int()):
            return math.pow(x, y)

        case _:
            raise TypeError(
                f"unsupported types: {type(x).__name__}, {type(y).__name__}"
            )


@_primitive
def sqrt(x, /):
    """Square root.

    Examples
    --------
    >>> print(format(sqrt(2.0), ".6f"))
    1.414214
    """
    match x:
        case mpmath.ctx_mp_python.mpnumeric():
            return mpmath.sqrt(x)

        case np.ndarray() | np.floating():
            return np.sqrt(x)

        case float() | int():
            return math.sqrt(x)

        case _:
            raise TypeError(f"unsupported type: {type(x).__name__}")


@_primitive
def sin(x, /):
    """Sine.

    Examples
    --------
    >>> print(format(sin(1.0), ".6f"))
    0.841471
    """
    match x:
        case mpmath.ctx_mp_python.mpnumeric():
            return mpmath.sin(x)

        case np.ndarray() | np.floating():
            return np.sin(x)

        case float() | int():
            return math.sin(x)

        case _:
            raise TypeError(f"unsupported type: {type(x).__name__}")


@_primitive
def cos(x, /):
    """Cosine.

    Examples
    --------
    >>> print(format(cos(1.0), ".6f"))
    0.540302
    """
    match x:
        case mpmath.ctx_mp_python.mpnumeric():
            return mpmath.cos(x)

        case np.ndarray() | np.floating():
            return np.cos(x)

        case float() | int():
            return math.cos(x)

        case _:
            raise TypeError(f"unsupported type: {type(x).__name__}")


@_primitive
def tan(x, /):
    """Tangent."""
    match x:
        case mpmath.ctx_mp_python.mpnumeric():
            return mpmath.tan(x)

        case np.ndarray() | np.floating():
            return np.tan(x)

        case float() | int():
            return math.tan(x)

        case _:
            raise TypeError(f"unsupported type: {type(x).__name__}")


@_primitive
def atan(x, /):
    """Inverse tangent.

    Examples
    --------
    >>> print(format(atan(1.0), ".6f"))
    0.785398
    """
    match x:
        case mpmath.ctx_mp_python.mpnumeric():
            return mpmath.atan(x)

        case np.ndarray() | np.floating():
            return np.arctan(x)

        case float() | int():
            return math.atan(x)

        case _:
            raise TypeError(f"unsupported type: {type(x).__name__}")


@_primitive
def sinh(x, /):
    """Hyperbolic sine."""
    match x:
        case mpmath.ctx_mp_python.mpnumeric():
            return mpmath.sinh(x)

        case np.ndarray() | np.floating():
            return np.sinh(x)

        case float() | int():
            return math.sinh(x)

        case _:
            raise TypeError(f"unsupported type: {type(x).__name__}")


@_primitive
def cosh(x, /):
    """Hyperbolic cosine."""
    match x:
        case mpmath.ctx_mp_python.mpnumeric():
            return mpmath.cosh(x)

        case np.ndarray() | np.floating():
            return np.cosh(x)

        case float() | int():
            return math.cosh(x)

        case _:
            raise TypeError(f"unsupported type: {type(x).__name__}")


@_primitive
def tanh(x, /):
    """Hyperbolic tangent."""
    match x:
        case mpmath.ctx_mp_python.mpnumeric():
            return mpmath.tanh(x)

        case np.ndarray() | np.floating():
            return np.tanh(x)

        case float() | int():
            return math.tanh(x)

        case _:
            raise TypeError(f"unsupported type: {type(x).__name__}")


_defderiv(exp, exp)
_defderiv(log, lambda x: 1 / x)
_defderiv(pow, lambda x, y: y * pow(x, y - 1), argnum=0)
_defderiv(pow, lambda x, y: log(x) * pow(x, y), argnum=1)
_defderiv(sqrt, lambda x: 1 / (2 * sqrt(x)))
_defderiv(sin, cos)
_defderiv(cos, lambda x: -sin(x))
_defderiv(tan, lambda x: 1 + tan(x) ** 2)
_defderiv(atan, lambda x: 1 / (1 + x**2))
_defderiv(sinh, cosh)
_defderiv(cosh, sinh)
_defderiv(tanh, lambda x: 1 - tanh(x) ** 2)
