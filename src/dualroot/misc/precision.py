from typing import Any

import mpmath
import mpmath.ctx_mp_python
import numpy as np


def eps(x: Any) -> Any:
    """Return the machine epsilon of the scalar type of `x`.

    Parameters
    ----------
    x : float | int | numpy.floating | mpmath.mpf

    Returns
    -------
    float | numpy.floating | mpmath.mpf
        The difference between 1 and the least value greater than 1 that is
        representable in the type of `x`. Integers are treated as floats.

    Examples
    --------
    >>> eps(1.0) == 2.0**-52
    True
    >>> bool(eps(np.float32(1.0)) == np.float32(2.0**-23))
    True
    """
    match x:
        case mpmath.ctx_mp_python.mpnumeric():
            return +mpmath.mp.eps

        case np.floating():
            return np.finfo(type(x)).eps

        case float() | int():
            return float(np.finfo(np.float64).eps)

        case _:
            raise TypeError(f"unsupported type: {type(x).__name__}")


def isfinite(x: Any) -> bool:
    """Return ``True`` if `x` is neither an infinity nor a NaN."""
    match x:
        case mpmath.ctx_mp_python.mpnumeric():
            return bool(mpmath.isfinite(x))

        case np.floating() | float():
            return bool(np.isfinite(x))

        case int():
            return True

        case _:
            raise TypeError(f"unsupported type: {type(x).__name__}")
