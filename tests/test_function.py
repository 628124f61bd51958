import math

import mpmath
import numpy as np
import pytest

from dualroot import function as drf
from dualroot.autodiff import deriv

UNARY = [
    (drf.exp, math.exp, math.exp),
    (drf.log, math.log, lambda x: 1 / x),
    (drf.sqrt, math.sqrt, lambda x: 0.5 / math.sqrt(x)),
    (drf.sin, math.sin, math.cos),
    (drf.cos, math.cos, lambda x: -math.sin(x)),
    (drf.tan, math.tan, lambda x: 1 / math.cos(x) ** 2),
    (drf.atan, math.atan, lambda x: 1 / (1 + x**2)),
    (drf.sinh, math.sinh, math.cosh),
    (drf.cosh, math.cosh, math.sinh),
    (drf.tanh, math.tanh, lambda x: 1 / math.cosh(x) ** 2),
]


@pytest.mark.parametrize(("fun", "expected", "expected_deriv"), UNARY)
def test_unary(fun, expected, expected_deriv):
    assert fun(0.7) == pytest.approx(expected(0.7))
    assert deriv(fun)(0.7) == pytest.approx(expected_deriv(0.7))


@pytest.mark.parametrize("fun", [x[0] for x in UNARY])
def test_unary_types(fun):
    assert isinstance(fun(np.float32(0.7)), np.float32)
    assert isinstance(fun(mpmath.mpf("0.7")), mpmath.mpf)
    assert fun(np.array([0.7, 0.8])).shape == (2,)

    with pytest.raises(TypeError):
        fun("0.7")


def test_pow():
    assert drf.pow(3.25, 1.25) == pytest.approx(4.363693, 1e-6)
    assert deriv(lambda x: drf.pow(x, 3))(2.0) == pytest.approx(12.0)
    assert deriv(lambda y: drf.pow(2.0, y))(3.0) == pytest.approx(8 * math.log(2))

    with pytest.raises(TypeError):
        drf.pow("2", 3)
