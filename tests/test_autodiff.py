import math

import mpmath
import numpy as np
import pytest

from dualroot import function as drf
from dualroot.autodiff import autodiff
from dualroot.autodiff.dual import Dual


def test_deriv():
    deriv1 = autodiff.deriv(lambda x: (x + drf.sin(x**2)) / x)
    deriv2 = autodiff.deriv(deriv1)
    assert pytest.approx(deriv1(1.4), 1e-5) == -1.23095
    assert pytest.approx(deriv2(1.4), 1e-5) == -3.96476


def test_valderiv():
    fun = autodiff.valderiv(lambda x: x * drf.exp(x) - 1)
    value, slope = fun(0.5)
    assert value == pytest.approx(0.5 * math.exp(0.5) - 1)
    assert slope == pytest.approx(1.5 * math.exp(0.5))


def test_valderiv_constant():
    value, slope = autodiff.valderiv(lambda _: 3.0)(1.0)
    assert (value, slope) == (3.0, 0.0)


def test_variable_and_constant():
    x, y = Dual.variable(2.0, 5.0)
    assert x.imag == [1.0, 0.0]
    assert y.imag == [0.0, 1.0]

    c = Dual.constant(2.0)
    assert c.real == 2.0 and c.imag == [0.0]
    assert Dual.constant(np.float32(1.5)).imag[0].dtype == np.float32

    with pytest.raises(ValueError):
        Dual(1.0, [])


def test_arithmetic():
    (x,) = Dual.variable(3.0)
    assert (x * x - 2 * x + 1).imag == [4.0]
    assert (1 / x).imag == [pytest.approx(-1 / 9)]
    assert ((x + 1) / (x - 1)).imag == [pytest.approx(-2 / 4)]
    assert (5 - x).imag == [-1.0]
    assert (-x).real == -3.0


def test_pow():
    (x,) = Dual.variable(4.0)
    assert (x**0.5).imag == [pytest.approx(0.25)]
    assert (x**-1).imag == [pytest.approx(-1 / 16)]
    assert (x**0).imag == [0.0]
    assert (2**x).imag == [pytest.approx(math.log(2) * 16)]
    assert (x**x).imag == [pytest.approx(256 * (math.log(4) + 1))]


def test_comparison():
    (x,) = Dual.variable(-2.0)
    assert x < 0 and x <= -2 and not x > 0
    assert abs(x).real == 2.0
    assert abs(x).imag == [-1.0]


def test_numpy_scalar():
    (x,) = Dual.variable(np.float32(0.5))
    y = np.float32(2) * drf.sin(x)
    assert isinstance(y, Dual)
    assert y.real.dtype == np.float32
    assert y.imag[0] == pytest.approx(2 * math.cos(0.5), rel=1e-6)


def test_mpmath():
    with mpmath.workdps(30):
        df = autodiff.deriv(drf.sin)
        assert mpmath.almosteq(df(mpmath.mpf(1)), mpmath.cos(1), 1e-28)


def test_defderiv():
    with pytest.raises(ValueError):
        autodiff._defderiv(math.sin, math.cos)

    (x,) = Dual.variable(Dual.variable(2.0)[0])
    y = drf.pow(x, 3)
    assert y.imag[0].real == pytest.approx(12.0)
    assert y.imag[0].imag == [pytest.approx(12.0)]
