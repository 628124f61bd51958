import mpmath
import numpy as np
import pytest

from dualroot.misc import eps, isfinite


def test_eps():
    assert eps(1.0) == 2.0**-52
    assert eps(3) == 2.0**-52
    assert eps(np.float32(1.0)) == np.float32(2.0**-23)
    assert isinstance(eps(np.float32(1.0)), np.float32)

    with mpmath.workdps(50):
        assert eps(mpmath.mpf(1)) < 1e-45

    with pytest.raises(TypeError):
        eps("1.0")


def test_isfinite():
    assert isfinite(1.0)
    assert isfinite(10**400)
    assert not isfinite(float("nan"))
    assert not isfinite(np.float32("inf"))
    assert not isfinite(mpmath.inf)
