import pytest

from dualroot import function as drf
from dualroot.autodiff import Dual
from dualroot.optimize.bracketing import Bracket, BracketOptions, find_brackets


def test_sine():
    r = find_brackets(drf.sin, BracketOptions(-5.0, 5.0, resolution=1000))
    assert len(r) == 3
    assert r[0].interiorcontains(-3.14159)
    assert r[1].interiorcontains(0.0)
    assert r[2].interiorcontains(3.14159)


def test_cosine():
    r = find_brackets(drf.cos, BracketOptions(-5.0, 5.0, resolution=1000))
    assert len(r) == 4
    assert [x.lower < y.lower for x, y in zip(r, r[1:])] == [True] * 3


def test_sign_change():
    fun = lambda x: x**3 - 2 * x  # noqa: E731
    r = find_brackets(fun, BracketOptions(-2.0, 3.0, resolution=50))
    assert len(r) == 3

    for lower, upper in r:
        assert lower < upper
        assert fun(lower) * fun(upper) < 0


def test_root_on_grid():
    # without the offset, x = 0 would be a sample point with a zero value
    r = find_brackets(lambda x: x, BracketOptions(-1.0, 1.0, resolution=2))
    assert len(r) == 1
    assert r[0].lower == -1.0
    assert 0.0 < r[0].upper < 1e-15


def test_samples():
    samples = []

    def fun(x):
        assert isinstance(x, Dual) and x.imag == [0.0]
        samples.append(x.real)
        return x - 0.5

    find_brackets(fun, BracketOptions(0.0, 1.0, resolution=10))
    assert len(samples) == 11
    assert samples[0] == 0.0
    assert samples[-1] > 1.0


def test_no_sign_change():
    assert find_brackets(lambda x: x**2 + 1, BracketOptions(-1.0, 1.0)) == []
    assert find_brackets(lambda x: (x - 0.3) ** 2, BracketOptions(-1.0, 1.0)) == []
    assert find_brackets(lambda _: 1.0, BracketOptions(-1.0, 1.0)) == []


def test_bracket():
    bracket = Bracket(1.0, 1.5)
    assert bracket.width == 0.5
    assert bracket.interiorcontains(1.25)
    assert not bracket.interiorcontains(1.0)
    assert not bracket.interiorcontains(1.5)
    assert tuple(bracket) == (1.0, 1.5)


def test_invalid_options():
    with pytest.raises(ValueError):
        BracketOptions(0.0, 1.0, resolution=0)


def test_zero_sample():
    assert find_brackets(lambda x: x, BracketOptions(0.0, 1.0, resolution=4)) == []
    assert find_brackets(lambda x: -x, BracketOptions(0.0, 1.0, resolution=4)) == []


def test_domain_error():
    # the last sample lies slightly beyond 1, where sqrt(1 - x) is undefined
    fun = lambda x: drf.sqrt(1 - x) - 0.45  # noqa: E731
    r = find_brackets(fun, BracketOptions(0.0, 1.0, resolution=1000))
    assert len(r) == 1
    assert r[0].interiorcontains(0.7975)

    # log(-1) is undefined, so the first sub-interval is skipped
    r = find_brackets(drf.log, BracketOptions(-1.0, 2.0, resolution=3))
    assert len(r) == 1
    assert 0.0 < r[0].lower < 1.0 < r[0].upper
