import dataclasses
import logging
import math
from collections.abc import Callable, Iterator
from typing import Any

from dualroot.autodiff.dual import Dual
from dualroot.context import getcontext
from dualroot.misc.precision import eps
from dualroot.typing import RealScalar

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class BracketOptions[T: RealScalar]:
    """Parameters of :func:`find_brackets`.

    Attributes
    ----------
    lower : T
        Lower bound of the scanned interval.
    upper : T
        Upper bound of the scanned interval.
    resolution : int, default=1000
        Number of equal sub-intervals to test.
    """

    lower: T
    upper: T
    resolution: int = 1000

    def __post_init__(self):
        if self.resolution <= 0:
            raise ValueError("resolution must be positive")


@dataclasses.dataclass(frozen=True, slots=True)
class Bracket[T: RealScalar]:
    """Sub-interval across which a function changes its sign.

    Attributes
    ----------
    lower : T
    upper : T
    """

    lower: T
    upper: T

    @property
    def width(self) -> T:
        return self.upper - self.lower  # type: ignore

    def interiorcontains(self, value: T) -> bool:
        """Return ``True`` if `value` lies strictly between the endpoints."""
        return self.lower < value < self.upper

    def __iter__(self) -> Iterator[T]:
        return iter((self.lower, self.upper))


def find_brackets[T: RealScalar](
    fun: Callable, options: BracketOptions[T]
) -> list[Bracket[T]]:
    """Scan the interval for sign changes of the univariate scalar-valued function.

    Parameters
    ----------
    fun : Callable
        Function to be scanned.
    options : BracketOptions

    Returns
    -------
    list[Bracket]
        Brackets ordered from left to right.

    Warnings
    --------
    Roots of even multiplicity and pairs of roots closer than one step produce no
    sign change, and so they are not bracketed.

    Notes
    -----
    The interval is split into ``options.resolution`` sub-intervals of length
    ``(upper - lower) / resolution + eps``, where ``eps`` is the machine epsilon of
    the type of the step (cf. :func:`dualroot.misc.eps`). Thanks to the offset, a
    root lying exactly on the boundary of two sub-intervals of the unwidened grid
    is still bracketed, and the last sample points may lie slightly beyond
    ``options.upper``.

    A sub-interval is reported only if the sampled values at its endpoints are
    nonzero and of opposite signs. A sample at which `fun` raises
    :exc:`ArithmeticError` or :exc:`ValueError`, e.g. outside the domain of
    :func:`dualroot.function.log`, counts as NaN and never forms a bracket.

    Examples
    --------
    >>> from dualroot import function as drf
    >>> r = find_brackets(drf.sin, BracketOptions(-5.0, 5.0, resolution=1000))
    >>> len(r)
    3
    >>> r[1].interiorcontains(0.0)
    True
    """
    return _find_brackets(fun, options, getcontext().tracer(logger))


def _find_brackets[T: RealScalar](
    fun: Callable, options: BracketOptions[T], tracer: logging.Logger | None
) -> list[Bracket[T]]:
    lower = options.lower
    step = (options.upper - lower) / options.resolution
    step = step + eps(step)
    result: list[Bracket[T]] = []

    a = lower
    fa = _sample(fun, a)

    for i in range(options.resolution):
        b = lower + step * (i + 1)
        fb = _sample(fun, b)

        if (fa > 0 and fb < 0) or (fa < 0 and fb > 0):
            result.append(Bracket(a, b))

        a, fa = b, fb

    if tracer is not None:
        tracer.debug(
            "Found %d brackets in [%s, %s] with resolution %d",
            len(result),
            options.lower,
            options.upper,
            options.resolution,
        )

        for bracket in result:
            tracer.debug("bracket: (%s, %s)", bracket.lower, bracket.upper)

    return result


def _sample(fun: Callable, x: Any) -> Any:
    try:
        y = fun(Dual.constant(x))
    except (ArithmeticError, ValueError):
        return math.nan

    return y.real if isinstance(y, Dual) else y
