import dataclasses
import logging
from collections.abc import Callable

from dualroot.context import getcontext
from dualroot.optimize.bracketing import Bracket, BracketOptions, _find_brackets
from dualroot.optimize.newton import NewtonOptions, _newton
from dualroot.typing import RealScalar

logger = logging.getLogger(__name__)

_SEEDS = 100


class InvalidIntervalError(ValueError):
    """Raised when the search interval is empty, degenerate, or inverted."""


@dataclasses.dataclass(frozen=True, slots=True)
class RootSearchOptions[T: RealScalar]:
    """Parameters of :func:`root_search`.

    Attributes
    ----------
    lower : T
        Lower bound of the search interval.
    upper : T
        Upper bound of the search interval.
    patience : int, default=2000
        Maximum number of iterations of each Newton run.
    tolerance : T | float, default=1e-4
        Step length below which a Newton run is considered converged.
    resolution : int, default=1000
        Number of equal sub-intervals scanned for sign changes.
    """

    lower: T
    upper: T
    patience: int = 2000
    tolerance: T | float = 1e-4
    resolution: int = 1000

    def __post_init__(self):
        if self.patience <= 0:
            raise ValueError("patience must be positive")

        if not self.tolerance > 0:
            raise ValueError("tolerance must be positive")

        if self.resolution <= 0:
            raise ValueError("resolution must be positive")

    def newton_options(self, guess: T) -> NewtonOptions[T]:
        return NewtonOptions(guess, self.patience, self.tolerance)

    def bracket_options(self) -> BracketOptions[T]:
        return BracketOptions(self.lower, self.upper, self.resolution)


@dataclasses.dataclass(frozen=True, slots=True)
class RootSearchResult[T: RealScalar]:
    """Output of :func:`root_search`.

    Attributes
    ----------
    roots : list[T]
        Roots confirmed by Newton's method, at most one per bracket, in the order of
        `brackets`.
    brackets : list[Bracket]
        Every bracket found by the scan, including those without a confirmed root.
    """

    roots: list[T] = dataclasses.field(default_factory=list)
    brackets: list[Bracket[T]] = dataclasses.field(default_factory=list)


def root_search[T: RealScalar](
    fun: Callable, options: RootSearchOptions[T]
) -> RootSearchResult[T]:
    """Find all roots of the univariate scalar-valued function in an interval.

    Parameters
    ----------
    fun : Callable
        Function to find roots of. It must accept and return
        :class:`~dualroot.autodiff.Dual`, e.g. a composition of arithmetic and
        :mod:`dualroot.function`.
    options : RootSearchOptions

    Returns
    -------
    RootSearchResult

    Raises
    ------
    InvalidIntervalError
        If ``options.lower`` is not less than ``options.upper``.

    Warnings
    --------
    `fun` must be a :math:`C^1`-function on the interval, and must not contain
    conditional branches depending on its argument. Roots of even multiplicity and
    pairs of roots closer than one scan step are missed (cf. :func:`find_brackets`).

    See Also
    --------
    find_brackets, newton

    Notes
    -----
    The interval is first scanned by :func:`find_brackets`. Then, for each bracket,
    Newton's method is started from 100 equally spaced points strictly inside the
    bracket, from left to right, until one of the following happens:

    * the iteration converges to a point strictly inside the bracket, which is
      accepted as a root;
    * the iteration exceeds ``options.patience`` steps, in which case the bracket
      is abandoned.

    A run converging outside the bracket, and a degenerate run (cf.
    :func:`newton`), moves on to the next starting point.

    The current :class:`~dualroot.context.Context` is read once at the beginning.

    Examples
    --------
    >>> from dualroot import function as drf
    >>> r = root_search(drf.cos, RootSearchOptions(-5.0, 5.0))
    >>> len(r.roots), len(r.brackets)
    (4, 4)
    >>> print(format(r.roots[2], ".6f"))
    1.570796
    """
    lower, upper = options.lower, options.upper

    if lower == upper:
        raise InvalidIntervalError(f"bounds cannot be the same: {lower}")

    if not lower < upper:
        raise InvalidIntervalError(
            f"lower bound must be less than upper bound: [{lower}, {upper}]"
        )

    tracer = getcontext().tracer(logger)
    brackets = _find_brackets(fun, options.bracket_options(), tracer)
    result: RootSearchResult[T] = RootSearchResult(brackets=brackets)

    for bracket in brackets:
        if (root := _probe(fun, bracket, options, tracer)) is not None:
            result.roots.append(root)

    if tracer is not None:
        tracer.debug(
            "Confirmed %d roots in %d brackets", len(result.roots), len(brackets)
        )

    return result


def _probe[T: RealScalar](
    fun: Callable,
    bracket: Bracket[T],
    options: RootSearchOptions[T],
    tracer: logging.Logger | None,
) -> T | None:
    step = bracket.width / (_SEEDS + 1)

    for i in range(_SEEDS):
        guess = bracket.lower + step * (i + 1)
        r = _newton(fun, options.newton_options(guess), tracer)

        match r.status:
            case "CONVERGED":
                if bracket.interiorcontains(r.root):  # type: ignore
                    return r.root

            case "DEGENERATE":
                pass

            case "MAXITER":
                if tracer is not None:
                    tracer.debug(
                        "Abandoned bracket (%s, %s) at guess %s",
                        bracket.lower,
                        bracket.upper,
                        guess,
                    )

                return None

    return None
