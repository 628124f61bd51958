import dataclasses
import logging
from collections.abc import Callable
from typing import Literal

from dualroot.autodiff.autodiff import valderiv
from dualroot.context import getcontext
from dualroot.misc.precision import isfinite
from dualroot.typing import RealScalar

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class NewtonOptions[T: RealScalar]:
    """Parameters of :func:`newton`.

    Attributes
    ----------
    guess : T
        Initial estimate of the root.
    patience : int, default=1000
        Maximum number of iterations.
    tolerance : T | float, default=1e-4
        The iteration is considered converged once the length of a Newton step falls
        below `tolerance`.
    """

    guess: T
    patience: int = 1000
    tolerance: T | float = 1e-4

    def __post_init__(self):
        if self.patience <= 0:
            raise ValueError("patience must be positive")

        if not self.tolerance > 0:
            raise ValueError("tolerance must be positive")


@dataclasses.dataclass(frozen=True, slots=True)
class NewtonResult[T: RealScalar]:
    """Output of :func:`newton`.

    Attributes
    ----------
    status : Literal["CONVERGED", "MAXITER", "DEGENERATE"]
    root : T | None
        The refined estimate if `status` is ``"CONVERGED"``; otherwise ``None``.
    iterations : int
        Number of Newton steps taken.
    message : str
        Report from the solver. Typically a reason for a failure.
    """

    status: Literal["CONVERGED", "MAXITER", "DEGENERATE"]
    root: T | None
    iterations: int
    message: str = ""

    @property
    def converged(self) -> bool:
        return self.status == "CONVERGED"


def newton[T: RealScalar](fun: Callable, options: NewtonOptions[T]) -> NewtonResult[T]:
    """Refine a root of the univariate scalar-valued function by Newton's method.

    Parameters
    ----------
    fun : Callable
        Function to find a root of. The derivative is computed by
        :func:`dualroot.autodiff.valderiv`.
    options : NewtonOptions

    Returns
    -------
    NewtonResult

    Warnings
    --------
    `fun` must not contain conditional branches depending on its argument.

    Notes
    -----
    The iteration stops as soon as the length of a step is less than
    ``options.tolerance``; the residual ``fun(root)`` is not tested. If the number of
    steps exceeds ``options.patience``, the last estimate is discarded and `status`
    is ``"MAXITER"``. A vanishing derivative, a non-finite estimate, and an
    :exc:`ArithmeticError` or :exc:`ValueError` (e.g. a math domain error) raised by
    `fun` all end the iteration with `status`
    ``"DEGENERATE"``.

    If tracing is enabled in the current :class:`~dualroot.context.Context`, the
    outcome is logged.

    Examples
    --------
    >>> from dualroot import function as drf
    >>> r = newton(drf.sin, NewtonOptions(2.0, patience=1000, tolerance=1e-4))
    >>> r.status
    'CONVERGED'
    >>> print(format(r.root, ".6f"))
    3.141593
    """
    return _newton(fun, options, getcontext().tracer(logger))


def _newton[T: RealScalar](
    fun: Callable, options: NewtonOptions[T], tracer: logging.Logger | None
) -> NewtonResult[T]:
    fun_valderiv = valderiv(fun)
    current = options.guess
    count = 0

    while True:
        count += 1

        try:
            value, slope = fun_valderiv(current)
        except (ArithmeticError, ValueError) as exc:
            message = f"{type(exc).__name__} raised at {current}: {exc}"
            return _fail("DEGENERATE", options, current, count - 1, message, tracer)

        if slope == 0:
            message = f"derivative vanished at {current}"
            return _fail("DEGENERATE", options, current, count - 1, message, tracer)

        next_ = current - value / slope

        if not isfinite(next_):
            message = f"non-finite estimate after {current}"
            return _fail("DEGENERATE", options, current, count - 1, message, tracer)

        if abs(next_ - current) < options.tolerance:
            if tracer is not None:
                tracer.debug("Found root at %s after %d iterations", next_, count)

            return NewtonResult("CONVERGED", next_, count)

        if count > options.patience:
            message = f"no convergence within {options.patience} iterations"
            return _fail("MAXITER", options, current, count, message, tracer)

        current = next_


def _fail(
    status: Literal["MAXITER", "DEGENERATE"],
    options: NewtonOptions,
    last,
    iterations: int,
    message: str,
    tracer: logging.Logger | None,
) -> NewtonResult:
    if tracer is not None:
        tracer.debug(
            "Failed to find root with initial guess of %s (%s); last iteration was %s",
            options.guess,
            message,
            last,
        )

    return NewtonResult(status, None, iterations, message)
