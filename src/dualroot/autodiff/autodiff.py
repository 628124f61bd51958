import functools
from collections.abc import Callable
from typing import Any

from dualroot.autodiff.dual import Dual


def valderiv[T](fun: Callable[..., Any]) -> Callable[..., tuple[T, T]]:
    """Return a function that evaluates the univariate scalar-valued function and its
    derivative in a single pass.

    Parameters
    ----------
    fun : Callable
        Differentiated function.

    Returns
    -------
    Callable
        Function returning the pair ``(fun(x), fun'(x))``.

    Warnings
    --------
    `fun` must not contain conditional branches depending on its argument.

    See Also
    --------
    deriv

    Examples
    --------
    >>> from dualroot import function as drf
    >>> f = valderiv(lambda x: x * drf.exp(x))
    >>> y, dy = f(0.0)
    >>> print(y, dy)
    0.0 1.0
    """

    def result(x, /, **kwargs):
        (var,) = Dual.variable(x)
        tmp: Any = fun(var, **kwargs)

        # constant functions return a scalar or a dual not depending on `var`
        if not isinstance(tmp, Dual) or tmp.priority < var.priority:
            return (tmp, tmp * 0)

        return (tmp.real, tmp.imag[0])

    return result


def deriv[T](fun: Callable[..., T]) -> Callable[..., T]:
    """Return a function that evaluates the derivative of the univariate scalar-valued
    function.

    Parameters
    ----------
    fun : Callable
        Differentiated function.

    Returns
    -------
    Callable
        Derivative of `fun`.

    Warnings
    --------
    `fun` must not contain conditional branches depending on its argument.

    See Also
    --------
    valderiv

    Examples
    --------
    >>> from dualroot import function as drf
    >>> f = lambda x: x**2 + drf.sqrt(x + 3)
    >>> df = deriv(f)
    >>> print(format(df(1.2), ".6g"))
    2.64398

    Derivatives of higher order can be obtained in the same manner.

    >>> ddf = deriv(df)
    >>> print(format(ddf(1.2), ".6g"))
    1.97095
    """
    fun_valderiv = valderiv(fun)

    def result(x, /, **kwargs):
        return fun_valderiv(x, **kwargs)[1]

    return result


def _defderiv(fun: Callable, partial: Callable, *, argnum: int = 0) -> None:
    if (partials := getattr(fun, "_partials", None)) is None:
        raise ValueError(f"{fun.__name__} is not a primitive")

    partials[argnum] = partial


def _primitive[T](fun: Callable[..., T]) -> Callable[..., T]:
    partials: dict[int, Callable] = {}

    @functools.wraps(fun)
    def wrapper(*args):
        priority = max((x.priority for x in args if isinstance(x, Dual)), default=-1)

        if priority < 0:
            return fun(*args)

        leading = [isinstance(x, Dual) and x.priority == priority for x in args]
        inner = [x.real if lead else x for x, lead in zip(args, leading)]
        imag = None

        for argnum, (arg, lead) in enumerate(zip(args, leading)):
            if not lead:
                continue

            scale = partials[argnum](*inner)
            terms = [scale * x for x in arg.imag]
            imag = terms if imag is None else [x + y for x, y in zip(imag, terms)]

        return Dual(wrapper(*inner), imag)  # type: ignore

    wrapper._partials = partials  # type: ignore
    return wrapper
