from collections.abc import Iterable
from typing import Any, Self


def _base(value: Any) -> Any:
    while isinstance(value, Dual):
        value = value.real

    return value


class Dual[T]:
    r"""Dual number for forward-mode automatic differentiation.

    Parameters
    ----------
    real : T
    imag : Iterable[T]

    Attributes
    ----------
    real : T
        Value of the function.
    imag : list[T]
        Partial derivatives of the function.

    Notes
    -----
    Instances of this class behave like elements of the dual number ring

    .. math::

        T[x_1,x_2,\dotsc,x_n]/(x_ix_j\mid i,j\in\{1,2,\dotsc,n\}),

    where :math:`n` is the length of `imag`.

    A dual number whose `real` is itself a dual number has a higher priority. When
    two dual numbers of different priorities meet, the one with the lower priority
    is treated as a constant, which makes nesting yield higher-order derivatives.

    Ordering comparisons and :func:`abs` only look at the innermost real part.

    Examples
    --------
    >>> x, = Dual.variable(3.0)
    >>> y = x**2 + 2 * x
    >>> y.real, y.imag
    (15.0, [8.0])
    """

    __slots__ = ("real", "imag", "_priority")
    __array_ufunc__ = None
    real: T
    imag: list[T]
    _priority: int

    def __init__(self, real: T, imag: Iterable[T]):
        self.real = real
        self.imag = list(imag)
        self._priority = (real._priority + 1) if isinstance(real, Dual) else 0

        if len(self.imag) == 0:
            raise ValueError("imag must not be empty")

    @classmethod
    def constant(cls, value: T, n: int = 1) -> Self:
        """Return a dual number whose derivatives are all zero.

        Parameters
        ----------
        value : T
        n : int, default=1
            Number of independent variables.
        """
        ZERO = value * 0
        return cls(value, (ZERO,) * n)

    @classmethod
    def variable(cls, *args: T) -> tuple[Self, ...]:
        """Return dual numbers seeded for differentiation with respect to each of
        `args`."""
        result: list[Self] = []
        ZERO = args[0] * 0
        ONE = ZERO + 1

        for argnum, arg in enumerate(args):
            imag = (ONE if i == argnum else ZERO for i in range(len(args)))
            result.append(cls(arg, imag))

        return tuple(result)

    @property
    def priority(self) -> int:
        return self._priority

    def __repr__(self) -> str:
        return f"{type(self).__name__}(real={self.real!r}, imag={self.imag!r})"

    def __str__(self) -> str:
        imag = (", ").join(str(x) for x in self.imag)
        return f"{type(self).__name__}(real={self.real}, imag=[{imag}])"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented

        return other.real == self.real and other.imag == self.imag  # type: ignore

    def __lt__(self, rhs: Any) -> bool:
        return _base(self) < _base(rhs)

    def __le__(self, rhs: Any) -> bool:
        return _base(self) <= _base(rhs)

    def __gt__(self, rhs: Any) -> bool:
        return _base(self) > _base(rhs)

    def __ge__(self, rhs: Any) -> bool:
        return _base(self) >= _base(rhs)

    def __abs__(self) -> Self:
        return -self if _base(self) < 0 else +self

    def __add__(self, rhs: Self | T | int | float) -> Self:
        if not isinstance(rhs, Dual) or self._priority > rhs._priority:
            return self.__class__(self.real + rhs, self.imag)  # type: ignore

        if self._priority < rhs._priority:
            return NotImplemented

        imag = (x + y for x, y in zip(self.imag, rhs.imag))
        return self.__class__(self.real + rhs.real, imag)

    def __sub__(self, rhs: Self | T | int | float) -> Self:
        if not isinstance(rhs, Dual) or self._priority > rhs._priority:
            return self.__class__(self.real - rhs, self.imag)  # type: ignore

        if self._priority < rhs._priority:
            return NotImplemented

        imag = (x - y for x, y in zip(self.imag, rhs.imag))
        return self.__class__(self.real - rhs.real, imag)

    def __mul__(self, rhs: Self | T | int | float) -> Self:
        if not isinstance(rhs, Dual) or self._priority > rhs._priority:
            return self.__class__(self.real * rhs, (x * rhs for x in self.imag))  # type: ignore

        if self._priority < rhs._priority:
            return NotImplemented

        imag = (self.real * y + x * rhs.real for x, y in zip(self.imag, rhs.imag))
        return self.__class__(self.real * rhs.real, imag)

    def __truediv__(self, rhs: Self | T | int | float) -> Self:
        if not isinstance(rhs, Dual) or self._priority > rhs._priority:
            return self.__class__(self.real / rhs, (x / rhs for x in self.imag))  # type: ignore

        if self._priority < rhs._priority:
            return NotImplemented

        s = rhs.real**2
        imag = ((x * rhs.real - self.real * y) / s for x, y in zip(self.imag, rhs.imag))
        return self.__class__(self.real / rhs.real, imag)

    def __pow__(self, rhs: Self | T | int | float) -> Self:
        if isinstance(rhs, Dual):
            from dualroot import function as drf

            return drf.pow(self, rhs)

        if rhs == 0:
            return self.constant(self.real * 0 + 1, len(self.imag))

        # d(x**r) = r * x**(r - 1) dx
        coeff = rhs * self.real ** (rhs - 1)
        return self.__class__(self.real**rhs, (coeff * x for x in self.imag))

    def __neg__(self) -> Self:
        return self.__class__(-self.real, (-x for x in self.imag))

    def __pos__(self) -> Self:
        return self.__class__(+self.real, (+x for x in self.imag))

    def __radd__(self, lhs: Self | T | int | float) -> Self:
        if not isinstance(lhs, Dual) or self._priority > lhs._priority:
            return self.__class__(lhs + self.real, self.imag)  # type: ignore

        if self._priority < lhs._priority:
            return NotImplemented

        imag = (x + y for x, y in zip(lhs.imag, self.imag))
        return self.__class__(lhs.real + self.real, imag)

    def __rsub__(self, lhs: Self | T | int | float) -> Self:
        if not isinstance(lhs, Dual) or self._priority > lhs._priority:
            return self.__class__(lhs - self.real, (-x for x in self.imag))  # type: ignore

        if self._priority < lhs._priority:
            return NotImplemented

        imag = (x - y for x, y in zip(lhs.imag, self.imag))
        return self.__class__(lhs.real - self.real, imag)

    def __rmul__(self, lhs: Self | T | int | float) -> Self:
        if not isinstance(lhs, Dual) or self._priority > lhs._priority:
            return self.__class__(lhs * self.real, (lhs * x for x in self.imag))  # type: ignore

        if self._priority < lhs._priority:
            return NotImplemented

        imag = (lhs.real * y + x * self.real for x, y in zip(lhs.imag, self.imag))
        return self.__class__(lhs.real * self.real, imag)

    def __rtruediv__(self, lhs: Self | T | int | float) -> Self:
        if not isinstance(lhs, Dual) or self._priority > lhs._priority:
            s = self.real**2
            imag = (-lhs * x / s for x in self.imag)  # type: ignore
            return self.__class__(lhs / self.real, imag)  # type: ignore

        if self._priority < lhs._priority:
            return NotImplemented

        s = self.real**2
        imag = ((x * self.real - lhs.real * y) / s for x, y in zip(lhs.imag, self.imag))
        return self.__class__(lhs.real / self.real, imag)  # type: ignore

    def __rpow__(self, lhs: T | int | float) -> Self:
        from dualroot import function as drf

        return drf.pow(lhs, self)
