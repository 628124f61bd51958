from .autodiff import Dual, deriv, valderiv
from .context import Context, getcontext, localcontext, setcontext
from .optimize import (
    Bracket,
    BracketOptions,
    InvalidIntervalError,
    NewtonOptions,
    NewtonResult,
    RootSearchOptions,
    RootSearchResult,
    find_brackets,
    newton,
    root_search,
)

__all__ = [
    "Dual",
    "deriv",
    "valderiv",
    "Context",
    "getcontext",
    "localcontext",
    "setcontext",
    "Bracket",
    "BracketOptions",
    "InvalidIntervalError",
    "NewtonOptions",
    "NewtonResult",
    "RootSearchOptions",
    "RootSearchResult",
    "find_brackets",
    "newton",
    "root_search",
]
