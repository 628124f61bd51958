"""
########################################
Root finding (:mod:`dualroot.optimize`)
########################################

.. currentmodule:: dualroot.optimize

This module provides solvers for root finding.

Root finding
============

.. autosummary::
    :toctree: generated/

    find_brackets
    newton
    root_search

Miscellaneous
=============

.. autosummary::
    :toctree: generated/

    Bracket
    BracketOptions
    InvalidIntervalError
    NewtonOptions
    NewtonResult
    RootSearchOptions
    RootSearchResult

"""

from .bracketing import Bracket, BracketOptions, find_brackets
from .newton import NewtonOptions, NewtonResult, newton
from .rootfinding import (
    InvalidIntervalError,
    RootSearchOptions,
    RootSearchResult,
    root_search,
)

__all__ = [
    "Bracket",
    "BracketOptions",
    "find_brackets",
    "NewtonOptions",
    "NewtonResult",
    "newton",
    "InvalidIntervalError",
    "RootSearchOptions",
    "RootSearchResult",
    "root_search",
]
