"""
####################################################
Automatic differentiation (:mod:`dualroot.autodiff`)
####################################################

.. currentmodule:: dualroot.autodiff

This module provides forward-mode automatic differentiation.

Differential operators
----------------------

.. autosummary::
    :toctree: generated/

    deriv
    valderiv

Number systems containing infinitesimals
----------------------------------------

.. autosummary::
    :toctree: generated/

    Dual

"""

from .autodiff import deriv, valderiv
from .dual import Dual

__all__ = ["deriv", "valderiv", "Dual"]
