"""
####################################
Miscellaneous (:mod:`dualroot.misc`)
####################################

This module provides some utilities, primarily for library developers.

.. autosummary::
    :toctree: generated/

    eps
    isfinite

"""

from .precision import eps, isfinite

__all__ = ["eps", "isfinite"]
