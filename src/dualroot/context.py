"""
##################################
Context (:mod:`dualroot.context`)
##################################

.. currentmodule:: dualroot.context

This module provides the run-time configuration of the solvers.

.. autosummary::
    :toctree: generated/

    Context
    getcontext
    localcontext
    setcontext

"""

import contextlib
import contextvars
import logging
from typing import Self


class Context:
    """Create a new context.

    The solvers in :mod:`dualroot.optimize` read the current context once when they
    are called. The context only controls diagnostics and never affects the computed
    results.

    Parameters
    ----------
    debug : bool, default=False
        If `debug` is ``True``, the solvers trace their progress at the ``DEBUG``
        level.
    logger : logging.Logger, optional
        Destination of the trace. If `logger` is ``None``, each solver logs to its
        own module logger under ``"dualroot"``.
    """

    __slots__ = ("_debug", "_logger")
    _debug: bool
    _logger: logging.Logger | None

    def __init__(self, debug: bool = False, logger: logging.Logger | None = None):
        self._debug = debug
        self._logger = logger

    @property
    def debug(self) -> bool:
        return self._debug

    @property
    def logger(self) -> logging.Logger | None:
        return self._logger

    def tracer(self, default: logging.Logger) -> logging.Logger | None:
        """Return the logger receiving the trace, or ``None`` if tracing is off.

        Parameters
        ----------
        default : logging.Logger
            Logger used when the context does not specify one.
        """
        if not self._debug:
            return None

        return self._logger if self._logger is not None else default

    def copy(self) -> Self:
        return self.__class__(self._debug, self._logger)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(debug={self._debug!r}, logger={self._logger!r})"

    def __copy__(self) -> Self:
        return self.copy()


_var: contextvars.ContextVar[Context] = contextvars.ContextVar("dualroot")


def getcontext() -> Context:
    """Return the current context for the active thread."""
    if context := _var.get(None):
        return context

    context = Context()
    _var.set(context)
    return context


def setcontext(ctx: Context) -> None:
    """Set the current context for the active thread to `ctx`."""
    _var.set(ctx)


@contextlib.contextmanager
def localcontext(
    ctx: Context | None = None,
    *,
    debug: bool | None = None,
    logger: logging.Logger | None = None,
):
    """Return a context manager that will set the current context for the active thread
    to a copy of `ctx` on entry to the with-statement and restore the previous context
    when exiting the with-statement.

    Examples
    --------
    >>> with localcontext(debug=True) as ctx:
    ...     ctx.debug
    True
    >>> getcontext().debug
    False
    """
    if ctx is None:
        ctx = getcontext()

    if debug is None:
        debug = ctx.debug

    if logger is None:
        logger = ctx.logger

    ctx = Context(debug, logger)
    token = _var.set(ctx)

    try:
        yield ctx
    finally:
        _var.reset(token)
