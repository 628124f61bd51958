import logging

from dualroot.context import Context, getcontext, localcontext, setcontext


def test_localcontext():
    ctx = getcontext()
    assert not ctx.debug

    with localcontext(debug=True) as local:
        assert getcontext() is local
        assert local.debug

    assert getcontext() is ctx


def test_tracer():
    default = logging.getLogger("dualroot.test")
    custom = logging.getLogger("custom")
    assert Context().tracer(default) is None
    assert Context(debug=True).tracer(default) is default
    assert Context(debug=True, logger=custom).tracer(default) is custom


def test_setcontext():
    ctx = getcontext()

    try:
        setcontext(Context(debug=True))
        assert getcontext().debug
    finally:
        setcontext(ctx)
