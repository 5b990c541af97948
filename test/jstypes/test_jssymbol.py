from __future__ import annotations

from unmirror.jstypes.jsfunction import JSFunction
from unmirror.jstypes.jssymbol import JSSymbol
from unmirror.jstypes.jsundefined import JSUndefined


def test_JSSymbol_identity() -> None:
    a = JSSymbol("foo")
    assert a == a
    assert a != JSSymbol("foo")
    assert len({a, JSSymbol("foo")}) == 2


def test_JSSymbol_str() -> None:
    assert str(JSSymbol("foo")) == "Symbol(foo)"
    assert str(JSSymbol()) == "Symbol()"
    assert repr(JSSymbol()) == "JSSymbol()"


def test_JSFunction() -> None:
    fn = JSFunction("() => 1")

    assert fn() is JSUndefined
    assert repr(fn) == "JSFunction('() => 1')"
    assert repr(JSFunction()) == "JSFunction()"
    assert fn != JSFunction("() => 1")


def test_JSUndefined() -> None:
    assert not JSUndefined
    assert repr(JSUndefined) == "JSUndefined"
    assert str(JSUndefined) == "JSUndefined"
