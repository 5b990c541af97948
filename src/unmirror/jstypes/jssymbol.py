from __future__ import annotations

from dataclasses import dataclass

from unmirror._pycompat.dataclasses import slots_if310


@dataclass(frozen=True, eq=False, **slots_if310())
class JSSymbol:
    """A stand-in for a [JavaScript Symbol].

    Symbols are only equal to themselves. Remote object descriptions carry a
    symbol's description text but nothing that identifies the symbol itself, so
    every reconstruction creates a new `JSSymbol`, even when the same remote
    symbol is described twice.

    [JavaScript Symbol]: https://developer.mozilla.org/en-US/docs/Web/\
JavaScript/Reference/Global_Objects/Symbol

    Examples
    --------
    >>> JSSymbol("foo")
    JSSymbol('foo')
    >>> JSSymbol("foo") == JSSymbol("foo")
    False
    """

    description: str | None = None

    def __repr__(self) -> str:
        if self.description is None:
            return "JSSymbol()"
        return f"JSSymbol({self.description!r})"

    def __str__(self) -> str:
        return f"Symbol({self.description or ''})"
