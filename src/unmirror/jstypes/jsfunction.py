from __future__ import annotations

from dataclasses import dataclass

from unmirror._pycompat.dataclasses import slots_if310
from unmirror.jstypes.jsundefined import JSUndefined, JSUndefinedType


@dataclass(frozen=True, eq=False, **slots_if310())
class JSFunction:
    """A placeholder for a JavaScript function.

    The DevTools Protocol never sends function bodies, only a description
    (usually the function's source text). Calling a `JSFunction` does nothing
    and returns `JSUndefined`.
    """

    description: str | None = None

    def __call__(self, *args: object, **kwargs: object) -> JSUndefinedType:
        return JSUndefined

    def __repr__(self) -> str:
        if self.description is None:
            return "JSFunction()"
        return f"JSFunction({self.description!r})"
