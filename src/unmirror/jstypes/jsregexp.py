from __future__ import annotations

import re
from dataclasses import dataclass, field
from re import Pattern, compile
from typing import Literal, overload

from unmirror._errors import JSRegExpUnmirrorError
from unmirror._pycompat.dataclasses import slots_if310
from unmirror.constants import JSRegExpFlag


@dataclass(frozen=True, order=True, **slots_if310())
class JSRegExp:
    """The data represented by a [JavaScript RegExp].

    Note that while Python and JavaScript Regular Expressions are similar, they
    each have features and syntax not supported by the other. Simple expressions
    will work the same in both languages, but this is not the case in general.

    **`JSRegExp` does not support matching text with the RegExp**, but
    [`as_python_pattern()`] can work for patterns that use compatible syntax and
    flags.

    [`as_python_pattern()`]: `unmirror.jstypes.JSRegExp.as_python_pattern`
    [JavaScript RegExp]: https://developer.mozilla.org/en-US/docs/Web/\
JavaScript/Reference/Global_Objects/RegExp

    Parameters
    ----------
    source
        The pattern text, without delimiters.
    flags
        The RegExp's flags.
    last_index
        The RegExp's `lastIndex`: where the next global or sticky match starts.

    Examples
    --------
    >>> r = JSRegExp("ab+c", JSRegExpFlag.from_text("gm"), last_index=3)
    >>> str(r)
    '/ab+c/gm'
    """

    source: str
    flags: JSRegExpFlag = field(default=JSRegExpFlag.NoFlag)
    last_index: int = field(default=0)

    def __post_init__(self) -> None:
        if self.source == "":
            # JavaScript regexes cannot be empty, because the slash-delimited
            # literal syntax would be the same as a comment. Empty regexes are
            # represented as an empty non-capturing group.
            object.__setattr__(self, "source", "(?:)")
        if self.flags & JSRegExpFlag.Unicode and self.flags & JSRegExpFlag.UnicodeSets:
            raise JSRegExpUnmirrorError(
                "The Unicode and UnicodeSets flags cannot be set together: "
                "Setting both is a syntax error in JavaScript because they "
                "enable incompatible interpretations of the RegExp source."
            )

    def __str__(self) -> str:
        return f"/{self.source}/{self.flags}"

    @overload
    def as_python_pattern(self, throw: Literal[False]) -> Pattern[str] | None: ...

    @overload
    def as_python_pattern(self, throw: Literal[True] = True) -> Pattern[str]: ...

    def as_python_pattern(self, throw: bool = True) -> Pattern[str] | None:
        """Naively compile the JavaScript RegExp as a Python re.Pattern.

        The pattern may fail to compile due to syntax incompatibility, or may
        compile but behave incorrectly due to differences between Python and
        JavaScript's regular expression support.
        """
        try:
            return compile(self.source, self.flags.as_python_flags())
        except (JSRegExpUnmirrorError, re.error) as e:
            if throw:
                raise JSRegExpUnmirrorError(
                    f"JSRegExp is not a valid Python re.Pattern: {e}"
                ) from e
            return None
