"""Constant values related to the DevTools Protocol's remote object descriptions."""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
from types import MappingProxyType
from typing import TYPE_CHECKING, Final, Literal, overload

from unmirror._errors import JSRegExpUnmirrorError
from unmirror._pycompat.enum import IterableIntFlag, StrEnum
from unmirror._pycompat.re import RegexFlag

if TYPE_CHECKING:
    from typing_extensions import Self

DEFAULT_MAX_DEPTH: Final = 64
"""How deeply nested previews may be before decoding gives up.

DevTools previews are normally one level deep, so any real remote object is far
below this limit.
"""


class RemoteObjectType(StrEnum):
    """The `type` field of a [`Runtime.RemoteObject`].

    [`Runtime.RemoteObject`]: https://chromedevtools.github.io/devtools-protocol/\
tot/Runtime/#type-RemoteObject
    """

    Object = "object"
    Function = "function"
    Undefined = "undefined"
    String = "string"
    Number = "number"
    Boolean = "boolean"
    Symbol = "symbol"
    BigInt = "bigint"


class RemoteObjectSubtype(StrEnum):
    """The `subtype` field of a [`Runtime.RemoteObject`], which refines `object`.

    Only some subtypes are reconstructed as specific values. The others (weakmap,
    promise, proxy, etc.) are reconstructed as plain objects from their preview.

    [`Runtime.RemoteObject`]: https://chromedevtools.github.io/devtools-protocol/\
tot/Runtime/#type-RemoteObject
    """

    Array = "array"
    Null = "null"
    Node = "node"
    RegExp = "regexp"
    Date = "date"
    Map = "map"
    Set = "set"
    WeakMap = "weakmap"
    WeakSet = "weakset"
    Iterator = "iterator"
    Generator = "generator"
    Error = "error"
    Proxy = "proxy"
    Promise = "promise"
    TypedArray = "typedarray"
    ArrayBuffer = "arraybuffer"
    DataView = "dataview"
    WebAssemblyMemory = "webassemblymemory"
    WasmValue = "wasmvalue"
    TrustedType = "trustedtype"


class JSRegExpFlag(IterableIntFlag):
    """
    The flags of a JavaScript RegExp.

    This is an [IntFlag enum](`enum.IntFlag`). `str()` renders the flags in
    the order V8 renders them in.

    Examples
    --------
    >>> str(JSRegExpFlag.from_text("mg"))
    'gm'
    """

    HasIndices = "d", 7, RegexFlag.NOFLAG
    Global = "g", 0, RegexFlag.NOFLAG
    IgnoreCase = "i", 1, RegexFlag.IGNORECASE
    Linear = "l", 6, None
    Multiline = "m", 2, RegexFlag.MULTILINE
    DotAll = "s", 5, RegexFlag.DOTALL
    Unicode = "u", 4, RegexFlag.UNICODE
    UnicodeSets = "v", 8, RegexFlag.UNICODE
    Sticky = "y", 3, RegexFlag.NOFLAG
    NoFlag = "", None, RegexFlag.NOFLAG

    __char: str  # only present on defined values, not combinations
    __python_flag: RegexFlag | None

    if not TYPE_CHECKING:  # this __new__ breaks the default Enum types if mypy sees it

        def __new__(
            cls, char: str, bit_index: int | None, python_flag: RegexFlag | None
        ) -> Self:
            value = 0 if bit_index is None else (1 << bit_index)
            obj = int.__new__(cls, value)
            obj._value_ = value
            obj.__char = char
            obj.__python_flag = python_flag
            return obj

    @staticmethod
    @lru_cache(maxsize=1)  # noqa: B019
    def _char_mapping() -> Mapping[str, JSRegExpFlag]:
        return MappingProxyType({f.__char: f for f in JSRegExpFlag if f.value})

    @staticmethod
    def from_text(flags: str) -> JSRegExpFlag:
        """Parse flag characters, like the second argument of `new RegExp()`.

        Raises
        ------
        JSRegExpUnmirrorError
            If `flags` contains unknown or repeated characters.
        """
        mapping = JSRegExpFlag._char_mapping()
        result = JSRegExpFlag.NoFlag
        for char in flags:
            flag = mapping.get(char)
            if flag is None:
                raise JSRegExpUnmirrorError(f"Invalid RegExp flag {char!r}")
            if result & flag:
                raise JSRegExpUnmirrorError(f"RegExp flag {char!r} is repeated")
            result |= flag
        return result

    @overload
    def as_python_flags(self, *, throw: Literal[False]) -> RegexFlag | None: ...

    @overload
    def as_python_flags(self, *, throw: Literal[True] = True) -> RegexFlag: ...

    def as_python_flags(self, *, throw: bool = True) -> RegexFlag | None:
        """
        Get the Python `re` module flags that correspond to this value's active flags.

        Linear has no Python equivalent, so the result is None (or an error
        is raised). Flags that only adjust JavaScript's matching API, such as
        Global and Sticky, are ignored.
        """
        flags = RegexFlag.NOFLAG
        for f in self:
            if f.__python_flag is None:
                break
            flags |= f.__python_flag
        else:
            return flags

        if not throw:
            return None

        incompatible = ", ".join(
            f"JSRegExpFlag.{f.name}" for f in self if f.__python_flag is None
        )
        raise JSRegExpUnmirrorError(
            f"No equivalent Python flags exist for {incompatible}"
        )

    def __str__(self) -> str:
        return "".join(f.__char for f in JSRegExpFlag if f.value and self & f)


class JSErrorName(StrEnum):
    """An enum of the JavaScript Error constructors that are reconstructed by name."""

    Error = "Error"
    EvalError = "EvalError"
    RangeError = "RangeError"
    ReferenceError = "ReferenceError"
    SyntaxError = "SyntaxError"
    TypeError = "TypeError"
    URIError = "URIError"

    @staticmethod
    def for_class_name(class_name: str | None) -> JSErrorName:
        """
        Get the constructor used to reconstruct an error with a `className`.

        Firefox's non-standard `InternalError`, user-defined subclasses and
        missing class names all use the generic `Error`.

        Returns
        -------
        :
            The `JSErrorName` enum member equal to `class_name`, or
            `JSErrorName.Error` if none match.
        """
        return (
            JSErrorName(class_name)
            if class_name in JSErrorName
            else JSErrorName.Error
        )
