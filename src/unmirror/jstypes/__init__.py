"""Python representations of the JavaScript values that remote objects describe."""

from __future__ import annotations

from unmirror.constants import JSErrorName as JSErrorName
from unmirror.constants import JSRegExpFlag as JSRegExpFlag
from unmirror.jstypes.jserror import JSError as JSError
from unmirror.jstypes.jsfunction import JSFunction as JSFunction
from unmirror.jstypes.jsobject import JSClass as JSClass
from unmirror.jstypes.jsobject import JSObject as JSObject
from unmirror.jstypes.jsregexp import JSRegExp as JSRegExp
from unmirror.jstypes.jssymbol import JSSymbol as JSSymbol
from unmirror.jstypes.jsundefined import JSUndefined as JSUndefined
from unmirror.jstypes.jsundefined import JSUndefinedType as JSUndefinedType
