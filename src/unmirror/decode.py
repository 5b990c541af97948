"""Reconstruct Python values from DevTools Protocol remote object descriptions."""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import TYPE_CHECKING, Any, Callable, Final, Protocol

from unmirror._dates import parse_js_date
from unmirror._errors import (
    DepthLimitUnmirrorError,
    JSRegExpUnmirrorError,
    MalformedUnmirrorError,
)
from unmirror._numeric import (
    parse_bigint_text,
    parse_numeric_text,
    parse_special_number,
)
from unmirror._pycompat.dataclasses import slots_if310
from unmirror.constants import (
    DEFAULT_MAX_DEPTH,
    JSErrorName,
    JSRegExpFlag,
    RemoteObjectSubtype,
    RemoteObjectType,
)
from unmirror.jstypes import (
    JSError,
    JSFunction,
    JSObject,
    JSRegExp,
    JSSymbol,
    JSUndefined,
)
from unmirror.registry import ClassRegistry, default_class_registry

if TYPE_CHECKING:
    from typing_extensions import TypeAlias

    from unmirror.typing import AnyRemoteObject

log = logging.getLogger(__name__)

RemoteObjectMapping: TypeAlias = "Mapping[str, Any]"

JSMapType = Callable[[], object]
JSSetType = Callable[[], object]
JSArrayType = Callable[[Iterable[object]], object]

_SYMBOL_DESCRIPTION: Final = re.compile(r"Symbol\((.*)\)")

_REGEXP_FLAG_PROPERTIES: Final[Mapping[str, JSRegExpFlag]] = {
    "global": JSRegExpFlag.Global,
    "ignoreCase": JSRegExpFlag.IgnoreCase,
    "multiline": JSRegExpFlag.Multiline,
    "hasIndices": JSRegExpFlag.HasIndices,
    "dotAll": JSRegExpFlag.DotAll,
    "unicode": JSRegExpFlag.Unicode,
    "unicodeSets": JSRegExpFlag.UnicodeSets,
    "sticky": JSRegExpFlag.Sticky,
}
"""Boolean RegExp properties sent by Runtime-domain previews, and their flag."""


class ReadRemoteObjectFn(Protocol):
    """A function that reconstructs one kind of remote object."""

    def __call__(
        self, unmirror: Unmirror, remote_object: RemoteObjectMapping, depth: int, /
    ) -> object: ...


def preview_properties(
    remote_object: RemoteObjectMapping,
) -> Sequence[RemoteObjectMapping]:
    """Get the property previews of a remote object.

    The `preview` of a `RemoteObject` and the `valuePreview` of a
    `PropertyPreview` are both used. Missing or malformed previews have no
    properties.
    """
    preview = remote_object.get("preview")
    if preview is None:
        preview = remote_object.get("valuePreview")
    if not isinstance(preview, Mapping):
        return ()

    if preview.get("overflow"):
        log.debug(
            "Preview of %r is truncated, its reconstruction will be incomplete",
            remote_object.get("description"),
        )

    properties = preview.get("properties")
    if not isinstance(properties, Sequence) or isinstance(properties, str):
        return ()
    result = [p for p in properties if isinstance(p, Mapping)]
    if len(result) != len(properties):
        log.debug("Ignoring property previews that are not objects: %r", properties)
    return result


def description_text(remote_object: RemoteObjectMapping) -> str | None:
    """Get the text a remote object renders its value as.

    `RemoteObject`s have a `description`. `PropertyPreview`s have no
    description, their `value` holds the equivalent text.
    """
    description = remote_object.get("description")
    if isinstance(description, str):
        return description
    value = remote_object.get("value")
    if isinstance(value, str):
        return value
    return None


def class_name_of(remote_object: RemoteObjectMapping) -> str | None:
    class_name = remote_object.get("className")
    if isinstance(class_name, str):
        return class_name
    # PropertyPreviews have no className, but their valuePreview's description
    # is the class name for objects.
    value_preview = remote_object.get("valuePreview")
    if isinstance(value_preview, Mapping):
        description = value_preview.get("description")
        if isinstance(description, str) and description.isidentifier():
            return description
    return None


@dataclass(init=False, **slots_if310())
class Unmirror:
    """
    Reconstructs Python values from remote object descriptions.

    `Unmirror` holds the configuration of how JavaScript values are represented.
    `unmirror()` uses a default `Unmirror` unless options are passed to it.

    [JSUndefined]: `unmirror.jstypes.JSUndefined`
    [JSObject]: `unmirror.jstypes.JSObject`
    [ClassRegistry]: `unmirror.registry.ClassRegistry`

    Parameters
    ----------
    jsmap_type
        A function returning an empty container to represent Map. Default: `dict`.
    jsset_type
        A function returning an empty container to represent Set. Default: `set`.
    jsarray_type
        A function creating a sequence to represent Array from an iterable of
        its elements. Default: `list`.
    class_registry
        The [ClassRegistry] that names the classes of reconstructed [JSObject]s.
        Default: the process-wide registry.
    symbols_supported
        When `False`, Symbols are reconstructed as [JSUndefined].
    default_timezone
        The timezone to give reconstructed dates. Dates with a UTC offset
        are converted to this timezone, dates without one are assumed to be in
        it. Default: dates keep the offset they were described with.
    max_depth
        The maximum nesting depth of previews. `None` disables the limit.
    """

    jsmap_type: JSMapType
    jsset_type: JSSetType
    jsarray_type: JSArrayType
    class_registry: ClassRegistry
    symbols_supported: bool
    default_timezone: tzinfo | None
    max_depth: int | None
    type_readers: Mapping[str, ReadRemoteObjectFn]
    subtype_readers: Mapping[str, ReadRemoteObjectFn]

    def __init__(
        self,
        jsmap_type: JSMapType | None = None,
        jsset_type: JSSetType | None = None,
        jsarray_type: JSArrayType | None = None,
        class_registry: ClassRegistry | None = None,
        symbols_supported: bool = True,
        default_timezone: tzinfo | None = None,
        max_depth: int | None = DEFAULT_MAX_DEPTH,
    ) -> None:
        if max_depth is not None and max_depth < 1:
            raise ValueError(f"max_depth must be None or at least 1: {max_depth!r}")

        self.jsmap_type = jsmap_type or dict
        self.jsset_type = jsset_type or set
        self.jsarray_type = jsarray_type or list
        self.class_registry = (
            default_class_registry if class_registry is None else class_registry
        )
        self.symbols_supported = symbols_supported
        self.default_timezone = default_timezone
        self.max_depth = max_depth

        # fmt: off
        self.type_readers = {
            RemoteObjectType.String: Unmirror.read_string,
            RemoteObjectType.Function: Unmirror.read_function,
            RemoteObjectType.Undefined: Unmirror.read_undefined,
            RemoteObjectType.Boolean: Unmirror.read_boolean,
            RemoteObjectType.Symbol: Unmirror.read_symbol,
            RemoteObjectType.Number: Unmirror.read_number,
            RemoteObjectType.BigInt: Unmirror.read_bigint,
        }
        # Subtypes without a reader are objects, e.g. promise, weakmap, proxy
        self.subtype_readers = {
            RemoteObjectSubtype.Null: Unmirror.read_null,
            RemoteObjectSubtype.Date: Unmirror.read_date,
            RemoteObjectSubtype.Node: Unmirror.read_node,
            RemoteObjectSubtype.RegExp: Unmirror.read_regexp,
            RemoteObjectSubtype.Error: Unmirror.read_error,
            RemoteObjectSubtype.Map: Unmirror.read_map,
            RemoteObjectSubtype.Set: Unmirror.read_set,
            RemoteObjectSubtype.Array: Unmirror.read_array,
        }
        # fmt: on

    def decode(self, remote_object: AnyRemoteObject | RemoteObjectMapping) -> object:
        """Reconstruct the value a remote object describes.

        Raises
        ------
        TypeError
            If `remote_object` is not a Mapping.
        MalformedUnmirrorError
            If the remote object describes a Date or RegExp that cannot exist.
        DepthLimitUnmirrorError
            If previews are nested more deeply than `max_depth`.
        """
        if not isinstance(remote_object, Mapping):
            raise TypeError(
                f"remote_object must be a Mapping, not {type(remote_object).__name__}"
            )
        return self.decode_nested(remote_object, 0)

    def decode_nested(self, remote_object: RemoteObjectMapping, depth: int) -> object:
        if self.max_depth is not None and depth > self.max_depth:
            raise DepthLimitUnmirrorError(
                "Remote object previews are nested too deeply",
                remote_object=remote_object,
                max_depth=self.max_depth,
            )

        type_ = remote_object.get("type")
        if isinstance(type_, str):
            read_type = self.type_readers.get(type_)
            if read_type is not None:
                return read_type(self, remote_object, depth)

        subtype = remote_object.get("subtype")
        if isinstance(subtype, str):
            read_subtype = self.subtype_readers.get(subtype)
            if read_subtype is not None:
                return read_subtype(self, remote_object, depth)

        return self.read_object(remote_object, depth)

    def decode_properties(
        self, remote_object: RemoteObjectMapping, depth: int
    ) -> Iterable[tuple[str, object]]:
        """Reconstruct the named properties in a remote object's preview."""
        for prop in preview_properties(remote_object):
            name = prop.get("name")
            if name is None:
                log.debug("Ignoring property preview without a name: %r", prop)
                continue
            yield str(name), self.decode_nested(prop, depth + 1)

    def read_string(self, remote_object: RemoteObjectMapping, depth: int) -> object:
        return remote_object.get("value", JSUndefined)

    def read_function(self, remote_object: RemoteObjectMapping, depth: int) -> JSFunction:
        description = remote_object.get("description")
        return JSFunction(description if isinstance(description, str) else None)

    def read_undefined(self, remote_object: RemoteObjectMapping, depth: int) -> object:
        return JSUndefined

    def read_boolean(self, remote_object: RemoteObjectMapping, depth: int) -> bool:
        value = remote_object.get("value")
        return value is True or value == "true"

    def read_symbol(self, remote_object: RemoteObjectMapping, depth: int) -> object:
        if not self.symbols_supported:
            return JSUndefined
        match = _SYMBOL_DESCRIPTION.search(description_text(remote_object) or "")
        # A new symbol each time, the protocol doesn't identify symbols.
        return JSSymbol((match and match[1]) or None)

    def read_number(self, remote_object: RemoteObjectMapping, depth: int) -> object:
        value = remote_object.get("value")
        # Structured producers send actual numbers
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return value

        # Runtime-domain objects send NaN, Infinity and -0 as unserializableValue
        text = value if value is not None else remote_object.get("unserializableValue")
        special = parse_special_number(text)
        if special is not None:
            return special
        return parse_numeric_text(text, JSUndefined)

    def read_bigint(self, remote_object: RemoteObjectMapping, depth: int) -> object:
        for key in ("unserializableValue", "value", "description"):
            text = remote_object.get(key)
            if text is not None:
                return parse_bigint_text(text)
        return JSUndefined

    def read_null(self, remote_object: RemoteObjectMapping, depth: int) -> None:
        return None

    def read_date(self, remote_object: RemoteObjectMapping, depth: int) -> datetime:
        description = description_text(remote_object)
        if description is None:
            raise MalformedUnmirrorError(
                "Date has no description to reconstruct it from",
                remote_object=remote_object,
            )
        try:
            date = parse_js_date(description)
        except ValueError as e:
            raise MalformedUnmirrorError(
                f"Date cannot be reconstructed: {e}", remote_object=remote_object
            ) from e

        tz = self.default_timezone
        if tz is None:
            return date
        if date.tzinfo is None:
            return date.replace(tzinfo=tz)
        return date.astimezone(tz)

    def read_node(self, remote_object: RemoteObjectMapping, depth: int) -> object:
        # DOM nodes are only labelled, not reconstructed
        return remote_object.get("className", JSUndefined)

    def read_regexp(self, remote_object: RemoteObjectMapping, depth: int) -> JSRegExp:
        source: object = None
        flags = JSRegExpFlag.NoFlag
        last_index: object = None

        # Runtime and Debugger domain previews describe the RegExp's properties
        for prop in preview_properties(remote_object):
            name = prop.get("name")
            if name == "source":
                source = prop.get("value")
            elif name == "lastIndex":
                last_index = self.decode_nested(prop, depth + 1)
            elif name in _REGEXP_FLAG_PROPERTIES:
                if self.decode_nested(prop, depth + 1) is True:
                    flags |= _REGEXP_FLAG_PROPERTIES[name]

        try:
            if source is None:
                # Console domain RegExps only have their literal text, like
                # /ab+c/gm. The pattern ends at the final delimiter, so a
                # pattern containing an unescaped delimiter is mis-parsed.
                log.debug("Parsing RegExp from its description")
                source, flags = _split_regexp_literal(
                    description_text(remote_object) or ""
                )
            js_regexp = JSRegExp(
                source if isinstance(source, str) else str(source),
                flags,
                last_index=_as_last_index(last_index),
            )
        except JSRegExpUnmirrorError as e:
            raise MalformedUnmirrorError(
                f"RegExp cannot be reconstructed: {e}", remote_object=remote_object
            ) from e
        return js_regexp

    def read_error(self, remote_object: RemoteObjectMapping, depth: int) -> JSError:
        class_name = class_name_of(remote_object)
        name = JSErrorName.for_class_name(class_name)
        if class_name is not None and class_name != name:
            log.debug("Reconstructing %r as %s", class_name, name)

        message, *stack_lines = (description_text(remote_object) or "").split("\n")
        if class_name:
            message = _strip_error_name(message, class_name)
        stack = "\n".join(stack_lines)

        js_error = JSError(message, name=name, stack=stack or None)

        for prop_name, value in self.decode_properties(remote_object, depth):
            if prop_name == "message" and isinstance(value, str):
                js_error.message = value
            elif prop_name == "stack" and isinstance(value, str):
                # Previews abbreviate long values, the description's stack is
                # complete.
                if js_error.stack is None:
                    js_error.stack = value
            else:
                js_error.properties[prop_name] = value
        return js_error

    def read_map(self, remote_object: RemoteObjectMapping, depth: int) -> object:
        # Map and Set previews don't include their entries, they need to be
        # requested separately from the Runtime domain.
        return self.jsmap_type()

    def read_set(self, remote_object: RemoteObjectMapping, depth: int) -> object:
        return self.jsset_type()

    def read_array(self, remote_object: RemoteObjectMapping, depth: int) -> object:
        return self.jsarray_type(
            self.decode_nested(prop, depth + 1)
            for prop in preview_properties(remote_object)
        )

    def read_object(
        self, remote_object: RemoteObjectMapping, depth: int
    ) -> JSObject[object]:
        value = remote_object.get("value")
        obj: JSObject[object]
        if isinstance(value, Mapping):
            # Objects returned by value are already plain JSON objects
            obj = JSObject(value)
        else:
            obj = self.class_registry.instance_of(class_name_of(remote_object))
        obj.update(self.decode_properties(remote_object, depth))
        return obj


def _split_regexp_literal(literal: str) -> tuple[str, JSRegExpFlag]:
    if not literal:
        return "", JSRegExpFlag.NoFlag
    end = literal.rindex(literal[0])
    return literal[1:end], JSRegExpFlag.from_text(literal[end + 1 :])


def _as_last_index(value: object) -> int:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if math.isfinite(value):
            return int(value)
    return 0


def _strip_error_name(message: str, class_name: str) -> str:
    """Remove the `TypeError: ` prefix that descriptions start the message with."""
    if not message.startswith(class_name):
        return message
    rest = message[len(class_name) :]
    if rest and (rest[0].isalnum() or rest[0] in "_$"):
        # The class name is only the start of a longer word, e.g. ErrorCode
        return message
    return rest[1:].strip()


default_unmirror: Final = Unmirror()
"""The `Unmirror` that `unmirror()` uses when it's called without options."""


def unmirror(
    remote_object: AnyRemoteObject | RemoteObjectMapping,
    *,
    jsmap_type: JSMapType | None = None,
    jsset_type: JSSetType | None = None,
    jsarray_type: JSArrayType | None = None,
    class_registry: ClassRegistry | None = None,
    symbols_supported: bool = True,
    default_timezone: tzinfo | None = None,
    max_depth: int | None = DEFAULT_MAX_DEPTH,
) -> object:
    """Reconstruct the JavaScript value described by a DevTools Protocol remote object.

    `remote_object` is a [`Runtime.RemoteObject`] (or one of the property
    previews nested in it) as decoded from the protocol's JSON messages. The
    remote side only describes values, so the result is a best-effort copy:

    * Strings, numbers, booleans and `null` are the equivalent Python values.
    * `undefined` is [JSUndefined], Symbols are new [JSSymbol]s and functions are
      [JSFunction] placeholders.
    * Dates are `datetime`s, RegExps are [JSRegExp]s and Errors are [JSError]s.
    * Arrays are lists of their previewed elements. Maps and Sets are always
      empty, the protocol doesn't include their elements.
    * Other objects are [JSObject]s holding their previewed properties.

    [`Runtime.RemoteObject`]: https://chromedevtools.github.io/\
devtools-protocol/tot/Runtime/#type-RemoteObject
    [JSUndefined]: `unmirror.jstypes.JSUndefined`
    [JSSymbol]: `unmirror.jstypes.JSSymbol`
    [JSFunction]: `unmirror.jstypes.JSFunction`
    [JSRegExp]: `unmirror.jstypes.JSRegExp`
    [JSError]: `unmirror.jstypes.JSError`
    [JSObject]: `unmirror.jstypes.JSObject`

    Parameters
    ----------
    remote_object
        The remote object to reconstruct.
    jsmap_type, jsset_type, jsarray_type, class_registry, symbols_supported, \
default_timezone, max_depth
        Options for the [`Unmirror`](`unmirror.Unmirror`) that reconstructs the
        value.

    Returns
    -------
    :
        The reconstructed value.

    Raises
    ------
    MalformedUnmirrorError
        If the remote object describes a Date or RegExp that cannot exist.
    DepthLimitUnmirrorError
        If previews are nested more deeply than `max_depth`.

    Examples
    --------
    >>> unmirror({"type": "number", "value": "-Infinity"})
    -inf
    >>> unmirror({
    ...     "type": "object",
    ...     "className": "Object",
    ...     "preview": {
    ...         "properties": [{"name": "hats", "type": "number", "value": "3"}],
    ...     },
    ... })
    JSObject(hats=3)
    >>> unmirror({"type": "object", "subtype": "set"}, jsset_type=list)
    []
    """
    if (
        jsmap_type is None
        and jsset_type is None
        and jsarray_type is None
        and class_registry is None
        and symbols_supported
        and default_timezone is None
        and max_depth == DEFAULT_MAX_DEPTH
    ):
        return default_unmirror.decode(remote_object)

    return Unmirror(
        jsmap_type=jsmap_type,
        jsset_type=jsset_type,
        jsarray_type=jsarray_type,
        class_registry=class_registry,
        symbols_supported=symbols_supported,
        default_timezone=default_timezone,
        max_depth=max_depth,
    ).decode(remote_object)
