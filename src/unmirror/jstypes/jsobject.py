from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, overload

from unmirror._pycompat.dataclasses import slots_if310

if TYPE_CHECKING:
    # We use TypeVar's default param which isn't in stdlib yet.
    from typing_extensions import TypeVar

    from _typeshed import SupportsKeysAndGetItem

    T = TypeVar("T", default=object)
else:
    from typing import TypeVar

    T = TypeVar("T")


@dataclass(frozen=True, **slots_if310())
class JSClass:
    """The class that a reconstructed [`JSObject`] was an instance of.

    Remote objects only name their class, so a `JSClass` has nothing but a
    `name`. Calling it creates a `JSObject` tagged with the class, the way
    calling a JavaScript constructor creates an instance.

    [`JSObject`]: `unmirror.jstypes.JSObject`

    Examples
    --------
    >>> Point = JSClass("Point")
    >>> Point(x=1, y=2)
    Point(x=1, y=2)
    """

    name: str

    def __post_init__(self) -> None:
        if not self.name or self.name == "Object":
            raise ValueError(
                f"JSClass name must be a non-empty name other than 'Object': "
                f"{self.name!r}"
            )

    @overload
    def __call__(self, /, **kwargs: T) -> JSObject[T]: ...

    @overload
    def __call__(
        self, properties: SupportsKeysAndGetItem[str, T], /, **kwargs: T
    ) -> JSObject[T]: ...

    @overload
    def __call__(
        self, properties: Iterable[tuple[str, T]], /, **kwargs: T
    ) -> JSObject[T]: ...

    def __call__(self, properties: Any = (), /, **kwarg_properties: T) -> JSObject[T]:
        obj: JSObject[T] = JSObject(properties, **kwarg_properties)
        obj.js_class = self
        return obj

    def __repr__(self) -> str:
        return f"JSClass({self.name!r})"


class JSObject(MutableMapping[str, "T"]):
    """
    A Python equivalent of a JavaScript object, as shown by a remote object preview.

    `JSObject` is a [Python Mapping] of property names to values. Properties keep
    the order they were set in. Objects that are instances of a named class
    (anything other than a plain `Object`) have their class in `js_class`.
    Plain objects have a `js_class` of `None`.

    Parameters
    ----------
    properties
        The items to populate the object with, either as a mapping to copy, or
        an iterable of `(key, value)` pairs.
    kwarg_properties
        Additional key-values to populate the object with. These override any
        items from `properties` with the same key.

    Notes
    -----
    `JSObject`s are equal to other `JSObject`s with the same `js_class` and equal
    properties in any order. A plain `JSObject` is never equal to an instance of a
    named class, nor to a `dict`.

    [Python Mapping]: https://docs.python.org/3/glossary.html#term-mapping

    Examples
    --------
    >>> o = JSObject(name='Bob', likes_hats=False)
    >>> o['name']
    'Bob'
    >>> o
    JSObject(name='Bob', likes_hats=False)
    >>> o == JSClass('Person')(name='Bob', likes_hats=False)
    False
    """

    js_class: JSClass | None
    """The named class this object is an instance of, or `None` for plain objects."""
    _properties: dict[str, T]

    @overload
    def __init__(self, /, **kwargs: T) -> None: ...

    @overload
    def __init__(
        self, properties: SupportsKeysAndGetItem[str, T], /, **kwargs: T
    ) -> None: ...

    @overload
    def __init__(self, properties: Iterable[tuple[str, T]], /, **kwargs: T) -> None: ...

    def __init__(
        self,
        properties: SupportsKeysAndGetItem[str, T] | Iterable[tuple[str, T]] = (),
        /,
        **kwarg_properties: T,
    ) -> None:
        self.js_class = None
        self._properties = {}
        self.update(properties)
        if kwarg_properties:
            self.update(kwarg_properties)

    @property
    def class_name(self) -> str:
        """The name JavaScript would display this object's type as."""
        return "Object" if self.js_class is None else self.js_class.name

    def __getitem__(self, key: str, /) -> T:
        return self._properties[key]

    def __setitem__(self, key: str, value: T, /) -> None:
        # Property names are always strings in JavaScript
        self._properties[str(key)] = value

    def __delitem__(self, key: str, /) -> None:
        del self._properties[key]

    def __len__(self) -> int:
        return len(self._properties)

    def __iter__(self) -> Iterator[str]:
        return iter(self._properties)

    def __repr__(self) -> str:
        name = "JSObject" if self.js_class is None else self.js_class.name
        if all(k.isidentifier() for k in self._properties):
            args = ", ".join(f"{k}={v!r}" for k, v in self._properties.items())
        else:
            args = repr(self._properties)
        return f"{name}({args})"

    def __eq__(self, other: object) -> bool:
        # JSObjects are only equal to other JSObjects, not other Mappings.
        # Objects and Maps are distinct in JavaScript, and dict is not a
        # substitute for a JSObject whose class matters.
        if other is self:
            return True
        if not isinstance(other, JSObject):
            return NotImplemented
        return (self.js_class, self._properties) == (other.js_class, other._properties)


if TYPE_CHECKING:
    # type assertion
    _mapping: Mapping[str, object] = JSObject()
