from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Final

from unmirror._pycompat.dataclasses import slots_if310
from unmirror.jstypes.jsobject import JSClass, JSObject


@dataclass(**slots_if310())
class ClassRegistry:
    """Remembers the [`JSClass`] created for each class name.

    Remote objects name the class of the object they describe. Reconstructed
    instances of the same class name share the same `JSClass`, so they display
    under the same name and compare equal by class.

    The registry only grows: a class is created the first time its name is
    seen and kept for the registry's lifetime. The `default_class_registry`
    lives for the whole process. Pass a separate `ClassRegistry` to
    [`Unmirror`] to keep classes apart, e.g. in tests.

    [`JSClass`]: `unmirror.jstypes.JSClass`
    [`Unmirror`]: `unmirror.Unmirror`

    Examples
    --------
    >>> registry = ClassRegistry()
    >>> registry.instance_of("Point") == registry.instance_of("Point")
    True
    >>> registry.instance_of("Point").js_class is registry.get_class("Point")
    True
    >>> registry.instance_of("Object")
    JSObject()
    """

    _classes: dict[str, JSClass] = field(default_factory=dict, repr=False)

    def get_class(self, class_name: str) -> JSClass:
        """Get the `JSClass` for a name, creating it if it's not been seen before."""
        js_class = self._classes.get(class_name)
        if js_class is None:
            # setdefault means the first class created wins if two threads race
            js_class = self._classes.setdefault(class_name, JSClass(class_name))
        return js_class

    def instance_of(self, class_name: str | None) -> JSObject[object]:
        """Create an empty object that is an instance of `class_name`.

        Objects with no class name, or the class name `Object` are plain
        objects, with `js_class` of `None`. They don't create a registry entry.
        """
        if not class_name or class_name == "Object":
            return JSObject()
        return self.get_class(class_name)()

    def __contains__(self, class_name: object) -> bool:
        return class_name in self._classes

    def __iter__(self) -> Iterator[JSClass]:
        return iter(list(self._classes.values()))

    def __len__(self) -> int:
        return len(self._classes)


default_class_registry: Final = ClassRegistry()
"""The process-wide registry used when no other registry is given."""
