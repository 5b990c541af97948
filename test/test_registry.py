from __future__ import annotations

import pytest

from unmirror.jstypes import JSClass, JSObject
from unmirror.registry import ClassRegistry


@pytest.mark.parametrize("class_name", [None, "", "Object"])
def test_instance_of__plain_objects(
    class_registry: ClassRegistry, class_name: str | None
) -> None:
    obj = class_registry.instance_of(class_name)

    assert obj == JSObject()
    assert obj.js_class is None
    assert len(class_registry) == 0


def test_instance_of__named(class_registry: ClassRegistry) -> None:
    a = class_registry.instance_of("Point")
    b = class_registry.instance_of("Point")

    assert a is not b
    assert a.js_class is b.js_class
    assert a.js_class == JSClass("Point")
    assert "Point" in class_registry
    assert len(class_registry) == 1


def test_instance_of__returns_new_empty_objects(class_registry: ClassRegistry) -> None:
    a = class_registry.instance_of("Point")
    a["x"] = 1
    assert class_registry.instance_of("Point") == class_registry.get_class("Point")()


def test_get_class__is_created_once(class_registry: ClassRegistry) -> None:
    Point = class_registry.get_class("Point")
    assert class_registry.get_class("Point") is Point
    assert class_registry.get_class("Vector") is not Point
    assert list(class_registry) == [Point, class_registry.get_class("Vector")]


def test_registries_are_independent() -> None:
    a, b = ClassRegistry(), ClassRegistry()

    assert a.get_class("Point") is not b.get_class("Point")
    assert "Point" not in ClassRegistry()
