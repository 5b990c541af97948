from __future__ import annotations

from types import MappingProxyType

import pytest

from unmirror.jstypes.jsobject import JSClass, JSObject


def test_init() -> None:
    assert dict(JSObject()) == {}

    with pytest.raises(TypeError, match=r"'NoneType' object is not iterable"):
        JSObject(None)  # type: ignore[call-overload]


def test_init__keys_and_get_item() -> None:
    assert dict(JSObject({})) == {}
    assert dict(JSObject({"x": "X"})) == {"x": "X"}
    # Supports arbitrary mapping types
    assert dict(JSObject(MappingProxyType({"x": "X"}))) == {"x": "X"}
    assert dict(JSObject({"x": "XA", "y": "Y"}, x="XB")) == {"x": "XB", "y": "Y"}


def test_init__iterable_kv_pairs() -> None:
    assert dict(JSObject([])) == {}
    assert dict(JSObject([("x", "X")])) == {"x": "X"}
    assert dict(JSObject(iter([("x", "X")]))) == {"x": "X"}

    with pytest.raises(ValueError, match=r"not enough values to unpack"):
        JSObject(["a", "b", "c"])  # type: ignore[list-item]


def test_keys_are_strings() -> None:
    obj: JSObject[str] = JSObject()
    obj[0] = "zero"  # type: ignore[index]
    assert list(obj) == ["0"]
    assert obj["0"] == "zero"


def test_order_is_insertion_order() -> None:
    obj = JSObject(b=1, a=2)
    obj["c"] = 3
    assert list(obj.items()) == [("b", 1), ("a", 2), ("c", 3)]

    del obj["a"]
    assert list(obj) == ["b", "c"]


def test_class_name() -> None:
    assert JSObject().class_name == "Object"
    assert JSClass("Point")().class_name == "Point"


def test_repr() -> None:
    assert repr(JSObject()) == "JSObject()"
    assert repr(JSObject(x=1, y="a")) == "JSObject(x=1, y='a')"
    assert repr(JSClass("Point")(x=1)) == "Point(x=1)"
    assert repr(JSObject({"[[Prototype]]": None})) == "JSObject({'[[Prototype]]': None})"


def test_eq() -> None:
    Point = JSClass("Point")

    assert JSObject(x=1, y=2) == JSObject(y=2, x=1)
    assert JSObject(x=1) != JSObject(x=2)
    assert Point(x=1) == Point(x=1)
    assert Point(x=1) == JSClass("Point")(x=1)
    assert Point(x=1) != JSObject(x=1)
    assert Point(x=1) != JSClass("Vector")(x=1)
    # Not equal to other mappings
    assert JSObject(x=1) != {"x": 1}


def test_unhashable() -> None:
    with pytest.raises(TypeError, match=r"unhashable"):
        hash(JSObject())


def test_JSClass() -> None:
    Point = JSClass("Point")
    p = Point({"x": 1}, y=2)

    assert isinstance(p, JSObject)
    assert p.js_class is Point
    assert dict(p) == {"x": 1, "y": 2}
    assert repr(Point) == "JSClass('Point')"
    assert Point == JSClass("Point")
    assert hash(Point) == hash(JSClass("Point"))


@pytest.mark.parametrize("name", ["", "Object"])
def test_JSClass__invalid_name(name: str) -> None:
    with pytest.raises(ValueError, match=r"JSClass name must be a non-empty name"):
        JSClass(name)
