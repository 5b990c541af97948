from __future__ import annotations

from unmirror._pycompat.enum import IterableIntFlag, StrEnum


class Colour(StrEnum):
    Red = "red"
    Blue = "blue"


class Bits(IterableIntFlag):
    A = 1
    B = 2
    C = 4


def test_StrEnum() -> None:
    assert str(Colour.Red) == "red"
    assert Colour.Red == "red"
    assert f"{Colour.Blue}" == "blue"


def test_StrEnum__contains_values() -> None:
    assert "red" in Colour
    assert Colour.Red in Colour
    assert "green" not in Colour


def test_IterableIntFlag() -> None:
    assert list(Bits.A | Bits.C) == [Bits.A, Bits.C]
    assert list(Bits(0)) == []
