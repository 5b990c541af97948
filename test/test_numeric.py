from __future__ import annotations

import logging
import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from unmirror._numeric import (
    parse_bigint_text,
    parse_numeric_text,
    parse_special_number,
)

fallback = object()


def test_parse_numeric_text__none_is_fallback() -> None:
    assert parse_numeric_text(None, fallback) is fallback


@given(value=st.integers(min_value=-(2**53 - 1), max_value=2**53 - 1))
def test_parse_numeric_text__integers(value: int) -> None:
    assert parse_numeric_text(str(value), fallback) == value


@given(value=st.floats(allow_nan=False, allow_infinity=False))
def test_parse_numeric_text__floats(value: float) -> None:
    assert parse_numeric_text(repr(value), fallback) == value


@pytest.mark.parametrize("text", ["", "12 monkeys", "0x10", "NaN-ish", "1."])
def test_parse_numeric_text__invalid_is_returned_unchanged(text: str) -> None:
    assert parse_numeric_text(text, fallback) is text


def test_parse_numeric_text__accepts_any_json() -> None:
    # Malformed input can produce values that aren't numbers
    assert parse_numeric_text("[1, 2]", fallback) == [1, 2]
    assert parse_numeric_text('"1"', fallback) == "1"
    assert parse_numeric_text(b"7", fallback) == 7


def test_parse_numeric_text__non_text_is_returned_unchanged() -> None:
    assert parse_numeric_text(1.5, fallback) == 1.5
    assert parse_numeric_text(True, fallback) is True


def test_parse_special_number() -> None:
    assert math.isnan(parse_special_number("NaN"))  # type: ignore[arg-type]
    assert parse_special_number("Infinity") == math.inf
    assert parse_special_number("-Infinity") == -math.inf
    assert math.copysign(1, parse_special_number("-0")) == -1  # type: ignore[arg-type]
    assert parse_special_number("0") is None
    assert parse_special_number("nan") is None
    assert parse_special_number(None) is None


@pytest.mark.parametrize(
    "text,expected",
    [
        ("0n", 0),
        ("123n", 123),
        ("-123n", -123),
        ("123", 123),
        ("1" * 40 + "n", int("1" * 40)),
        ("12.5n", "12.5n"),
        ("n", "n"),
        (None, None),
    ],
)
def test_parse_bigint_text(text: str | None, expected: object) -> None:
    assert parse_bigint_text(text) == expected


def test_parse_numeric_text__logs_invalid_text(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="unmirror._numeric"):
        parse_numeric_text("12 monkeys", fallback)

    assert "Numeric text is not valid JSON" in caplog.text
