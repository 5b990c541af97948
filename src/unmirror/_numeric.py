from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Final, TypeVar

log = logging.getLogger(__name__)

T = TypeVar("T")

SPECIAL_NUMBERS: Final[Mapping[str, float]] = {
    "NaN": float("nan"),
    "-Infinity": float("-inf"),
    "Infinity": float("inf"),
    "-0": -0.0,
}
"""Numbers that JSON can't represent, by the text the protocol sends for them."""


def parse_numeric_text(text: object, fallback: T) -> object | T:
    """Interpret the text form of a number, as sent by textual producers.

    Parameters
    ----------
    text
        The text to parse. Structured producers send real numbers, which are
        returned as-is because they are valid JSON values already.
    fallback
        The value to return when `text` is `None`.

    Returns
    -------
    :
        The value of `text` parsed as JSON, or `text` itself if it isn't valid
        JSON. Callers can receive a `str` rather than a number for malformed
        input.

    Examples
    --------
    >>> parse_numeric_text("42", None)
    42
    >>> parse_numeric_text("4 2", None)
    '4 2'
    """
    if text is None:
        return fallback
    if not isinstance(text, (str, bytes, bytearray)):
        return text

    try:
        return json.loads(text)
    except ValueError:
        log.debug("Numeric text is not valid JSON, keeping it as text: %r", text)
        return text


def parse_special_number(text: object) -> float | None:
    """Get the value of `NaN`, `Infinity`, `-Infinity` or `-0` from its text."""
    if isinstance(text, str):
        return SPECIAL_NUMBERS.get(text)
    return None


def parse_bigint_text(text: object) -> object:
    """Interpret the text form of a BigInt, like `"123n"`.

    Unlike numbers, BigInts have no precision limit, so the result is an exact
    `int`. Text that isn't an integer is returned unchanged.
    """
    if not isinstance(text, str):
        return text
    digits = text[:-1] if text.endswith("n") else text
    try:
        return int(digits, 10)
    except ValueError:
        log.debug("BigInt text is not an integer, keeping it as text: %r", text)
        return text
