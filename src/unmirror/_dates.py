"""Parse the text that JavaScript renders Dates as, like `new Date(text)` does."""

from __future__ import annotations

import re
import sys
from datetime import datetime, timedelta, timezone
from email.utils import parsedate_to_datetime
from typing import Final

_MONTHS: Final = "Jan Feb Mar Apr May Jun Jul Aug Sep Oct Nov Dec".split()

# Date.prototype.toString(), which DevTools uses as a Date's description:
# "Mon Oct 19 2026 10:00:00 GMT+0200 (Central European Summer Time)"
_DATE_TO_STRING: Final = re.compile(
    r"""
    ^\s*(?:[A-Z][a-z]{2}\s+)?
    (?P<month>[A-Z][a-z]{2})\s+(?P<day>\d{1,2})\s+(?P<year>-?\d{1,6})
    (?:\s+(?P<hour>\d{2}):(?P<minute>\d{2})(?::(?P<second>\d{2}))?
      (?:\s+GMT(?P<offset>[+-]\d{4})?)?
    )?
    (?:\s+\(.*\))?\s*$
    """,
    re.VERBOSE,
)


def parse_js_date(text: str) -> datetime:
    """Parse a JavaScript Date's text representation.

    Accepts the formats JavaScript produces itself: `toString()`,
    `toISOString()` and `toUTCString()`.

    Raises
    ------
    ValueError
        If the text is not a valid date, including JavaScript's `"Invalid Date"`.
    """
    match = _DATE_TO_STRING.match(text)
    if match:
        return _from_to_string_match(match)

    try:
        return _from_isoformat(text.strip())
    except ValueError:
        pass

    try:
        return parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError):
        raise ValueError(f"Not a valid JavaScript Date: {text!r}") from None


def _from_to_string_match(match: re.Match[str]) -> datetime:
    month = match["month"]
    if month not in _MONTHS:
        raise ValueError(f"Unknown month name: {month!r}")

    offset = match["offset"]
    tz = None
    if offset is not None:
        sign = -1 if offset[0] == "-" else 1
        tz = timezone(
            sign * timedelta(hours=int(offset[1:3]), minutes=int(offset[3:5]))
        )

    return datetime(
        int(match["year"]),
        _MONTHS.index(month) + 1,
        int(match["day"]),
        int(match["hour"] or 0),
        int(match["minute"] or 0),
        int(match["second"] or 0),
        tzinfo=tz,
    )


def _from_isoformat(text: str) -> datetime:
    # fromisoformat() only accepts the Z suffix from 3.11
    if sys.version_info < (3, 11) and text.endswith("Z"):
        text = f"{text[:-1]}+00:00"
    return datetime.fromisoformat(text)
