from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from unmirror._dates import parse_js_date


@pytest.mark.parametrize(
    "text,expected",
    [
        pytest.param(
            "Mon Oct 19 2026 10:30:05 GMT+0200 (Central European Summer Time)",
            datetime(2026, 10, 19, 10, 30, 5, tzinfo=timezone(timedelta(hours=2))),
            id="toString",
        ),
        pytest.param(
            "Mon Oct 19 2026 03:30:05 GMT-0530 (Some Zone)",
            datetime(
                2026, 10, 19, 3, 30, 5, tzinfo=timezone(-timedelta(hours=5, minutes=30))
            ),
            id="toString-negative-offset",
        ),
        pytest.param(
            "Mon Oct 19 2026 10:30:05 GMT+0000",
            datetime(2026, 10, 19, 10, 30, 5, tzinfo=timezone.utc),
            id="toString-without-zone-name",
        ),
        pytest.param(
            "Mon Oct 19 2026",
            datetime(2026, 10, 19),
            id="toDateString",
        ),
        pytest.param(
            "2026-10-19T08:30:05.123Z",
            datetime(2026, 10, 19, 8, 30, 5, 123000, tzinfo=timezone.utc),
            id="toISOString",
        ),
        pytest.param(
            "2026-10-19",
            datetime(2026, 10, 19),
            id="iso-date",
        ),
        pytest.param(
            "Mon, 19 Oct 2026 08:30:05 GMT",
            datetime(2026, 10, 19, 8, 30, 5, tzinfo=timezone.utc),
            id="toUTCString",
        ),
    ],
)
def test_parse_js_date(text: str, expected: datetime) -> None:
    result = parse_js_date(text)
    assert result == expected
    assert result.utcoffset() == expected.utcoffset()


@pytest.mark.parametrize(
    "text",
    [
        "Invalid Date",
        "",
        "tomorrow",
        "Mon Foo 19 2026 10:30:05 GMT+0200",
        "Mon Feb 30 2026 10:30:05 GMT+0000",
    ],
)
def test_parse_js_date__invalid(text: str) -> None:
    with pytest.raises(ValueError):
        parse_js_date(text)
