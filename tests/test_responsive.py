from __future__ import annotations

import pytest

from rental_dashboard.ui.responsive import is_desktop, parse_width, width_from_query


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("1024", 1024),
        ("390.0", 390),
        (["500", "800"], 800),
        ("", None),
        ("abc", None),
        ("0", None),
        (None, None),
    ],
)
def test_parse_width(raw, expected) -> None:
    assert parse_width(raw) == expected


def test_width_from_query() -> None:
    assert width_from_query({"w": "390"}) == 390
    assert width_from_query({}) is None


def test_breakpoint_is_inclusive_for_desktop() -> None:
    assert is_desktop(768)
    assert not is_desktop(767)
    assert is_desktop(1000, breakpoint=1000)
    assert not is_desktop(999, breakpoint=1000)
