"""Tests for shared rounding and wording helpers."""

import pytest

from services.feasibility.formatting import pluralize, round_half_up, round_percent


@pytest.mark.parametrize("value,expected", [
    (12.5, 13),
    (0.5, 1),
    (64.95, 65),
    (64.4, 64),
    (0, 0),
    (100, 100),
])
def test_round_percent(value, expected):
    assert round_percent(value) == expected


def test_round_half_up_one_decimal():
    assert round_half_up(10.6666, 1) == 10.7
    assert round_half_up(-0.6666, 1) == -0.7
    assert round_half_up(12.0, 1) == 12.0


def test_pluralize():
    assert pluralize(1, "week") == "1 week"
    assert pluralize(2, "week") == "2 weeks"
    assert pluralize(0, "week") == "0 week"
