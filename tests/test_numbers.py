import math

import pytest
from buildmart.core.numbers import parse_price, parse_quantity, round_half_up


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (100, 100.0),
        (12.5, 12.5),
        ("100", 100.0),
        ("₹50.5", 50.5),
        ("₹1,250.00", 1250.0),
        ("-12", -12.0),
    ],
)
def test_parse_price_strips_non_numeric_characters(value: object, expected: float) -> None:
    assert parse_price(value) == expected


@pytest.mark.parametrize("value", [None, True, "", "abc", "₹", float("nan"), math.inf])
def test_parse_price_rejects_unparseable_values(value: object) -> None:
    assert parse_price(value) is None


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (3, 3),
        (3.9, 3),
        ("3", 3),
        ("3.9", 3),
        ("2 bags", 2),
        (-1.5, -2),
        (0, 0),
    ],
)
def test_parse_quantity_floors(value: object, expected: int) -> None:
    assert parse_quantity(value) == expected


@pytest.mark.parametrize("value", [None, False, "", "abc", float("nan"), -math.inf])
def test_parse_quantity_rejects_unparseable_values(value: object) -> None:
    assert parse_quantity(value) is None


def test_round_half_up_rounds_halves_away_from_zero() -> None:
    assert round_half_up(0.5) == 1.0
    assert round_half_up(2.5) == 3.0
    assert round_half_up(151.2) == 151.0
    assert round_half_up(1.005, 2) == 1.01
