import pytest
from pydantic import ValidationError

from schemas import AirplaneCreate, AirplaneQuery, ProductCreate, ProductQuery, parse_lower_bound


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("150", 150.0),
        (" 2.5 ", 2.5),
        (10, 10.0),
        (None, None),
        ("", None),
        ("abc", None),
        ("-5", None),
        ("0", None),
        ("nan", None),
        ("inf", None),
        (True, None),
    ],
)
def test_parse_lower_bound(raw, expected):
    assert parse_lower_bound(raw) == expected


def test_query_models_clamp_bad_bounds():
    assert AirplaneQuery(min_passengers="lots").min_passengers is None
    assert AirplaneQuery(min_passengers="150").min_passengers == 150.0
    assert ProductQuery(min_price="-1").min_price is None


def test_product_rejects_negative_price(smartphone):
    with pytest.raises(ValidationError):
        ProductCreate(**{**smartphone, "price": -1})


def test_product_requires_category(smartphone):
    payload = dict(smartphone)
    payload.pop("category")
    with pytest.raises(ValidationError):
        ProductCreate(**payload)


def test_airplane_needs_at_least_one_seat(boeing):
    with pytest.raises(ValidationError):
        AirplaneCreate(**{**boeing, "passenger_capacity": 0})


def test_unknown_fields_are_rejected(boeing):
    with pytest.raises(ValidationError):
        AirplaneCreate(**boeing, id="42")
