import pytest
from inventory_api.errors import InvalidInputError
from inventory_api.models import Category
from inventory_api.services.validation import parse_price, validate_category, validate_name


@pytest.mark.parametrize("value, expected", [
    ("25", 25),
    (" 7 ", 7),
    ("3.0", 3),
    ("0", 0),
    ("-0", 0),
    ("9223372036854775807", 2 ** 63 - 1),
    ("1e3", 1000),
    (12, 12),
    (4.0, 4),
])
def test_parse_price_valid(value, expected):
    assert parse_price(value) == expected

@pytest.mark.parametrize("value", [-1, "-1", 3.5, "3.5", "abc", "", None, True, False, "NaN", "inf", "9223372036854775808", 1e30, 10 ** 22, [], {}])
def test_parse_price_invalid(value):
    with pytest.raises(InvalidInputError) as exc_info:
        parse_price(value)
    assert exc_info.value.status_code == 400

def test_validate_name():
    assert validate_name("Apple") == "Apple"
    for value in (None, "", "  "):
        with pytest.raises(InvalidInputError):
            validate_name(value)

def test_validate_category():
    assert validate_category("Spices") == Category.SPICES
    for value in (None, "", "spices", "Dairy"):
        with pytest.raises(InvalidInputError):
            validate_category(value)
