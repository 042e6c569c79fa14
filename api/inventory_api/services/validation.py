"""
Input checks run by the product handlers before touching the database.

Each check either returns the cleaned value or raises InvalidInputError,
which the error handler turns into a 400 response.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Optional
from ..errors import InvalidInputError
from ..models import Category

INVALID_PRICE_MESSAGE = "Invalid input: 'price' should be a non-negative integer."

# Largest value a 64-bit INTEGER column holds
MAX_PRICE = 2 ** 63 - 1


def parse_price(value: Any) -> int:
    """
    Parse a submitted price into a non-negative integer.

    Integral numbers and numeric strings are accepted ("3", "3.0", 3);
    anything else, including negative, fractional or out-of-range values,
    is rejected.
    """
    if value is None or isinstance(value, bool):
        raise InvalidInputError(INVALID_PRICE_MESSAGE)

    if isinstance(value, (int, float)):
        raw = str(value)
    elif isinstance(value, str):
        raw = value.strip()
    else:
        raise InvalidInputError(INVALID_PRICE_MESSAGE)

    try:
        number = Decimal(raw)
    except InvalidOperation:
        raise InvalidInputError(INVALID_PRICE_MESSAGE)

    if not number.is_finite() or number != number.to_integral_value() or not 0 <= number <= MAX_PRICE:
        raise InvalidInputError(INVALID_PRICE_MESSAGE)
    return int(number)


def validate_name(value: Optional[str]) -> str:
    if value is None or not value.strip():
        raise InvalidInputError("Invalid input: 'name' is required.")
    return value


def validate_category(value: Optional[str]) -> Category:
    try:
        return Category(value)
    except ValueError:
        allowed = ", ".join(c.value for c in Category)
        raise InvalidInputError(f"Invalid input: 'category' should be one of {allowed}.")
