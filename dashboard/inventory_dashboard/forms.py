from typing import Any, Dict, List

PRICE_WARNING = "Please enter a valid non-negative integer for the price."
INCOMPLETE_WARNING = "Please fill in all the fields before adding a customer."
PRODUCT_WARNING = "Please fill in the product name, price, description and category."

PROFILE_FIELDS = {
    "firstName": "First Name",
    "lastName": "Last Name",
    "gender": "Gender",
    "address": "Address",
}


class FormError(ValueError):
    pass


def parse_price_input(value: Any) -> int:
    """Check a price typed into a form before it is sent to the API."""
    if value is None or isinstance(value, bool):
        raise FormError(PRICE_WARNING)
    try:
        number = float(str(value).strip())
    except ValueError:
        raise FormError(PRICE_WARNING)
    if number != number or number < 0 or not number.is_integer():
        raise FormError(PRICE_WARNING)
    return int(number)


def missing_profile_fields(form: Dict[str, str]) -> List[str]:
    return [label for key, label in PROFILE_FIELDS.items() if not (form.get(key) or "").strip()]



def missing_product_fields(name: str, price: Any, description: str, category: str) -> List[str]:
    fields = {"Product Name": name, "Price": price, "Description": description, "Category": category}
    return [label for label, value in fields.items() if value is None or not str(value).strip()]
