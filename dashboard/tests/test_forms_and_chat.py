import unittest

from inventory_dashboard.chat import CORRESPONDENTS, CONVERSATIONS, ME, messages_for
from inventory_dashboard.forms import FormError, missing_product_fields, missing_profile_fields, parse_price_input


class TestPriceInput(unittest.TestCase):

    def test_valid_prices(self):
        for value, expected in [("25", 25), (" 4 ", 4), ("3.0", 3), (0, 0), (12, 12)]:
            self.assertEqual(parse_price_input(value), expected)

    def test_invalid_prices(self):
        for value in ["-1", "3.5", "abc", "", None, True, "nan"]:
            with self.assertRaises(FormError):
                parse_price_input(value)


class TestProfileForm(unittest.TestCase):

    def test_complete_form(self):
        form = {"firstName": "Maria", "lastName": "Santos", "gender": "Female", "address": "12 Mabini St."}
        self.assertEqual(missing_profile_fields(form), [])

    def test_missing_fields(self):
        form = {"firstName": "Maria", "lastName": " ", "gender": ""}
        self.assertEqual(missing_profile_fields(form), ["Last Name", "Gender", "Address"])


class TestProductForm(unittest.TestCase):

    def test_complete_form(self):
        self.assertEqual(missing_product_fields("Apple", 0, "Red apples", "Fruits"), [])

    def test_empty_category_is_missing(self):
        self.assertEqual(missing_product_fields("Apple", 25, "Red apples", ""), ["Category"])

    def test_missing_fields(self):
        self.assertEqual(
            missing_product_fields(" ", None, "", "Spices"),
            ["Product Name", "Price", "Description"]
        )


class TestChat(unittest.TestCase):

    def test_every_correspondent_has_a_thread(self):
        for name in CORRESPONDENTS:
            messages = messages_for(name)
            self.assertEqual(messages[0]["sender"], name)
            self.assertEqual(messages[-1]["sender"], ME)

    def test_unknown_correspondent_gets_group_thread(self):
        self.assertEqual(messages_for("Someone"), CONVERSATIONS["Canvasser Group 1"])

    def test_returned_messages_are_copies(self):
        messages_for("Canvasser 1")[0]["text"] = "changed"
        self.assertEqual(CONVERSATIONS["Canvasser 1"][0]["text"], "Hi there! How can I help you?")


if __name__ == "__main__":
    unittest.main()
