import unittest
from unittest.mock import MagicMock

import requests

from inventory_dashboard.client import ApiClientError, InventoryApiClient


def make_response(status_code=200, json_body=None, headers=None):
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.headers = headers or {}
    if isinstance(json_body, Exception):
        response.json.side_effect = json_body
    else:
        response.json.return_value = json_body
    return response


class TestInventoryApiClient(unittest.TestCase):

    def setUp(self):
        self.session = MagicMock()
        self.client = InventoryApiClient("http://localhost:5001/", session=self.session)

    def test_list_products(self):
        self.session.request.return_value = make_response(json_body=[{"id": "1"}])

        self.assertEqual(self.client.list_products(), [{"id": "1"}])
        self.session.request.assert_called_once_with("GET", "http://localhost:5001/products", timeout=None)

    def test_add_product_reads_location(self):
        self.session.request.return_value = make_response(
            201, {"message": "Product added successfully."}, {"Location": "/products/abc123"}
        )

        result = self.client.add_product("Apple", 25, "Red", "Fruits", image=("a.png", b"x", "image/png"))

        self.assertEqual(result, {"message": "Product added successfully.", "id": "abc123"})
        _, kwargs = self.session.request.call_args
        self.assertEqual(kwargs["data"], {"name": "Apple", "price": "25", "description": "Red", "category": "Fruits"})
        self.assertEqual(kwargs["files"], {"image": ("a.png", b"x", "image/png")})

    def test_add_product_without_image(self):
        self.session.request.return_value = make_response(201, {"message": "ok"}, {})
        result = self.client.add_product("Apple", 25, "Red", "Fruits")
        self.assertIsNone(result["id"])
        _, kwargs = self.session.request.call_args
        self.assertIsNone(kwargs["files"])

    def test_update_product(self):
        record = {"id": "1", "price": 30}
        self.session.request.return_value = make_response(json_body=record)

        self.assertEqual(self.client.update_product("1", {"price": 30}), record)
        self.session.request.assert_called_once_with(
            "PUT", "http://localhost:5001/products/1", timeout=None, json={"price": 30}
        )

    def test_error_status_raises(self):
        self.session.request.return_value = make_response(
            400, {"message": "Product with this name already exists."}
        )

        with self.assertRaises(ApiClientError) as ctx:
            self.client.add_product("Apple", 25, "Red", "Fruits")
        self.assertEqual(ctx.exception.status_code, 400)
        self.assertEqual(ctx.exception.message, "Product with this name already exists.")

    def test_error_without_json_body(self):
        self.session.request.return_value = make_response(502, ValueError("no json"))

        with self.assertRaises(ApiClientError) as ctx:
            self.client.total_users()
        self.assertEqual(ctx.exception.status_code, 502)
        self.assertEqual(ctx.exception.message, "HTTP 502")

    def test_transport_error_raises(self):
        self.session.request.side_effect = requests.ConnectionError("refused")

        with self.assertRaises(ApiClientError) as ctx:
            self.client.list_profiles()
        self.assertIsNone(ctx.exception.status_code)

    def test_totals(self):
        self.session.request.side_effect = [
            make_response(json_body={"total": 3}),
            make_response(json_body={"total": 7}),
        ]
        self.assertEqual(self.client.total_users(), 3)
        self.assertEqual(self.client.total_products(), 7)

    def test_delete_profile(self):
        self.session.request.return_value = make_response(json_body={"message": "Profile deleted successfully."})
        self.assertEqual(self.client.delete_profile("p1"), "Profile deleted successfully.")
        self.session.request.assert_called_once_with("DELETE", "http://localhost:5001/profiles/p1", timeout=None)


if __name__ == "__main__":
    unittest.main()
