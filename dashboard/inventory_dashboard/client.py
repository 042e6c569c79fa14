from typing import Any, Dict, List, Optional, Tuple
import logging
import requests

logger = logging.getLogger(__name__)


class ApiClientError(Exception):
    """A request to the API failed or returned a non-2xx status."""

    def __init__(self, message: str, status_code: Optional[int] = None, error: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error = error


class InventoryApiClient:
    """
    Thin wrapper over the inventory API endpoints.

    Every method performs exactly one HTTP request and either returns the
    decoded body or raises ApiClientError.
    """

    def __init__(self, base_url: str, timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.error(f"{method} {url} failed: {str(e)}")
            raise ApiClientError(f"Could not reach the API: {str(e)}") from e

        if not response.ok:
            try:
                body = response.json()
            except ValueError:
                body = {}
            if not isinstance(body, dict):
                body = {}
            message = body.get("message") or body.get("error") or f"HTTP {response.status_code}"
            logger.error(f"{method} {url} returned {response.status_code}: {message}")
            raise ApiClientError(message, status_code=response.status_code, error=body.get("error"))
        return response

    # Products
    def list_products(self) -> List[Dict]:
        return self._request("GET", "/products").json()

    def add_product(
        self,
        name: str,
        price: int,
        description: str,
        category: str,
        image: Optional[Tuple[str, bytes, str]] = None
    ) -> Dict:
        """
        Create a product. `image` is a (filename, content, mime type) tuple.

        Returns {"message": ..., "id": ...}; the id comes from the Location
        header since the response body only carries a confirmation.
        """
        data = {
            "name": name,
            "price": str(price),
            "description": description,
            "category": category
        }
        files = {"image": image} if image else None
        response = self._request("POST", "/add-product", data=data, files=files)

        location = response.headers.get("Location")
        product_id = location.rstrip("/").rsplit("/", 1)[-1] if location else None
        return {"message": response.json().get("message"), "id": product_id}

    def update_product(self, product_id: str, fields: Dict) -> Dict:
        return self._request("PUT", f"/products/{product_id}", json=fields).json()

    def delete_product(self, product_id: str) -> str:
        return self._request("DELETE", f"/products/{product_id}").json().get("message")

    # Profiles
    def list_profiles(self) -> List[Dict]:
        return self._request("GET", "/profiles").json()

    def add_profile(self, profile: Dict) -> Dict:
        return self._request("POST", "/profiles", json=profile).json()

    def delete_profile(self, profile_id: str) -> str:
        return self._request("DELETE", f"/profiles/{profile_id}").json().get("message")

    # Dashboard totals
    def total_users(self) -> int:
        return self._request("GET", "/total-users").json()["total"]

    def total_products(self) -> int:
        return self._request("GET", "/total-products").json()["total"]
