"""
View state for the Products and Customers pages.

Each view fetches its collection once, then keeps it in step with the
server by applying every mutation response as a patch on the local list.
Created records are appended and updated ones replaced by id; deleted ids
are dropped. The list is never refetched after a mutation, so changes made
by another client only show up after an explicit reload.
"""

from typing import Dict, List, Optional, Tuple
import base64
import logging
from .client import InventoryApiClient

logger = logging.getLogger(__name__)

CATEGORIES = ["Fruits", "Vegetables", "Spices"]

# Leading bytes of the image formats the product form accepts
IMAGE_SIGNATURES = [
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
]


def filter_products(products: List[Dict], search_text: str = "", category: str = "") -> List[Dict]:
    """Keep products whose name contains search_text (any case) and whose category matches."""
    needle = (search_text or "").lower()
    return [
        product for product in products
        if needle in (product.get("name") or "").lower()
        and (not category or product.get("category") == category)
    ]


def image_data_url(encoded: str) -> str:
    """Build a data URL for a base64 image, picking the MIME type from its first bytes."""
    try:
        head = base64.b64decode(encoded[:24])
    except ValueError:
        head = b""
    mime = "image/png"
    for signature, candidate in IMAGE_SIGNATURES:
        if head.startswith(signature):
            mime = candidate
            break
    if head[:4] == b"RIFF" and head[8:12] == b"WEBP":
        mime = "image/webp"
    return f"data:{mime};base64,{encoded}"


def append_record(records: List[Dict], record: Dict) -> List[Dict]:
    return records + [record]


def replace_record(records: List[Dict], record: Dict) -> List[Dict]:
    return [record if r.get("id") == record.get("id") else r for r in records]


def remove_record(records: List[Dict], record_id: str) -> List[Dict]:
    return [r for r in records if r.get("id") != record_id]


class ResourceView:
    def __init__(self, client: InventoryApiClient):
        self.client = client
        self.records: List[Dict] = []
        self.loaded = False

    def _fetch(self) -> List[Dict]:
        raise NotImplementedError

    def load(self):
        # Marked as loaded before fetching: a failed fetch is reported once,
        # not retried on every rerun
        self.loaded = True
        self.records = self._fetch()
        logger.debug(f"{type(self).__name__} loaded {len(self.records)} records")

    def ensure_loaded(self):
        if not self.loaded:
            self.load()


class ProductView(ResourceView):
    def __init__(self, client: InventoryApiClient):
        super().__init__(client)
        self.search_text = ""
        self.category = ""

    def _fetch(self) -> List[Dict]:
        return self.client.list_products()

    @property
    def visible(self) -> List[Dict]:
        return filter_products(self.records, self.search_text, self.category)

    def add(
        self,
        name: str,
        price: int,
        description: str,
        category: str,
        image: Optional[Tuple[str, bytes, str]] = None
    ) -> str:
        result = self.client.add_product(name, price, description, category, image=image)
        if result["id"] is None:
            # Without an id the new record cannot be patched in
            self.load()
            return result["message"]

        record = {
            "id": result["id"],
            "name": name,
            "price": int(price),
            "description": description,
            "category": category,
            "image": base64.b64encode(image[1]).decode("ascii") if image else None
        }
        self.records = append_record(self.records, record)
        return result["message"]

    def update(self, product_id: str, name: str, price: int, description: str, category: str) -> Dict:
        record = self.client.update_product(product_id, {
            "name": name,
            "price": price,
            "description": description,
            "category": category
        })
        self.records = replace_record(self.records, record)
        return record

    def delete(self, product_id: str) -> str:
        message = self.client.delete_product(product_id)
        self.records = remove_record(self.records, product_id)
        return message


class CustomerView(ResourceView):
    def _fetch(self) -> List[Dict]:
        return self.client.list_profiles()

    def add(self, first_name: str, last_name: str, gender: str, address: str) -> Dict:
        record = self.client.add_profile({
            "firstName": first_name,
            "lastName": last_name,
            "gender": gender,
            "address": address
        })
        self.records = append_record(self.records, record)
        return record

    def delete(self, profile_id: str) -> str:
        message = self.client.delete_profile(profile_id)
        self.records = remove_record(self.records, profile_id)
        return message
