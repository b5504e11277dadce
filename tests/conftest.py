# tests/conftest.py
from unittest.mock import MagicMock

import pytest
import requests

from stock_feed.schemas import FeedConfig, InventoryLevel, Product, Variant
from stock_feed.shopify_client import ShopifyClient

PRIMARY_LOCATION = 72401355001
SECONDARY_LOCATION = 72401322233
BASE_URL = "https://test-store.myshopify.com/admin/api/2023-04"


def make_response(payload: dict, next_url: str | None = None, status_code: int = 200) -> MagicMock:
    """A stand-in for requests.Response with just what the client touches."""
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.json.return_value = payload
    response.links = {"next": {"url": next_url, "rel": "next"}} if next_url else {}
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
    return response


def make_product(product_id: int, title: str, *variants: tuple) -> dict:
    """Shopify-shaped product dict. Variants are (variant_id, sku, inventory_item_id)."""
    return {
        "id": product_id,
        "title": title,
        "variants": [
            {"id": vid, "sku": sku, "inventory_item_id": item_id} for vid, sku, item_id in variants
        ],
    }


@pytest.fixture
def feed_config():
    return FeedConfig(
        supplier_id="SUP123",
        location_columns={PRIMARY_LOCATION: "quantity", SECONDARY_LOCATION: "qty_on_order"},
        primary_location_id=PRIMARY_LOCATION,
        excluded_title_keyword="Runner",
        description_suffix="Machine Washable",
        target_skus={"ABC-1", "OAK-1", "OAK-2"},
        description_overrides={"OAK-2": "Oak Table Large, 8 Seater"},
    )


@pytest.fixture
def registry(feed_config):
    return dict(feed_config.location_columns)


@pytest.fixture
def oak_table():
    return Product(
        id=1,
        title="Oak Table",
        variants=[Variant(id=11, sku="OAK-1", inventory_item_id=111)],
    )


@pytest.fixture
def mock_session():
    session = MagicMock(spec=requests.Session)
    session.headers = {}
    session.auth = None
    return session


@pytest.fixture
def shopify_client(mock_session):
    return ShopifyClient(
        store_name="test-store",
        access_token="shpat_test",
        api_version="2023-04",
        session=mock_session,
    )


@pytest.fixture
def level():
    def _level(location_id: int, available: int, item_id: int = 111) -> InventoryLevel:
        return InventoryLevel(location_id=location_id, inventory_item_id=item_id, available=available)

    return _level
