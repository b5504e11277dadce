import logging

import requests

from . import utils
from .schemas import InventoryLevel, Location
from .shopify_client import ShopifyClient

logger = logging.getLogger(__name__)


class LocationRegistry:
    """Maps the target locations that exist in the store to their feed columns."""

    def __init__(self, client: ShopifyClient, location_columns: dict[int, str]):
        self.client = client
        self.location_columns = location_columns

    def resolve(self) -> dict[int, str]:
        """
        Returns {location_id: column_name} for the target locations Shopify
        knows about, in the configured column order. A failed lookup is logged
        and gives an empty mapping; every quantity column then reads 0.
        """
        try:
            payload = self.client.get_json("locations.json")
        except requests.exceptions.RequestException as e:
            logger.error(f"❌ Error fetching locations: {e}")
            return {}

        found = {
            location.id
            for location in (Location.model_validate(l) for l in payload.get("locations", []))
            if location.id in self.location_columns
        }
        mapping = {
            location_id: column
            for location_id, column in self.location_columns.items()
            if location_id in found
        }

        missing = set(self.location_columns) - found
        if missing:
            logger.warning(f"⚠️ Target locations not found in store: {sorted(missing)}")
        logger.info(f"Resolved {len(mapping)} target location(s): {mapping}")
        return mapping


class AvailabilityDateResolver:
    """Reads the shop-level "next availability" metafield as dd/mm/yyyy."""

    def __init__(self, client: ShopifyClient, namespace: str, key: str):
        self.client = client
        self.namespace = namespace
        self.key = key

    def resolve(self) -> str:
        try:
            payload = self.client.get_json(
                "metafields.json", params={"namespace": self.namespace, "key": self.key}
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"❌ Error fetching shop metafield: {e}")
            logger.info("Leaving preorder date blank due to error")
            return ""

        metafields = payload.get("metafields") or []
        if not metafields:
            logger.info("No metafield found, leaving preorder date blank")
            return ""

        raw_value = metafields[0].get("value")
        formatted = utils.format_date_ddmmyyyy(raw_value)
        logger.info(f"Fetched preorder date from metafield: {raw_value} -> formatted: {formatted!r}")
        return formatted


class InventoryLevelResolver:
    def __init__(self, client: ShopifyClient):
        self.client = client

    def resolve(self, inventory_item_id: int) -> list[InventoryLevel]:
        """All per-location levels for one inventory item. Errors propagate."""
        payload = self.client.get_json(
            "inventory_levels.json", params={"inventory_item_ids": inventory_item_id}
        )
        return [InventoryLevel.from_api(level) for level in payload.get("inventory_levels") or []]
