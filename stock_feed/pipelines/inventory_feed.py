import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Optional

from stock_feed import data_handler, row_builder, settings
from stock_feed.catalog import CatalogFetcher
from stock_feed.delivery import DeliveryClient
from stock_feed.exceptions import EmptyFeedError
from stock_feed.pipeline import DataPipeline
from stock_feed.resolvers import (
    AvailabilityDateResolver,
    InventoryLevelResolver,
    LocationRegistry,
)
from stock_feed.schemas import FeedConfig, FeedRow, Product
from stock_feed.shopify_client import ShopifyClient

logger = logging.getLogger(__name__)


@dataclass
class ExtractedCatalog:
    products: list[Product]
    registry: dict[int, str]
    default_date: str


class StockFeedPipeline(DataPipeline):
    """
    Shopify catalog -> per-location stock rows -> partner CSV -> FTP drop.
    """

    def __init__(
        self,
        config: FeedConfig,
        client: Optional[ShopifyClient] = None,
        delivery: Optional[DeliveryClient] = None,
        page_size: Optional[int] = None,
        output_dir: Optional[Path] = None,
        run_date: Optional[date] = None,
        test_mode: bool = False,
    ):
        super().__init__("stock feed", test_mode=test_mode)
        self.config = config
        self.client = client or ShopifyClient()
        self.delivery = delivery or DeliveryClient()
        self.output_dir = output_dir or settings.OUTPUT_DIR
        self.run_date = run_date or date.today()

        self.catalog = CatalogFetcher(
            self.client,
            page_size=page_size or settings.RESULTS_PER_PAGE,
        )
        self.locations = LocationRegistry(self.client, config.location_columns)
        self.availability = AvailabilityDateResolver(
            self.client, settings.METAFIELD_NAMESPACE, settings.METAFIELD_KEY
        )
        self.inventory = InventoryLevelResolver(self.client)

    def extract(self) -> ExtractedCatalog:
        logger.info("--- Starting Stock Feed Process ---")
        registry = self.locations.resolve()
        default_date = self.availability.resolve()
        products = self.catalog.fetch_all()
        return ExtractedCatalog(products=products, registry=registry, default_date=default_date)

    def transform(self, raw_data: ExtractedCatalog) -> list[FeedRow]:
        logger.info("\n--- Building Feed Rows ---")
        rows: list[FeedRow] = []

        for product in raw_data.products:
            for variant in product.variants:
                # Only qualifying variants cost an inventory lookup.
                if not row_builder.is_eligible(variant, product, self.config):
                    continue

                logger.info(f"Processing variant SKU: {variant.sku} for product: {product.title}")
                levels = (
                    self.inventory.resolve(variant.inventory_item_id)
                    if variant.inventory_item_id is not None
                    else []
                )
                row = row_builder.build_row(
                    variant,
                    product,
                    levels,
                    raw_data.registry,
                    raw_data.default_date,
                    self.config,
                )
                if row is not None:
                    rows.append(row)

        logger.info(f"Total rows to export: {len(rows)}")
        if not rows:
            raise EmptyFeedError("No data available to export.")
        return rows

    def load(self, validated_data: list[FeedRow]) -> Path:
        path = data_handler.save_feed(
            validated_data,
            self.config.feed_columns,
            self.config.supplier_id,
            output_dir=self.output_dir,
            run_date=self.run_date,
        )

        if self.test_mode:
            logger.info("🧪 Test Mode: Skipping FTP upload.")
            return path

        self.delivery.upload(path)
        return path

    def run(self) -> Path:
        try:
            return super().run()
        finally:
            self.client.close()
