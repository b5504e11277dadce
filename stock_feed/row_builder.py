from typing import Iterable, Optional

from .schemas import FeedConfig, FeedRow, InventoryLevel, Product, Variant


def is_eligible(variant: Variant, product: Product, config: FeedConfig) -> bool:
    """A variant is reported only if it has an allow-listed SKU and its product is not excluded."""
    if config.excluded_title_keyword and config.excluded_title_keyword in product.title:
        return False
    if not variant.sku:
        return False
    return variant.sku in config.target_skus


def quantities_by_column(
    levels: Iterable[InventoryLevel],
    registry: dict[int, str],
    config: FeedConfig,
) -> dict[str, int]:
    """
    One entry per configured location column, always in the configured order.
    Locations missing from the registry or without a level record read 0.
    """
    available_by_location = {level.location_id: level.available for level in levels}
    return {
        column: available_by_location.get(location_id, 0) if location_id in registry else 0
        for location_id, column in config.location_columns.items()
    }


def build_description(variant: Variant, product: Product, config: FeedConfig) -> str:
    override = config.description_overrides.get(variant.sku)
    if override:
        return override
    return f"{product.title} {config.description_suffix}"


def build_row(
    variant: Variant,
    product: Product,
    levels: Iterable[InventoryLevel],
    registry: dict[int, str],
    default_date: str,
    config: FeedConfig,
) -> Optional[FeedRow]:
    """
    Turns one variant plus its inventory levels into a feed row, or None when
    the variant does not belong in the feed. Pure: no I/O.
    """
    if not is_eligible(variant, product, config):
        return None

    quantities = quantities_by_column(levels, registry, config)

    # Out of stock at the primary location means the item is on preorder.
    primary_column = config.location_columns.get(config.primary_location_id)
    primary_qty = quantities.get(primary_column, 0) if primary_column else 0
    next_date = default_date if primary_qty == 0 else ""

    return FeedRow(
        supplier_id=config.supplier_id,
        product_code=variant.sku,
        quantities=quantities,
        qty_backordered=0,
        item_next_availability_date=next_date,
        item_discontinued=0,
        item_description=build_description(variant, product, config),
    )
