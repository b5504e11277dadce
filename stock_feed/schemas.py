from pydantic import BaseModel, ConfigDict, Field


class Variant(BaseModel):
    """A purchasable configuration of a product, as returned by Shopify."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    sku: str | None = None
    inventory_item_id: int | None = None


class Product(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    title: str = ""
    variants: tuple[Variant, ...] = ()


class Location(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    name: str = ""


class InventoryLevel(BaseModel):
    """
    Stock of one inventory item at one location. Shopify sends `available: null`
    for untracked items, which we read as zero.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    location_id: int
    inventory_item_id: int
    available: int = 0

    @classmethod
    def from_api(cls, payload: dict) -> "InventoryLevel":
        return cls(
            location_id=payload["location_id"],
            inventory_item_id=payload["inventory_item_id"],
            available=max(payload.get("available") or 0, 0),
        )


class FeedConfig(BaseModel):
    """
    The business rules of the feed, injected into the pipeline so they can be
    swapped out in tests.
    """

    model_config = ConfigDict(frozen=True)

    supplier_id: str
    # Ordered: the feed columns follow this order.
    location_columns: dict[int, str]
    primary_location_id: int
    excluded_title_keyword: str = "Runner"
    description_suffix: str = "Machine Washable"
    target_skus: frozenset[str] = frozenset()
    description_overrides: dict[str, str] = Field(default_factory=dict)

    @property
    def quantity_columns(self) -> list[str]:
        return list(self.location_columns.values())

    @property
    def feed_columns(self) -> list[str]:
        """The fixed header of the feed file."""
        return [
            "supplier_id",
            "product_code",
            *self.quantity_columns,
            "qty_backordered",
            "item_next_availability_date",
            "item_discontinued",
            "item_description",
        ]


class FeedRow(BaseModel):
    """
    Defines the data contract for a single line of the partner feed.
    Quantity columns are dynamic (one per target location), so they are kept
    in `quantities` and flattened by `to_record`.
    """

    model_config = ConfigDict(frozen=True)

    supplier_id: str
    product_code: str
    quantities: dict[str, int]
    qty_backordered: int = Field(default=0, ge=0)
    item_next_availability_date: str = ""
    item_discontinued: int = Field(default=0, ge=0)
    item_description: str

    def to_record(self) -> dict:
        return {
            "supplier_id": self.supplier_id,
            "product_code": self.product_code,
            **self.quantities,
            "qty_backordered": self.qty_backordered,
            "item_next_availability_date": self.item_next_availability_date,
            "item_discontinued": self.item_discontinued,
            "item_description": self.item_description,
        }
