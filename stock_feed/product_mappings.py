# --- Feed Allow-List ---
# Only these SKUs are reported to the trading partner. Anything else in the
# Shopify catalog is ignored.
TARGET_SKUS = [
    "RUG-OAK-160",
    "RUG-OAK-200",
    "RUG-OAK-240",
    "RUG-SAND-160",
    "RUG-SAND-200",
    "RUG-SAND-240",
    "RUG-SLATE-160",
    "RUG-SLATE-200",
    "RUG-SLATE-240",
    "RUG-IVORY-160",
    "RUG-IVORY-200",
    "RUG-IVORY-240",
    "RUG-MOSS-ROUND-150",
    "RUG-MOSS-ROUND-200",
]

# --- Description Overrides ---
# Partner listing text per SKU. SKUs not listed here get
# "<product title> Machine Washable".
DESCRIPTION_OVERRIDES = {
    "RUG-OAK-160": "Oak Washable Rug 160x230cm",
    "RUG-OAK-200": "Oak Washable Rug 200x290cm",
    "RUG-OAK-240": "Oak Washable Rug 240x330cm",
    "RUG-MOSS-ROUND-150": "Moss Round Washable Rug 150cm",
    "RUG-MOSS-ROUND-200": "Moss Round Washable Rug 200cm",
}
