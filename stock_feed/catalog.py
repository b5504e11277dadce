import logging
from typing import Iterator, Optional

import requests

from .schemas import Product
from .shopify_client import ShopifyClient

logger = logging.getLogger(__name__)


class CatalogFetcher:
    """
    Pulls the whole product catalog page by page by following the
    `Link: <...>; rel="next"` header Shopify returns. Products already seen
    are dropped, and a page with no products or no next link ends the walk.
    Request errors are not caught, so one failed page fails the whole fetch.
    """

    def __init__(self, client: ShopifyClient, page_size: int = 250):
        self.client = client
        self.page_size = page_size

    def fetch_all(self) -> list[Product]:
        logger.info("Starting to fetch products from Shopify...")

        all_products: list[Product] = []
        seen_ids: set[int] = set()

        for page in self._iter_pages():
            new_products = [p for p in page if p.id not in seen_ids]
            seen_ids.update(p.id for p in new_products)
            all_products.extend(new_products)
            logger.info(
                f"Fetched {len(page)} products, total so far: {len(all_products)}"
            )

        logger.info(f"Fetched a total of {len(all_products)} products.")
        return all_products

    def _iter_pages(self) -> Iterator[list[Product]]:
        response = self.client.get("products.json", params={"limit": self.page_size})
        while True:
            products = _parse_products(response)
            if not products:
                return
            yield products

            next_url = _next_link(response)
            if not next_url:
                return
            # The next link already carries limit and page_info.
            response = self.client.get_url(next_url)


def _parse_products(response: requests.Response) -> list[Product]:
    return [Product.model_validate(p) for p in response.json().get("products", [])]


def _next_link(response: requests.Response) -> Optional[str]:
    return response.links.get("next", {}).get("url")
