import logging
from typing import Any, Optional

import requests

from . import settings

logger = logging.getLogger(__name__)


class ShopifyClient:
    """
    Minimal Shopify Admin REST client. Every call raises on a non-2xx status;
    there is no retry, a failed request is left to the caller.
    """

    def __init__(
        self,
        store_name: Optional[str] = None,
        access_token: Optional[str] = None,
        api_key: Optional[str] = None,
        password: Optional[str] = None,
        api_version: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        store_name = store_name or settings.SHOPIFY_STORE_NAME
        api_version = api_version or settings.SHOPIFY_API_VERSION
        self.base_url = f"https://{store_name}.myshopify.com/admin/api/{api_version}"
        self.timeout = timeout if timeout is not None else settings.SHOPIFY_TIMEOUT

        self.session = session or requests.Session()

        access_token = access_token or settings.SHOPIFY_ACCESS_TOKEN
        api_key = api_key or settings.SHOPIFY_API_KEY
        password = password or settings.SHOPIFY_PASSWORD
        if access_token:
            self.session.headers.update({"X-Shopify-Access-Token": access_token})
        if api_key and password:
            self.session.auth = (api_key, password)

    def get_url(self, url: str, params: Optional[dict[str, Any]] = None) -> requests.Response:
        """GET an absolute URL, e.g. a next-page link handed back by Shopify."""
        logger.debug(f"GET {url} params={params}")
        response = self.session.get(url, params=params, timeout=self.timeout)
        response.raise_for_status()
        return response

    def get(self, resource: str, params: Optional[dict[str, Any]] = None) -> requests.Response:
        return self.get_url(f"{self.base_url}/{resource}", params=params)

    def get_json(self, resource: str, params: Optional[dict[str, Any]] = None) -> dict:
        return self.get(resource, params=params).json()

    def close(self):
        self.session.close()
