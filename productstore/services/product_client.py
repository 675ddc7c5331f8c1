# productstore/services/product_client.py
from typing import Any, Dict

import requests

from productstore.utils.retry import http_retry
from productstore.utils.settings import PRODUCT_SERVICE_URL, API_KEY_HEADER
from productstore.utils.logging import get_logger

logger = get_logger(__name__)


class ProductClient:
    """
    HTTP client for the product service.
    Reads are retried on connection problems, writes are sent exactly once.
    """

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: int = 2,
        session: requests.Session | None = None,
    ):
        self.base_url = (base_url or PRODUCT_SERVICE_URL).rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or requests.Session()

    def _url(self, product_id: str | None = None) -> str:
        url = f"{self.base_url}/api/products"
        if product_id is not None:
            url = f"{url}/{product_id}"
        return url

    def _auth_headers(self) -> Dict[str, str]:
        if not self.api_key:
            return {}
        return {API_KEY_HEADER: self.api_key}

    def _send(self, method: str, url: str, **kwargs) -> Any:
        logger.info(f"ProductClient {method} {url}")
        resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
        resp.raise_for_status()
        return resp.json()

    @http_retry()
    def list_products(
        self,
        page: int | None = None,
        limit: int | None = None,
        category: str | None = None,
        in_stock: bool | None = None,
    ) -> dict:
        params: Dict[str, Any] = {}
        if page is not None:
            params["page"] = page
        if limit is not None:
            params["limit"] = limit
        if category:
            params["category"] = category
        if in_stock is not None:
            params["inStock"] = "true" if in_stock else "false"
        return self._send("GET", self._url(), params=params)

    @http_retry()
    def fetch_product(self, product_id: str) -> dict:
        return self._send("GET", self._url(product_id))

    def create_product(self, product: dict) -> dict:
        return self._send("POST", self._url(), json=product, headers=self._auth_headers())

    def update_product(self, product_id: str, product: dict) -> dict:
        return self._send("PUT", self._url(product_id), json=product, headers=self._auth_headers())

    def delete_product(self, product_id: str) -> dict:
        return self._send("DELETE", self._url(product_id), headers=self._auth_headers())
