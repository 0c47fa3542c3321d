# sdk/products.py
import requests
import httpx
from typing import Any, Dict, Optional


class ProductClientError(Exception):
    """An error response from the product API."""

    def __init__(self, status_code: int, name: str, message: str):
        super().__init__(f"{status_code} {name}: {message}")
        self.status_code = status_code
        self.name = name
        self.message = message


def _check(r) -> Any:
    """Return the decoded body, or raise ProductClientError for 4xx/5xx."""
    if r.status_code < 400:
        return r.json()
    try:
        err = r.json().get("error", {})
    except ValueError:
        err = {}
    raise ProductClientError(
        r.status_code,
        err.get("name", "HTTPError"),
        err.get("message", r.text or f"HTTP {r.status_code}"),
    )


def _list_params(category, search, page, limit) -> Dict[str, Any]:
    params = {}
    if category:
        params["category"] = category
    if search:
        params["search"] = search
    if page is not None:
        params["page"] = page
    if limit is not None:
        params["limit"] = limit
    return params


class ProductClient:
    def __init__(self, base_url: str = "http://localhost:3000", api_key: Optional[str] = None,
                 timeout: int = 10, session: Optional[Any] = None):
        self.base_url = base_url.rstrip("/")
        # any requests-compatible session (requests.Session, starlette TestClient, ...)
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        self.api_key = api_key
        if api_key:
            self.session.headers.update({"x-api-key": api_key})

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    # Read
    def list_products(self, category: Optional[str] = None, search: Optional[str] = None,
                      page: Optional[int] = None, limit: Optional[int] = None):
        r = self.session.get(self._url("/api/products"),
                             params=_list_params(category, search, page, limit), timeout=self.timeout)
        return _check(r)

    def search_products(self, q: str):
        r = self.session.get(self._url("/api/products/search"), params={"q": q}, timeout=self.timeout)
        return _check(r)

    def get_stats(self):
        r = self.session.get(self._url("/api/products/stats"), timeout=self.timeout)
        return _check(r)

    def get_product(self, product_id: str):
        r = self.session.get(self._url(f"/api/products/{product_id}"), timeout=self.timeout)
        return _check(r)

    # Write
    def create_product(self, name: str, description: str, price: float, category: str, in_stock: bool = True):
        r = self.session.post(self._url("/api/products"), json={
            "name": name, "description": description, "price": price,
            "category": category, "inStock": in_stock,
        }, timeout=self.timeout)
        return _check(r)

    def update_product(self, product_id: str, name: str, description: str, price: float,
                       category: str, in_stock: bool):
        r = self.session.put(self._url(f"/api/products/{product_id}"), json={
            "name": name, "description": description, "price": price,
            "category": category, "inStock": in_stock,
        }, timeout=self.timeout)
        return _check(r)

    def delete_product(self, product_id: str):
        r = self.session.delete(self._url(f"/api/products/{product_id}"), timeout=self.timeout)
        return _check(r)

    # Async listing (example)
    async def list_products_async(self, category: Optional[str] = None, search: Optional[str] = None,
                                  page: Optional[int] = None, limit: Optional[int] = None,
                                  transport: Optional[httpx.AsyncBaseTransport] = None):
        headers = {"x-api-key": self.api_key} if self.api_key else None
        async with httpx.AsyncClient(timeout=self.timeout, transport=transport, headers=headers) as client:
            r = await client.get(self._url("/api/products"), params=_list_params(category, search, page, limit))
            return _check(r)
