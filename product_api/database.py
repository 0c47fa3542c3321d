import copy
import logging
import uuid
from typing import Any, Dict, Iterable, List

from .config import settings
from .core import _make_product_dict
from .errors import NotFoundError
from .models import ProductIn

# This file holds the in-memory product store. The store lives for the
# lifetime of the process and is not safe for parallel workers: mutations
# assume a single event loop running each handler to completion.

logger = logging.getLogger(__name__)

SEED_PRODUCTS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "name": "Laptop",
        "description": "High-performance laptop with 16GB RAM",
        "price": 1200,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "2",
        "name": "Smartphone",
        "description": "Latest model with 128GB storage",
        "price": 800,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "3",
        "name": "Coffee Maker",
        "description": "Programmable coffee maker with timer",
        "price": 50,
        "category": "kitchen",
        "inStock": False,
    },
]


class ProductStore:
    """Ordered collection of product dicts keyed by their string id."""

    def __init__(self, seed: Iterable[Dict[str, Any]] = ()):
        self._seed = [dict(p) for p in seed]
        self._products: List[Dict[str, Any]] = []
        self.reset()

    def __len__(self) -> int:
        return len(self._products)

    def reset(self) -> None:
        self._products = copy.deepcopy(self._seed)

    def list(self) -> List[Dict[str, Any]]:
        return list(self._products)

    def _index_of(self, product_id: str) -> int:
        for i, p in enumerate(self._products):
            if p["id"] == product_id:
                return i
        raise NotFoundError(f"Product with ID {product_id} not found")

    def find_by_id(self, product_id: str) -> Dict[str, Any]:
        return self._products[self._index_of(product_id)]

    def create(self, fields: ProductIn) -> Dict[str, Any]:
        pid = uuid.uuid4().hex
        product = _make_product_dict(pid, fields)
        self._products.append(product)
        logger.info("Created product %s (%s)", pid, product["name"])
        return product

    def update(self, product_id: str, fields: ProductIn) -> Dict[str, Any]:
        i = self._index_of(product_id)
        self._products[i] = _make_product_dict(product_id, fields)
        logger.info("Updated product %s", product_id)
        return self._products[i]

    def delete(self, product_id: str) -> Dict[str, Any]:
        i = self._index_of(product_id)
        product = self._products.pop(i)
        logger.info("Deleted product %s", product_id)
        return product


store = ProductStore(SEED_PRODUCTS if settings.SEED_PRODUCTS else ())
