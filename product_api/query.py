# product_api/query.py
import math
import re
from typing import Any, Dict, List, Optional

from .errors import ValidationError

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def coerce_page_param(raw: Optional[str], default: int) -> int:
    """Parse the leading integer of a page/limit query value ("2.5" and "2abc"
    both give 2), falling back to `default` when it is absent, has no leading
    digits, or is below 1. There is no upper bound."""
    if raw is None:
        return default
    match = _LEADING_INT.match(str(raw))
    if not match:
        return default
    value = int(match.group(1))
    return value if value >= 1 else default


def _matches_text(product: Dict[str, Any], term: str) -> bool:
    term = term.lower()
    return term in product["name"].lower() or term in product["description"].lower()


def filter_products(
    products: List[Dict[str, Any]],
    category: Optional[str] = None,
    search: Optional[str] = None,
) -> List[Dict[str, Any]]:
    out = list(products)
    if category:
        wanted = category.lower()
        out = [p for p in out if p["category"].lower() == wanted]
    if search:
        out = [p for p in out if _matches_text(p, search)]
    return out


def paginate(items: List[Dict[str, Any]], page: int, limit: int) -> Dict[str, Any]:
    start = (page - 1) * limit
    end = page * limit
    total = len(items)
    return {
        "products": items[start:end],
        "pagination": {
            "currentPage": page,
            "totalPages": math.ceil(total / limit),
            "totalItems": total,
            "itemsPerPage": limit,
        },
    }


def list_products(
    products: List[Dict[str, Any]],
    category: Optional[str] = None,
    search: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
) -> Dict[str, Any]:
    filtered = filter_products(products, category=category, search=search)
    return paginate(
        filtered,
        coerce_page_param(page, DEFAULT_PAGE),
        coerce_page_param(limit, DEFAULT_LIMIT),
    )


def search_products(products: List[Dict[str, Any]], q: Optional[str]) -> Dict[str, Any]:
    if not q:
        raise ValidationError("Query parameter 'q' is required to search products")
    results = [p for p in products if _matches_text(p, q)]
    return {"query": q, "results": results, "count": len(results)}


def compute_stats(products: List[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Aggregate figures over the whole (unfiltered) collection.

    `categories` preserves the order in which each category first appears.
    Prices are plain floating-point arithmetic with no rounding; an empty
    collection reports 0 for the average and for both ends of the range.
    """
    in_stock = sum(1 for p in products if p["inStock"])
    stats: Dict[str, Any] = {
        "totalProducts": len(products),
        "inStock": in_stock,
        "outOfStock": len(products) - in_stock,
        "categories": {},
        "averagePrice": 0,
        "priceRange": {"min": 0, "max": 0},
    }
    if not products:
        return stats

    for p in products:
        stats["categories"][p["category"]] = stats["categories"].get(p["category"], 0) + 1

    prices = [p["price"] for p in products]
    stats["averagePrice"] = sum(prices) / len(prices)
    stats["priceRange"] = {"min": min(prices), "max": max(prices)}
    return stats
