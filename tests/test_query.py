# tests/test_query.py
import pytest

from product_api.database import SEED_PRODUCTS
from product_api.errors import ValidationError
from product_api.query import (
    coerce_page_param,
    compute_stats,
    filter_products,
    list_products,
    paginate,
    search_products,
)


@pytest.mark.parametrize("raw,expected", [
    (None, 10),
    ("3", 3),
    (" 4 ", 4),
    ("abc", 10),
    ("2.5", 2),
    ("2abc", 2),
    ("+3", 3),
    ("abc2", 10),
    ("0.5", 10),
    ("0", 10),
    ("-1", 10),
    ("100000", 100000),
])
def test_coerce_page_param(raw, expected):
    assert coerce_page_param(raw, 10) == expected


def test_category_then_search():
    out = filter_products(SEED_PRODUCTS, category="Electronics", search="128gb")
    assert [p["name"] for p in out] == ["Smartphone"]


def test_no_filters_returns_copy():
    out = filter_products(SEED_PRODUCTS)
    assert out == SEED_PRODUCTS
    assert out is not SEED_PRODUCTS


def test_paginate_past_the_end():
    page = paginate(list(range(3)), page=5, limit=2)
    assert page["products"] == []
    assert page["pagination"] == {
        "currentPage": 5,
        "totalPages": 2,
        "totalItems": 3,
        "itemsPerPage": 2,
    }


def test_list_products_pages_filtered_results():
    page = list_products(SEED_PRODUCTS, category="electronics", page="2", limit="1")
    assert [p["id"] for p in page["products"]] == ["2"]
    assert page["pagination"]["totalPages"] == 2
    assert page["pagination"]["totalItems"] == 2


@pytest.mark.parametrize("q", [None, ""])
def test_search_requires_term(q):
    with pytest.raises(ValidationError):
        search_products(SEED_PRODUCTS, q)


def test_search_is_case_insensitive_substring():
    result = search_products(SEED_PRODUCTS, "LATEST")
    assert result["count"] == 1
    assert result["results"][0]["name"] == "Smartphone"


def test_stats_category_order_is_first_occurrence():
    products = [
        {"name": "a", "description": "", "price": 2, "category": "toys", "inStock": True},
        {"name": "b", "description": "", "price": 4, "category": "books", "inStock": False},
        {"name": "c", "description": "", "price": 3, "category": "toys", "inStock": False},
    ]
    stats = compute_stats(products)
    assert list(stats["categories"].items()) == [("toys", 2), ("books", 1)]
    assert stats["averagePrice"] == 3
    assert stats["priceRange"] == {"min": 2, "max": 4}
    assert stats["inStock"] == 1
    assert stats["outOfStock"] == 2


def test_whitespace_term_is_searched():
    assert search_products(SEED_PRODUCTS, "   ")["count"] == 0
    assert search_products(SEED_PRODUCTS, " ")["count"] == 3
