# product_api/models.py
from pydantic import BaseModel
from typing import Dict, List, Union

Number = Union[int, float]


class ProductIn(BaseModel):
    name: str
    description: str
    price: Number
    category: str
    inStock: bool


class Product(BaseModel):
    id: str
    name: str
    description: str
    price: Number
    category: str
    inStock: bool


class Pagination(BaseModel):
    currentPage: int
    totalPages: int
    totalItems: int
    itemsPerPage: int


class ProductPage(BaseModel):
    products: List[Product]
    pagination: Pagination


class SearchResult(BaseModel):
    query: str
    results: List[Product]
    count: int


class PriceRange(BaseModel):
    min: Number = 0
    max: Number = 0


class ProductStats(BaseModel):
    totalProducts: int
    inStock: int
    outOfStock: int
    categories: Dict[str, int]
    averagePrice: Number = 0
    priceRange: PriceRange


class DeleteResult(BaseModel):
    message: str
    product: Product
