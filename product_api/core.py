# product_api/core.py
import math
from typing import Any, Dict, Optional

from .errors import ValidationError
from .models import ProductIn

# Request payload rules for create/update. Checked in order; the first
# violated rule is the one reported.


def _is_blank_text(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a price
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return isinstance(value, int) or math.isfinite(value)


def validate_product(payload: Optional[Any]) -> ProductIn:
    """
    Check a raw JSON body against the product rules and return it as a
    ProductIn. Values are returned untrimmed; the store trims on write.
    Raises ValidationError describing the first failing rule.
    """
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")

    if _is_blank_text(payload.get("name")):
        raise ValidationError("Name is required and cannot be blank")

    if _is_blank_text(payload.get("description")):
        raise ValidationError("Description is required and cannot be blank")

    price = payload.get("price")
    if not _is_number(price) or price <= 0:
        raise ValidationError("Price is required and must be a positive number")

    if _is_blank_text(payload.get("category")):
        raise ValidationError("Category is required and cannot be blank")

    if not isinstance(payload.get("inStock"), bool):
        raise ValidationError("inStock must be a boolean value")

    return ProductIn(
        name=payload["name"],
        description=payload["description"],
        price=price,
        category=payload["category"],
        inStock=payload["inStock"],
    )


def _make_product_dict(product_id: str, p: ProductIn) -> Dict[str, Any]:
    return {
        "id": product_id,
        "name": p.name.strip(),
        "description": p.description.strip(),
        "price": p.price,
        "category": p.category.strip(),
        "inStock": p.inStock,
    }
