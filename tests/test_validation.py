# tests/test_validation.py
import pytest

from product_api.core import _make_product_dict, validate_product
from product_api.errors import ValidationError

GOOD = {
    "name": "Mug",
    "description": "Ceramic mug",
    "price": 9,
    "category": "kitchen",
    "inStock": False,
}


def test_valid_payload_is_returned_untrimmed():
    p = validate_product({**GOOD, "name": " Mug "})
    assert p.name == " Mug "
    assert p.price == 9
    assert p.inStock is False


def test_first_failing_rule_wins():
    with pytest.raises(ValidationError) as exc:
        validate_product({"price": -1, "inStock": "no"})
    assert exc.value.message == "Name is required and cannot be blank"


@pytest.mark.parametrize("field,value,message", [
    ("description", "  ", "Description is required and cannot be blank"),
    ("price", True, "Price is required and must be a positive number"),
    ("price", float("nan"), "Price is required and must be a positive number"),
    ("price", None, "Price is required and must be a positive number"),
    ("category", "", "Category is required and cannot be blank"),
    ("inStock", 1, "inStock must be a boolean value"),
])
def test_rule_messages(field, value, message):
    with pytest.raises(ValidationError) as exc:
        validate_product({**GOOD, field: value})
    assert exc.value.message == message
    assert exc.value.status_code == 400


def test_non_object_body():
    with pytest.raises(ValidationError, match="JSON object"):
        validate_product(["Mug"])


def test_product_dict_is_trimmed():
    p = validate_product({**GOOD, "name": "\tMug\n", "category": " kitchen "})
    assert _make_product_dict("abc", p) == {
        "id": "abc",
        "name": "Mug",
        "description": "Ceramic mug",
        "price": 9,
        "category": "kitchen",
        "inStock": False,
    }
