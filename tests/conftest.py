# tests/conftest.py
import pytest

from product_api.database import store


@pytest.fixture(autouse=True)
def reset_store():
    # every test starts from the three seed products
    store.reset()
    yield
    store.reset()
