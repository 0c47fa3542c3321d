# tests/test_concurrency.py
import asyncio

import httpx

from product_api.database import store
from product_api.main import app


async def _create_task(ac, i):
    return await ac.post("/api/products", json={
        "name": f"Item {i}",
        "description": "bulk",
        "price": i + 1,
        "category": "bulk",
        "inStock": True,
    })


async def _create_many(n):
    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as ac:
        return await asyncio.gather(*(_create_task(ac, i) for i in range(n)))


def test_concurrent_creates_get_unique_ids():
    results = asyncio.run(_create_many(20))
    assert [r.status_code for r in results] == [201] * 20
    ids = {r.json()["id"] for r in results}
    assert len(ids) == 20
    assert len(store) == 23
    assert store.list()[:3] == [store.find_by_id(pid) for pid in ("1", "2", "3")]
