# tests/test_errors.py
import asyncio
import json

from fastapi.testclient import TestClient
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request

from product_api.config import settings
from product_api.database import store
from product_api.errors import AuthenticationError, NotFoundError, ProductAPIError, ValidationError
from product_api.main import app
from product_api.middleware import http_exception_handler

client = TestClient(app)

NEW = {"name": "Pen", "description": "Blue ink", "price": 1.5, "category": "office", "inStock": True}


def test_error_classes_carry_status_and_name():
    assert NotFoundError().to_dict() == {
        "error": {"name": "NotFoundError", "message": "Resource not found", "statusCode": 404}
    }
    assert ValidationError("bad").status_code == 400
    assert AuthenticationError("nope").name == "AuthenticationError"
    assert ProductAPIError().status_code == 500


def test_unmatched_route_is_structured_404():
    r = client.get("/api/unknown?x=1")
    assert r.status_code == 404
    assert r.json() == {
        "error": {
            "name": "NotFoundError",
            "message": "Route /api/unknown?x=1 not found",
            "statusCode": 404,
        }
    }


def test_unsupported_method_is_unmatched_route():
    r = client.patch("/api/products/1", json=NEW)
    assert r.status_code == 404
    assert r.json()["error"]["message"] == "Route /api/products/1 not found"


def test_malformed_json_is_validation_error():
    r = client.post(
        "/api/products",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )
    assert r.status_code == 400
    assert r.json()["error"] == {
        "name": "ValidationError",
        "message": "Request body is not valid JSON",
        "statusCode": 400,
    }
    assert len(store) == 3


def test_unexpected_error_renders_500(monkeypatch):
    def boom():
        raise RuntimeError("store exploded")

    monkeypatch.setattr(store, "list", boom)
    c = TestClient(app, raise_server_exceptions=False)
    r = c.get("/api/products/stats")
    assert r.status_code == 500
    assert r.json() == {
        "error": {"name": "RuntimeError", "message": "store exploded", "statusCode": 500}
    }


def test_auth_not_enforced_by_default():
    assert client.post("/api/products", json=NEW).status_code == 201


def test_auth_when_enabled(monkeypatch):
    monkeypatch.setattr(settings, "REQUIRE_API_KEY", True)

    r = client.post("/api/products", json=NEW)
    assert r.status_code == 401
    assert r.json()["error"] == {
        "name": "AuthenticationError",
        "message": "API key is required",
        "statusCode": 401,
    }

    r = client.delete("/api/products/1", headers={"x-api-key": "wrong"})
    assert r.status_code == 401
    assert r.json()["error"]["message"] == "Invalid API key"
    assert len(store) == 3

    r = client.put("/api/products/1", json=NEW, headers={"x-api-key": settings.API_KEY})
    assert r.status_code == 200

    # reads stay open
    assert client.get("/api/products").status_code == 200


def _request(method="POST", path="/api/products"):
    return Request({
        "type": "http",
        "method": method,
        "path": path,
        "query_string": b"",
        "headers": [],
        "scheme": "http",
        "server": ("testserver", 80),
    })


def test_other_client_http_errors_are_validation_errors():
    exc = StarletteHTTPException(status_code=400, detail="There was an error parsing the body")
    r = asyncio.run(http_exception_handler(_request(), exc))
    assert r.status_code == 400
    assert json.loads(r.body) == {
        "error": {
            "name": "ValidationError",
            "message": "There was an error parsing the body",
            "statusCode": 400,
        }
    }


def test_server_http_errors_keep_base_error_name():
    exc = StarletteHTTPException(status_code=503, detail="Service Unavailable")
    r = asyncio.run(http_exception_handler(_request("GET", "/"), exc))
    assert r.status_code == 503
    assert json.loads(r.body)["error"]["name"] == "ProductAPIError"
