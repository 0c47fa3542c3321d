# product_api/main.py
import logging
from contextlib import asynccontextmanager
from typing import Any, Optional

from fastapi import Body, Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from . import query
from .auth import require_api_key
from .config import settings
from .core import validate_product
from .database import store
from .middleware import RequestLoggingMiddleware, register_error_handlers
from .models import DeleteResult, Product, ProductPage, ProductStats, SearchResult

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Welcome to the Product API! Go to /api/products to see all products."


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting Product API with %d products", len(store))
    if settings.REQUIRE_API_KEY:
        logger.info("API key required for POST, PUT and DELETE")
    yield
    logger.info("Shutting down Product API")


app = FastAPI(
    title="Product API",
    description="CRUD, search and statistics over an in-memory product catalog.",
    version="1.0.0",
    docs_url="/api-docs",
    redoc_url=None,
    openapi_url="/swagger.json",
    # "/api/products/" is served directly rather than redirected
    redirect_slashes=False,
    lifespan=lifespan,
)

app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)


@app.get("/", response_class=PlainTextResponse)
async def root():
    return WELCOME_MESSAGE


# ---------------------------
# Product read endpoints
# ---------------------------
@app.get("/api/products", response_model=ProductPage)
@app.get("/api/products/", response_model=ProductPage, include_in_schema=False)
async def list_products(
    category: Optional[str] = None,
    search: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
):
    return query.list_products(store.list(), category=category, search=search, page=page, limit=limit)


# /search and /stats must be declared before /{product_id}
@app.get("/api/products/search", response_model=SearchResult)
@app.get("/api/products/search/", response_model=SearchResult, include_in_schema=False)
async def search_products(q: Optional[str] = None):
    return query.search_products(store.list(), q)


@app.get("/api/products/stats", response_model=ProductStats)
@app.get("/api/products/stats/", response_model=ProductStats, include_in_schema=False)
async def product_stats():
    return query.compute_stats(store.list())


@app.get("/api/products/{product_id}", response_model=Product)
@app.get("/api/products/{product_id}/", response_model=Product, include_in_schema=False)
async def get_product(product_id: str):
    return store.find_by_id(product_id)


# ---------------------------
# Product write endpoints
# ---------------------------
@app.post(
    "/api/products",
    status_code=201,
    response_model=Product,
    dependencies=[Depends(require_api_key)],
)
@app.post(
    "/api/products/",
    status_code=201,
    response_model=Product,
    dependencies=[Depends(require_api_key)],
    include_in_schema=False,
)
async def create_product(payload: Any = Body(None)):
    fields = validate_product(payload)
    return store.create(fields)


@app.put(
    "/api/products/{product_id}",
    response_model=Product,
    dependencies=[Depends(require_api_key)],
)
@app.put(
    "/api/products/{product_id}/",
    response_model=Product,
    dependencies=[Depends(require_api_key)],
    include_in_schema=False,
)
async def update_product(product_id: str, payload: Any = Body(None)):
    fields = validate_product(payload)
    return store.update(product_id, fields)


@app.delete(
    "/api/products/{product_id}",
    response_model=DeleteResult,
    dependencies=[Depends(require_api_key)],
)
@app.delete(
    "/api/products/{product_id}/",
    response_model=DeleteResult,
    dependencies=[Depends(require_api_key)],
    include_in_schema=False,
)
async def delete_product(product_id: str):
    product = store.delete(product_id)
    return {"message": "Product deleted successfully", "product": product}


def run():
    import uvicorn

    uvicorn.run(
        "product_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
