# product_api/errors.py
from typing import Any, Dict, Optional

from fastapi.responses import JSONResponse

# Every failure raised by the API carries a status code and a message and
# renders as {"error": {"name", "message", "statusCode"}}.


class ProductAPIError(Exception):
    """Base exception for the product API."""

    status_code: int = 500
    default_message: str = "Internal Server Error"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    @property
    def name(self) -> str:
        return type(self).__name__

    def to_dict(self) -> Dict[str, Any]:
        return error_body(self.name, self.message, self.status_code)


class NotFoundError(ProductAPIError):
    """Raised when a product or route does not exist."""

    status_code = 404
    default_message = "Resource not found"


class ValidationError(ProductAPIError):
    """Raised when a request payload or query parameter is malformed."""

    status_code = 400
    default_message = "Invalid request"


class AuthenticationError(ProductAPIError):
    """Raised when a mutating request lacks a valid API key."""

    status_code = 401
    default_message = "Authentication required"


def error_body(name: str, message: str, status_code: int) -> Dict[str, Any]:
    return {"error": {"name": name, "message": message, "statusCode": status_code}}


def error_response(exc: ProductAPIError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())
