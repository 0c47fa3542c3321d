# product_api/auth.py
from typing import Optional

from fastapi import Header

from .config import settings
from .errors import AuthenticationError


async def require_api_key(x_api_key: Optional[str] = Header(None)) -> None:
    """
    API-key gate for mutating routes.

    Disabled unless REQUIRE_API_KEY is set, in which case the `x-api-key`
    header must match API_KEY.
    """
    if not settings.REQUIRE_API_KEY:
        return
    if not x_api_key:
        raise AuthenticationError("API key is required")
    if x_api_key != settings.API_KEY:
        raise AuthenticationError("Invalid API key")
