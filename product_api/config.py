# product_api/config.py
#
# Settings are read from environment variables and an optional .env file:
#
#   from product_api.config import settings
#   print(settings.PORT)

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the product API."""

    HOST: str = Field(default="0.0.0.0", description="Interface the server binds to")
    PORT: int = Field(default=3000, ge=1, le=65535, description="Listen port")

    LOG_LEVEL: str = Field(default="INFO", description="Root logging level")

    CORS_ORIGINS: str = Field(
        default="*",
        description="Comma-separated list of allowed origins",
    )

    SEED_PRODUCTS: bool = Field(
        default=True,
        description="Load the three fixture products at startup",
    )

    # Authentication stub: off unless explicitly enabled
    REQUIRE_API_KEY: bool = Field(
        default=False,
        description="Require an x-api-key header on POST, PUT and DELETE",
    )
    API_KEY: str = Field(
        default="your-secret-api-key-123",
        description="Accepted value of the x-api-key header",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
