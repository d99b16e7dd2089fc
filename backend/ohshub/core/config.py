"""Runtime settings of the OHSHub API, read from the environment."""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """API settings.

    Every field can be set through an environment variable
    of the same name (case-insensitive) or a `.env` file.
    """

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    environment: Literal["development", "production"] = "development"
    api_docs_enabled: bool | None = None

    # CORS
    cors_allow_origins: Annotated[list[str], NoDecode] = ["http://localhost:3000"]
    cors_allow_methods: Annotated[list[str], NoDecode] = ["GET", "POST", "OPTIONS"]
    cors_allow_headers: Annotated[list[str], NoDecode] = [
        "Accept",
        "Content-Type",
        "X-Request-ID",
        "X-Metrics-Token",
    ]
    cors_allow_credentials: bool = False

    # Prometheus scrape token (required in production)
    metrics_token: str | None = None

    # Plain-text summary footer
    report_product_name: str = "OHSHub"

    @field_validator(
        "cors_allow_origins",
        "cors_allow_methods",
        "cors_allow_headers",
        mode="before",
    )
    @classmethod
    def _parse_csv_lists(cls, v):
        if v is None:
            return []
        if isinstance(v, str):
            return [item.strip() for item in v.split(",") if item.strip()]
        return v

    @property
    def docs_enabled(self) -> bool:
        if self.api_docs_enabled is None:
            return self.environment != "production"
        return self.api_docs_enabled

    @model_validator(mode="after")
    def _validate_production_settings(self) -> Settings:
        if self.environment != "production":
            return self

        for name in ("cors_allow_origins", "cors_allow_methods", "cors_allow_headers"):
            if "*" in getattr(self, name):
                raise ValueError(f"{name.upper()} cannot contain '*' in production")

        return self


@lru_cache
def get_settings() -> Settings:
    """Settings of the running process, built once."""
    return Settings()
