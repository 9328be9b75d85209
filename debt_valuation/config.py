"""Configuration management using Pydantic Settings"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Session storage (in-memory unless overridden)
    database_url: str = "sqlite+pysqlite:///:memory:"

    # Rate source: "static" uses the bundled table, "remote" calls rate_api_base
    rate_source: Literal["static", "remote"] = "static"
    rate_api_base: str = "http://localhost:8001"

    # Service
    service_name: str = "debt-valuation"
    log_level: str = "INFO"

    # HTTP Client
    http_timeout_seconds: float = 5.0

    # Reports run up to the last period covered by the bundled table
    report_end_year: int = 2026
    report_end_month: int = 2

    # Calculation
    rounding_mode: Literal["ROUND_HALF_UP", "ROUND_HALF_EVEN"] = "ROUND_HALF_UP"
    month_label_language: Literal["tr", "en"] = "tr"


settings = Settings()
